"""HTTP/WebSocket surface for Galactic Wars lobbies."""
