#!/usr/bin/env python3
"""Development server runner for Galactic Wars."""

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "galactic_wars.server.main:app",
        host="0.0.0.0",
        port=3000,
        reload=True,  # Auto-reload on code changes
        log_level="info",
    )
