"""Result values returned by engine operations."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class ErrorType(Enum):
    """Named reasons an engine operation can fail."""

    NOT_STARTED = "NotStarted"
    CAPACITY_EXCEEDED = "CapacityExceeded"
    INSUFFICIENT_PLAYERS = "InsufficientPlayers"
    SHIP_NOT_FOUND = "ShipNotFound"
    SPEED_EXCEEDED = "SpeedExceeded"
    INSUFFICIENT_FUEL = "InsufficientFuel"
    NO_AMMO = "NoAmmo"
    TARGET_NOT_FOUND = "TargetNotFound"
    TARGET_ELIMINATED = "TargetEliminated"
    OUT_OF_RANGE = "OutOfRange"
    UNKNOWN_SHIP_TYPE = "UnknownShipType"
    INSUFFICIENT_MATERIALS = "InsufficientMaterials"
    NO_ALIVE_PLAYERS = "NoAlivePlayers"


@dataclass
class Outcome:
    """Discriminated result of an engine operation.

    Either ok is True with a message (and optional payload), or error holds
    a human-readable reason and error_type classifies it. Callers test
    `outcome.error` (or `not outcome.ok`) as the only failure signal.
    """

    ok: bool
    message: Optional[str] = None
    error: Optional[str] = None
    error_type: Optional[ErrorType] = None
    payload: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def success(cls, message: str, **payload) -> "Outcome":
        return cls(ok=True, message=message, payload=payload)

    @classmethod
    def failure(cls, error_type: ErrorType, reason: str) -> "Outcome":
        return cls(ok=False, error=reason, error_type=error_type)

    def to_dict(self) -> dict:
        """Render as a JSON-compatible dict for transport."""
        if not self.ok:
            return {"error": self.error, "errorType": self.error_type.value}
        return {"ok": True, "message": self.message, **self.payload}
