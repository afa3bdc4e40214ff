from __future__ import annotations

from typing import Any


class InvalidInputError(ValueError):
    """Raised when a registry call receives a value of the wrong shape."""

    def __init__(self, message: str, received: Any = None) -> None:
        super().__init__(message)
        self.received = received
