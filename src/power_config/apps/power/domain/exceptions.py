"""Domain exceptions for power configuration."""
from typing import Optional


class InvalidPowerConfiguration(ValueError):
    """Raised when a power configuration cannot be constructed."""

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.key = key


class InvalidPowerValue(ValueError):
    """Raised when asset values do not satisfy a power configuration."""

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.key = key
