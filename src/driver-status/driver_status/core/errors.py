"""Base exception class for all driver-status-specific errors."""


class DriverStatusError(Exception):
    """Base class for all driver-status errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
