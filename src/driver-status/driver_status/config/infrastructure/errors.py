"""Error types raised by config infrastructure."""

from pathlib import Path

from driver_status.core.errors import DriverStatusError


class ConfigValidationError(DriverStatusError):
    """Raised when the loaded config fails schema validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate config: {reason}")


class ConfigLoadError(DriverStatusError):
    """Raised when the config file cannot be opened, read, or parsed as YAML."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to load config {path}: {reason}")
