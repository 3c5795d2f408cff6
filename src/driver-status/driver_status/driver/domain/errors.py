"""Error types raised by the driver domain."""

from driver_status.core.errors import DriverStatusError
from driver_status.driver.domain.failure import ListenerFailure


class InvalidStatusError(DriverStatusError):
    """Raised when user-supplied text does not name an allowed status."""

    def __init__(self, text: str, allowed: list[str]) -> None:
        self.text = text
        self.allowed = allowed
        super().__init__(
            f"Invalid status {text!r}: expected one of {', '.join(allowed)}"
        )


class ListenerNotificationError(DriverStatusError):
    """Raised after a notification in which one or more listeners failed.

    Every listener has already been invoked by the time this is raised.
    """

    def __init__(self, failures: list[ListenerFailure]) -> None:
        self.failures = failures
        names = ", ".join(f.listener for f in failures)
        super().__init__(
            f"Failed to notify {len(failures)} listener(s): {names}"
        )
