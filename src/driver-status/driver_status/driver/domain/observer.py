"""Observer port for the driver domain — defines events in domain language."""

from typing import Protocol


class DriverObserver(Protocol):
    """Observer port emitting structured events as a driver changes.

    Implementations may log to structlog or record for tests.
    """

    def listener_registered(
        self, driver_name: str, listener: str, listener_count: int
    ) -> None: ...

    def listener_unregistered(
        self, driver_name: str, listener: str, listener_count: int
    ) -> None: ...

    def status_changed(
        self,
        driver_name: str,
        old_status: str,
        new_status: str,
        listener_count: int,
    ) -> None: ...

    def listener_failed(self, driver_name: str, listener: str, reason: str) -> None: ...
