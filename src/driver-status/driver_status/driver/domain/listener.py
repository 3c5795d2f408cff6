"""Listener port — anything that wants to hear about driver status changes."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from driver_status.driver.domain.driver import Driver


class DriverListener(Protocol):
    """Receives the driver after every status change.

    Implementations read ``driver.name`` and ``driver.status`` and must not
    mutate the driver.
    """

    def update(self, driver: "Driver") -> None: ...
