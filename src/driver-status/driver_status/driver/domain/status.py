"""DriverStatus enumeration and parsing of user-supplied status text."""

from enum import StrEnum

from driver_status.driver.domain.errors import InvalidStatusError


class DriverStatus(StrEnum):
    """The fixed set of statuses a driver can be in, in display order."""

    AVAILABLE = "Available"
    EN_ROUTE = "En Route"
    STOPPED = "Stopped"
    DELIVERED = "Delivered"


def available_statuses(current: DriverStatus) -> list[DriverStatus]:
    """Return every status except *current*, in declaration order."""
    return [status for status in DriverStatus if status != current]


def parse_status(text: str, current: DriverStatus) -> DriverStatus:
    """
    Resolve *text* to one of the statuses a driver in *current* may move to.

    Matching is exact on the display value after trimming whitespace.

    Raises:
        InvalidStatusError: if *text* is not a known status, or is the current one.
    """
    allowed = available_statuses(current=current)
    candidate = text.strip()
    for status in allowed:
        if status.value == candidate:
            return status
    raise InvalidStatusError(text=candidate, allowed=[s.value for s in allowed])
