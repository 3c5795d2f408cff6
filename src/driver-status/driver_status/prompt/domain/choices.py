"""Formatting of the status choices offered to the user."""

from driver_status.driver.domain.status import DriverStatus


def format_choices(statuses: list[DriverStatus]) -> str:
    """Join statuses as ``A, B, or C``; a single status is returned on its own."""
    values = [s.value for s in statuses]
    if len(values) == 1:
        return values[0]
    return ", ".join(values[:-1]) + ", or " + values[-1]
