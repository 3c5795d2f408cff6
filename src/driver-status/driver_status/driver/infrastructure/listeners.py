"""Console listeners — print a notification line whenever a driver's status changes."""

from collections.abc import Callable
from typing import TypeAlias

import typer

from driver_status.driver.domain.driver import Driver

Writer: TypeAlias = Callable[[str], None]


class DriverManagerListener:
    """A named driver manager who is told the driver's new status.

    Does NOT inherit from DriverListener (structural typing via Protocol).
    """

    def __init__(self, name: str, write: Writer = typer.echo) -> None:
        self._name = name
        self._write = write

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"DriverManagerListener(name={self._name!r})"

    def update(self, driver: Driver) -> None:
        self._write(
            f"📋 Driver Manager {self._name}: {{{driver.name}}} is now {{{driver.status}}}"
        )


class DispatchTeamListener:
    """The dispatch desk, notified of every status change.

    Does NOT inherit from DriverListener (structural typing via Protocol).
    """

    def __init__(self, write: Writer = typer.echo) -> None:
        self._write = write

    def __repr__(self) -> str:
        return "DispatchTeamListener()"

    def update(self, driver: Driver) -> None:
        self._write(
            f"📡 Dispatch notified: {{{driver.name}}} status changed to {{{driver.status}}}"
        )
