"""build_listeners — turns ListenersConfig into concrete console listeners."""

from driver_status.config.domain.config import ListenersConfig
from driver_status.driver.domain.listener import DriverListener
from driver_status.driver.infrastructure.listeners import (
    DispatchTeamListener,
    DriverManagerListener,
    Writer,
)


def build_listeners(config: ListenersConfig, write: Writer) -> list[DriverListener]:
    """Return managers in configured order, followed by the dispatch team if enabled."""
    listeners: list[DriverListener] = [
        DriverManagerListener(name=name, write=write) for name in config.managers
    ]
    if config.dispatch_team:
        listeners.append(DispatchTeamListener(write=write))
    return listeners
