"""Top-level DemoConfig aggregate — the root configuration object."""

from typing import Annotated

from pydantic import BaseModel, Field

from driver_status.driver.domain.status import DriverStatus

ManagerName = Annotated[str, Field(min_length=1)]


class DriverConfig(BaseModel, frozen=True):
    name: str = Field(default="Ted Lasso", min_length=1)
    initial_status: DriverStatus = DriverStatus.AVAILABLE


class ListenersConfig(BaseModel, frozen=True):
    managers: list[ManagerName] = Field(default_factory=lambda: ["Rebecca", "Higgins"])
    dispatch_team: bool = True

    def labels(self) -> list[str]:
        """Human-readable kinds of listener this config produces, for the banner."""
        labels: list[str] = []
        if self.managers:
            labels.append("DriverManager")
        if self.dispatch_team:
            labels.append("DispatchTeam")
        return labels


class DemoConfig(BaseModel, frozen=True):
    """Root configuration aggregate for a driver-status session."""

    driver: DriverConfig = Field(default_factory=DriverConfig)
    listeners: ListenersConfig = Field(default_factory=ListenersConfig)


def default_config() -> DemoConfig:
    return DemoConfig()
