"""Startup banner describing the driver and the listeners registered on it."""

from rich.console import Console
from rich.markup import escape

from driver_status.config.domain.config import DemoConfig

_TITLE = "Observer Pattern Demo: Trucking Company"


def print_banner(console: Console, config: DemoConfig) -> None:
    """Render the demo title rule and the setup steps that were performed."""
    labels = config.listeners.labels()
    observers = " and ".join(labels) if labels else "none"

    console.print()
    console.rule(f"[bold]{_TITLE}[/bold]", characters="=")
    console.print()
    console.print(f"- Created driver: {escape(config.driver.name)}\n", highlight=False)
    console.print(f"- Created observers: {observers}\n", highlight=False)
    console.print("- Observers added to driver\n", highlight=False)
