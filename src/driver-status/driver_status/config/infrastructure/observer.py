"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, path: str, driver_name: str) -> None:
        self._log.info("config.loaded", path=path, driver_name=driver_name)

    def config_defaults_used(self) -> None:
        self._log.info("config.defaults_used")
