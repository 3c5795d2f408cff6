"""StructlogDriverObserver — production observer that delegates to structlog."""

import structlog


class StructlogDriverObserver:
    """Logs driver domain events to structlog.

    Does NOT inherit from DriverObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def listener_registered(
        self, driver_name: str, listener: str, listener_count: int
    ) -> None:
        self._log.info(
            "driver.listener_registered",
            driver_name=driver_name,
            listener=listener,
            listener_count=listener_count,
        )

    def listener_unregistered(
        self, driver_name: str, listener: str, listener_count: int
    ) -> None:
        self._log.info(
            "driver.listener_unregistered",
            driver_name=driver_name,
            listener=listener,
            listener_count=listener_count,
        )

    def status_changed(
        self,
        driver_name: str,
        old_status: str,
        new_status: str,
        listener_count: int,
    ) -> None:
        self._log.info(
            "driver.status_changed",
            driver_name=driver_name,
            old_status=old_status,
            new_status=new_status,
            listener_count=listener_count,
        )

    def listener_failed(self, driver_name: str, listener: str, reason: str) -> None:
        self._log.error(
            "driver.listener_failed",
            driver_name=driver_name,
            listener=listener,
            reason=reason,
        )
