"""Driver — the subject whose status changes are broadcast to listeners."""

from driver_status.driver.domain.errors import ListenerNotificationError
from driver_status.driver.domain.failure import ListenerFailure
from driver_status.driver.domain.listener import DriverListener
from driver_status.driver.domain.observer import DriverObserver
from driver_status.driver.domain.status import DriverStatus


class Driver:
    """Holds a driver's status and the ordered list of listeners watching it.

    Listeners are notified synchronously, in registration order, every time
    ``change_status`` is called. The same listener may be registered more than
    once and is then notified once per registration.

    The driver does not validate statuses itself; callers resolve user input
    with ``parse_status`` before calling ``change_status``.
    """

    def __init__(
        self,
        name: str,
        observer: DriverObserver,
        status: DriverStatus = DriverStatus.AVAILABLE,
    ) -> None:
        self._name = name
        self._status = status
        self._observer = observer
        self._listeners: list[DriverListener] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def status(self) -> DriverStatus:
        return self._status

    @property
    def listeners(self) -> tuple[DriverListener, ...]:
        return tuple(self._listeners)

    def register(self, listener: DriverListener) -> None:
        self._listeners.append(listener)
        self._observer.listener_registered(
            driver_name=self._name,
            listener=repr(listener),
            listener_count=len(self._listeners),
        )

    def unregister(self, listener: DriverListener) -> None:
        """Remove the first registration of *listener* (by identity); no-op if absent."""
        for index, registered in enumerate(self._listeners):
            if registered is listener:
                del self._listeners[index]
                self._observer.listener_unregistered(
                    driver_name=self._name,
                    listener=repr(listener),
                    listener_count=len(self._listeners),
                )
                return

    def change_status(self, new_status: DriverStatus) -> None:
        """Overwrite the status, then notify every listener once.

        Raises:
            ListenerNotificationError: if any listener failed; the new status is kept.
        """
        old_status = self._status
        self._status = new_status
        self._observer.status_changed(
            driver_name=self._name,
            old_status=old_status.value,
            new_status=new_status.value,
            listener_count=len(self._listeners),
        )
        self.notify()

    def notify(self) -> None:
        """
        Call ``update`` on each registered listener, in registration order.

        A listener that raises does not stop the others. Failures are collected
        and reported together once every listener has run.

        Raises:
            ListenerNotificationError: listing every failed listener, chained
                from the first underlying exception.
        """
        failures: list[ListenerFailure] = []
        first_error: Exception | None = None

        # Iterate over a snapshot so listeners may (un)register during update.
        for listener in tuple(self._listeners):
            try:
                listener.update(self)
            except Exception as exc:  # noqa: BLE001
                label = repr(listener)
                reason = str(exc) or type(exc).__name__
                failures.append(ListenerFailure(listener=label, reason=reason))
                self._observer.listener_failed(
                    driver_name=self._name, listener=label, reason=reason
                )
                if first_error is None:
                    first_error = exc

        if failures:
            raise ListenerNotificationError(failures=failures) from first_error
