"""Tests for the Driver subject: registration, status changes, and notification."""

import pytest

from driver_status.driver.domain.driver import Driver
from driver_status.driver.domain.errors import ListenerNotificationError
from driver_status.driver.domain.status import DriverStatus
from tests.driver.fake_listener import FailingListener, RecordingListener
from tests.driver.fake_observer import FakeDriverObserver


def _make_driver(observer: FakeDriverObserver | None = None) -> Driver:
    return Driver(name="Ted Lasso", observer=observer or FakeDriverObserver())


class TestDriverDefaults:
    def test_starts_available(self) -> None:
        driver = _make_driver()

        assert driver.status is DriverStatus.AVAILABLE

    def test_initial_status_can_be_overridden(self) -> None:
        driver = Driver(
            name="Ted Lasso",
            observer=FakeDriverObserver(),
            status=DriverStatus.STOPPED,
        )

        assert driver.status is DriverStatus.STOPPED

    def test_starts_with_no_listeners(self) -> None:
        assert _make_driver().listeners == ()

    def test_name_is_read_only(self) -> None:
        driver = _make_driver()

        with pytest.raises(AttributeError):
            driver.name = "Roy Kent"  # type: ignore[misc]


class TestRegister:
    """register appends in order and allows duplicates."""

    def test_listeners_kept_in_registration_order(self) -> None:
        calls: list[tuple[str, DriverStatus]] = []
        first = RecordingListener(name="first", calls=calls)
        second = RecordingListener(name="second", calls=calls)
        driver = _make_driver()

        driver.register(first)
        driver.register(second)

        assert driver.listeners == (first, second)

    def test_duplicate_registration_is_notified_twice(self) -> None:
        calls: list[tuple[str, DriverStatus]] = []
        listener = RecordingListener(name="dup", calls=calls)
        driver = _make_driver()

        driver.register(listener)
        driver.register(listener)
        driver.notify()

        assert calls == [
            ("dup", DriverStatus.AVAILABLE),
            ("dup", DriverStatus.AVAILABLE),
        ]

    def test_emits_registered_event_with_count(self) -> None:
        observer = FakeDriverObserver()
        driver = _make_driver(observer=observer)

        driver.register(RecordingListener(name="a", calls=[]))
        driver.register(RecordingListener(name="b", calls=[]))

        assert [e.listener_count for e in observer.registered] == [1, 2]
        assert observer.registered[0].driver_name == "Ted Lasso"
        assert observer.registered[1].listener == "RecordingListener('b')"


class TestUnregister:
    """unregister removes exactly one registration, by identity."""

    def test_removes_listener(self) -> None:
        calls: list[tuple[str, DriverStatus]] = []
        listener = RecordingListener(name="gone", calls=calls)
        driver = _make_driver()
        driver.register(listener)

        driver.unregister(listener)

        assert driver.listeners == ()

    def test_second_unregister_is_noop(self) -> None:
        listener = RecordingListener(name="gone", calls=[])
        observer = FakeDriverObserver()
        driver = _make_driver(observer=observer)
        driver.register(listener)

        driver.unregister(listener)
        driver.unregister(listener)

        assert driver.listeners == ()
        assert len(observer.unregistered) == 1

    def test_unregister_unknown_listener_is_noop(self) -> None:
        kept = RecordingListener(name="kept", calls=[])
        driver = _make_driver()
        driver.register(kept)

        driver.unregister(RecordingListener(name="stranger", calls=[]))

        assert driver.listeners == (kept,)

    def test_removes_only_first_of_duplicates(self) -> None:
        listener = RecordingListener(name="dup", calls=[])
        other = RecordingListener(name="other", calls=[])
        driver = _make_driver()
        driver.register(listener)
        driver.register(other)
        driver.register(listener)

        driver.unregister(listener)

        assert driver.listeners == (other, listener)

    def test_matches_by_identity_not_equality(self) -> None:
        class AlwaysEqual:
            def __eq__(self, other: object) -> bool:
                return True

            __hash__ = object.__hash__

            def update(self, driver: Driver) -> None:
                pass

        registered = AlwaysEqual()
        lookalike = AlwaysEqual()
        driver = _make_driver()
        driver.register(registered)

        driver.unregister(lookalike)

        assert len(driver.listeners) == 1
        assert driver.listeners[0] is registered

    def test_unregistered_listener_not_notified(self) -> None:
        calls: list[tuple[str, DriverStatus]] = []
        listener = RecordingListener(name="gone", calls=calls)
        driver = _make_driver()
        driver.register(listener)
        driver.unregister(listener)

        driver.change_status(new_status=DriverStatus.STOPPED)

        assert calls == []


class TestChangeStatus:
    def test_sets_status(self) -> None:
        driver = _make_driver()

        driver.change_status(new_status=DriverStatus.DELIVERED)

        assert driver.status is DriverStatus.DELIVERED

    def test_notifies_each_listener_once_in_order_with_new_status(self) -> None:
        calls: list[tuple[str, DriverStatus]] = []
        driver = _make_driver()
        driver.register(RecordingListener(name="manager", calls=calls))
        driver.register(RecordingListener(name="dispatch", calls=calls))

        driver.change_status(new_status=DriverStatus.EN_ROUTE)

        assert calls == [
            ("manager", DriverStatus.EN_ROUTE),
            ("dispatch", DriverStatus.EN_ROUTE),
        ]

    def test_same_status_still_notifies(self) -> None:
        calls: list[tuple[str, DriverStatus]] = []
        driver = _make_driver()
        driver.register(RecordingListener(name="l", calls=calls))

        driver.change_status(new_status=DriverStatus.AVAILABLE)

        assert calls == [("l", DriverStatus.AVAILABLE)]

    def test_emits_status_changed_event(self) -> None:
        observer = FakeDriverObserver()
        driver = _make_driver(observer=observer)
        driver.register(RecordingListener(name="l", calls=[]))

        driver.change_status(new_status=DriverStatus.STOPPED)

        assert len(observer.status_changes) == 1
        event = observer.status_changes[0]
        assert event.old_status == "Available"
        assert event.new_status == "Stopped"
        assert event.listener_count == 1


class TestNotify:
    def test_with_no_listeners_does_nothing(self) -> None:
        _make_driver().notify()

    def test_listener_registered_during_update_waits_for_next_notification(
        self,
    ) -> None:
        calls: list[tuple[str, DriverStatus]] = []
        late = RecordingListener(name="late", calls=calls)
        driver = _make_driver()

        class Registrar:
            def update(self, driver: Driver) -> None:
                driver.register(late)

        driver.register(Registrar())

        driver.notify()
        assert calls == []

        driver.notify()
        assert calls == [("late", DriverStatus.AVAILABLE)]


class TestNotifyFailureIsolation:
    """A failing listener does not stop the rest; failures are reported together."""

    def test_later_listeners_still_notified(self) -> None:
        calls: list[tuple[str, DriverStatus]] = []
        driver = _make_driver()
        driver.register(RecordingListener(name="before", calls=calls))
        driver.register(FailingListener())
        driver.register(RecordingListener(name="after", calls=calls))

        with pytest.raises(ListenerNotificationError):
            driver.change_status(new_status=DriverStatus.EN_ROUTE)

        assert calls == [
            ("before", DriverStatus.EN_ROUTE),
            ("after", DriverStatus.EN_ROUTE),
        ]

    def test_status_change_is_kept(self) -> None:
        driver = _make_driver()
        driver.register(FailingListener())

        with pytest.raises(ListenerNotificationError):
            driver.change_status(new_status=DriverStatus.DELIVERED)

        assert driver.status is DriverStatus.DELIVERED

    def test_error_lists_every_failure_in_order(self) -> None:
        driver = _make_driver()
        driver.register(FailingListener(message="first boom"))
        driver.register(FailingListener(message="second boom"))

        with pytest.raises(ListenerNotificationError) as exc_info:
            driver.notify()

        reasons = [f.reason for f in exc_info.value.failures]
        assert reasons == ["first boom", "second boom"]
        assert exc_info.value.failures[0].listener == "FailingListener()"

    def test_error_is_chained_from_first_exception(self) -> None:
        driver = _make_driver()
        driver.register(FailingListener(message="root cause"))

        with pytest.raises(ListenerNotificationError) as exc_info:
            driver.notify()

        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert str(exc_info.value.__cause__) == "root cause"

    def test_each_failure_emits_event(self) -> None:
        observer = FakeDriverObserver()
        driver = _make_driver(observer=observer)
        driver.register(FailingListener(message="boom"))

        with pytest.raises(ListenerNotificationError):
            driver.notify()

        assert len(observer.failures) == 1
        assert observer.failures[0].reason == "boom"

    def test_exception_without_message_reports_type_name(self) -> None:
        class SilentFailure:
            def update(self, driver: Driver) -> None:
                raise ValueError()

        driver = _make_driver()
        driver.register(SilentFailure())

        with pytest.raises(ListenerNotificationError) as exc_info:
            driver.notify()

        assert exc_info.value.failures[0].reason == "ValueError"
