"""Tests for the transient notification."""

from services.notification_service import Notifier


class TestNotifier:
    def test_show_makes_message_visible(self, notifier):
        notifier.show("Hello")
        assert notifier.visible
        assert notifier.message == "Hello"

    def test_hides_after_delay(self, notifier, scheduler):
        notifier.show("Hello")
        scheduler.advance(1999)
        assert notifier.visible
        scheduler.advance(1)
        assert not notifier.visible

    def test_new_message_overwrites_immediately(self, notifier):
        notifier.show("first")
        notifier.show("second")
        assert notifier.message == "second"
        assert notifier.visible

    def test_later_message_gets_full_delay(self, notifier, scheduler):
        """An earlier hide timer must not cut a newer message short."""
        notifier.show("first")
        scheduler.advance(1500)
        notifier.show("second")

        scheduler.advance(600)  # first timer would have fired here
        assert notifier.visible
        assert notifier.message == "second"

        scheduler.advance(1400)
        assert not notifier.visible
        assert len(scheduler.cancelled) == 1

    def test_on_change_callback(self, scheduler):
        events = []
        notifier = Notifier(scheduler, on_change=lambda m, v: events.append((m, v)), delay_ms=10)

        notifier.show("Saved")
        scheduler.advance(10)

        assert events == [("Saved", True), ("Saved", False)]
