# services/notification_service.py
from typing import Any, Callable, Protocol

from utils.logger import get_logger
from utils.settings import NOTIFICATION_DELAY_MS


class Scheduler(Protocol):
    # The subset of the Tk widget API used for timers; tk.Tk satisfies it.
    def after(self, ms: int, func: Callable[[], Any]) -> Any: ...

    def after_cancel(self, timer_id: Any) -> None: ...


class Notifier:
    """
    Transient notification message.

    show() overwrites whatever is on screen immediately and (re)starts the
    hide timer. The pending timer of an earlier message is cancelled first,
    so a newer message always stays up for the full delay.

    `on_change(message, visible)` is called whenever the displayed state
    changes; the GUI uses it to update its notification label.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        on_change: Callable[[str, bool], None] | None = None,
        delay_ms: int = NOTIFICATION_DELAY_MS,
    ):
        self.scheduler = scheduler
        self.on_change = on_change
        self.delay_ms = delay_ms
        self.message = ""
        self.visible = False
        self._pending = None
        self.logger = get_logger("notify")

    def show(self, message: str):
        if self._pending is not None:
            self.scheduler.after_cancel(self._pending)
            self._pending = None

        self.message = message
        self.visible = True
        self.logger.info(f"notification: {message}")
        self._emit()
        self._pending = self.scheduler.after(self.delay_ms, self._hide)

    def _hide(self):
        self._pending = None
        self.visible = False
        self._emit()

    def _emit(self):
        if self.on_change is not None:
            self.on_change(self.message, self.visible)
