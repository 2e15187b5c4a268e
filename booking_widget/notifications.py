"""
Transient success/error banner with an owned dismissal timer.
"""
import asyncio
import logging
from typing import Optional

from booking_widget.config import settings
from booking_widget.views import NotificationBanner

logger = logging.getLogger(__name__)


class Notifier:
    """
    Shows a message on the banner and hides it after `duration` seconds.
    Only one dismissal is ever pending: a new message cancels the previous
    timer before scheduling its own.
    """

    def __init__(
        self,
        banner: NotificationBanner,
        duration: Optional[float] = None,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        self.banner = banner
        self.loop = loop
        self.duration = settings.NOTIFICATION_SECONDS if duration is None else duration
        self._dismiss_handle: Optional[asyncio.TimerHandle] = None

    @property
    def pending(self) -> bool:
        return self._dismiss_handle is not None

    def _event_loop(self) -> asyncio.AbstractEventLoop:
        if self.loop is not None:
            return self.loop
        try:
            return asyncio.get_running_loop()
        except RuntimeError:
            raise RuntimeError("Notifier needs a running event loop or an explicit loop") from None

    def notify(self, message: str, is_error: bool = False) -> None:
        """
        Raises RuntimeError, leaving the banner untouched, when called with
        no running loop and no loop given at construction.
        """
        loop = self._event_loop()
        self.cancel()
        self.banner.message = message
        self.banner.is_error = is_error
        self.banner.visible = True
        if is_error:
            logger.debug("error notification: %s", message)
        self._dismiss_handle = loop.call_later(self.duration, self.dismiss)

    def dismiss(self) -> None:
        self._dismiss_handle = None
        self.banner.visible = False

    def cancel(self) -> None:
        if self._dismiss_handle is not None:
            self._dismiss_handle.cancel()
            self._dismiss_handle = None
