"""
Qt signal bridge for player callbacks.

This module provides a QObject that can be registered as a player callback
and re-emits every playback event as a Qt signal, so panels can connect to
player events without implementing PlayerCallback themselves.
"""
import logging
from PySide6.QtCore import QObject, Signal

from sample_player_app.core import PlaybackState

logger = logging.getLogger(__name__)


class PlaybackSignalBridge(QObject):
    """Player callback that emits Qt signals.

    Implements the PlayerCallback events (on_play, on_resume, on_pause,
    on_completed, on_error).
    """
    # ===== lifecycle =====
    played = Signal()
    resumed = Signal()
    paused = Signal()
    completed = Signal()
    errored = Signal()

    # ===== derived =====
    stateChanged = Signal(str)                  # PlaybackState value
    eventFired = Signal(str)                    # callback name, for logging panels

    def on_play(self):
        self.played.emit()
        self._emit("on_play", PlaybackState.PLAYING)

    def on_resume(self):
        self.resumed.emit()
        self._emit("on_resume", PlaybackState.PLAYING)

    def on_pause(self):
        self.paused.emit()
        self._emit("on_pause", PlaybackState.PAUSED)

    def on_completed(self):
        self.completed.emit()
        self._emit("on_completed", PlaybackState.STOPPED)

    def on_error(self):
        self.errored.emit()
        self._emit("on_error", PlaybackState.STOPPED)

    def _emit(self, event: str, state: PlaybackState):
        logger.debug("player event %s", event)
        self.eventFired.emit(event)
        self.stateChanged.emit(state.value)


__all__ = ["PlaybackSignalBridge"]
