"""
Player widget for video playback in the sample video player.
"""
import logging
from pathlib import Path

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QWidget, QVBoxLayout
from PySide6.QtMultimediaWidgets import QVideoWidget

from sample_player_app.config import SHOW_CONTROLS
from sample_player_app.core import PlaybackController, PlaybackState
from .event_bus import PlaybackSignalBridge
from .qt_surface import QtRenderingSurface
from .transport_bar import TransportBar

logger = logging.getLogger(__name__)


class SampleVideoPlayer(QWidget):
    """Video widget that reports playback events to player callbacks.

    Composes a QVideoWidget, a TransportBar and a rendering surface, with a
    PlaybackController tracking state on top. Completion and error handling
    belong to the controller and cannot be replaced.

    Signals:
        positionChanged: Emitted with position in seconds as media plays
    """
    positionChanged = Signal(float)  # seconds

    def __init__(self, parent=None, surface=None, show_controls: bool = SHOW_CONTROLS):
        """Initialize the player widget.

        Args:
            parent: Optional parent widget
            surface: RenderingSurface to use; a QtRenderingSurface is created if omitted
            show_controls: Whether transport controls start attached
        """
        super().__init__(parent)
        self.controller = None

        self.video = QVideoWidget(self)
        self.bar = TransportBar(self)
        self.bar.hide()

        lay = QVBoxLayout(self)
        lay.setContentsMargins(0, 0, 0, 0)
        lay.setSpacing(0)
        lay.addWidget(self.video)
        lay.addWidget(self.bar)

        if surface is None:
            surface = QtRenderingSurface(media_control=self, parent=self)
            surface.player.positionChanged.connect(self._on_position_changed)
            surface.player.durationChanged.connect(self.bar.update_duration)
        self.surface = surface

        # Registered first so the transport button follows every transition
        self.signals = PlaybackSignalBridge(self)
        self.signals.stateChanged.connect(self._on_state_changed)

        self.controller = PlaybackController(
            surface, target=self.video, transport_controls=self.bar
        )
        self.controller.add_player_callback(self.signals)
        if not show_controls:
            self.controller.disable_playback_controls()

    # ---------- playback ----------
    def play(self):
        self.controller.play()

    def start(self):
        self.controller.start()

    def pause(self):
        self.controller.pause()

    def stop_playback(self):
        self.controller.stop_playback()
        self.bar.set_playing(False)

    def load(self, path: Path):
        """Load media file from path without starting playback.

        Args:
            path: Path to media file
        """
        self.controller.set_video_path(path)

    set_video_path = load

    def seek_to(self, position_ms: int):
        self.controller.seek_to(position_ms)

    def seek(self, sec: float):
        """Seek to position in seconds.

        Args:
            sec: Position in seconds
        """
        self.controller.seek_to(int(sec * 1000))

    def get_current_position(self) -> int:
        return self.controller.get_current_position()

    def get_duration(self) -> int:
        return self.controller.get_duration()

    def is_playing(self) -> bool:
        return self.controller is not None and self.controller.is_playing()

    @property
    def playback_state(self) -> PlaybackState:
        return self.controller.playback_state

    def status(self):
        return self.controller.status()

    # ---------- controls & callbacks ----------
    def enable_playback_controls(self):
        self.controller.enable_playback_controls()

    def disable_playback_controls(self):
        self.controller.disable_playback_controls()

    def add_player_callback(self, callback):
        self.controller.add_player_callback(callback)

    def remove_player_callback(self, callback):
        self.controller.remove_player_callback(callback)

    def set_on_completion_listener(self, listener):
        self.controller.set_on_completion_listener(listener)

    def set_on_error_listener(self, listener):
        self.controller.set_on_error_listener(listener)

    # ---------- internals ----------
    def _on_state_changed(self, state: str):
        self.bar.set_playing(state == PlaybackState.PLAYING.value)

    def _on_position_changed(self, position_ms):
        self.bar.update_position(position_ms)
        self.positionChanged.emit(position_ms / 1000.0)
