"""
TransportBar widget for media playback controls.

This module defines a widget with play/pause button and position slider
that drives whatever media player it is attached to.
"""
import logging

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QHBoxLayout, QPushButton, QSlider

logger = logging.getLogger(__name__)


class TransportBar(QWidget):
    """Media player transport controls widget.

    Provides play/pause button and position slider. Clicks are forwarded to
    the media player set with set_media_player(); while no player is attached
    the bar is disabled.
    """

    def __init__(self, parent=None):
        """Initialize the TransportBar widget.

        Args:
            parent: Optional parent widget
        """
        super().__init__(parent)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        # Play/Pause button
        self.btn = QPushButton("▶")
        self.btn.setFixedWidth(40)
        self.btn.clicked.connect(self._toggle_play_pause)
        layout.addWidget(self.btn)

        # Position slider (milliseconds)
        self.slider = QSlider(Qt.Horizontal)
        self.slider.setRange(0, 1000)
        self.slider.sliderReleased.connect(self._on_slider_released)
        layout.addWidget(self.slider)

        self.is_playing = False
        self.media_player = None
        self.setEnabled(False)

    def set_media_player(self, player) -> None:
        """Attach the player driven by this bar, or detach with None.

        Args:
            player: Object providing play(), pause(), seek_to(ms) and is_playing()
        """
        self.media_player = player
        self.setEnabled(player is not None)
        if player is not None:
            self.set_playing(player.is_playing())

    def _toggle_play_pause(self):
        """Toggle between play and pause states."""
        if self.media_player is None:
            return
        if not self.is_playing:
            self.media_player.play()
        else:
            self.media_player.pause()

    def _on_slider_released(self):
        """Handle slider release event to seek to new position."""
        if self.media_player is not None:
            self.media_player.seek_to(self.slider.value())

    def update_position(self, position_ms):
        """Update the slider position without triggering signals.

        Args:
            position_ms: Current position in milliseconds
        """
        self.slider.blockSignals(True)
        self.slider.setValue(position_ms)
        self.slider.blockSignals(False)

    def update_duration(self, duration_ms):
        """Update the slider range based on media duration.

        Args:
            duration_ms: Media duration in milliseconds
        """
        self.slider.setRange(0, duration_ms)

    def set_playing(self, playing):
        """Set the playing state of the button.

        Args:
            playing: True if playing, False if paused or stopped
        """
        self.is_playing = playing
        self.btn.setText("⏸" if playing else "▶")
