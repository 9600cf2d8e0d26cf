"""
Rendering surface backed by QMediaPlayer.

Wraps a QMediaPlayer (with audio output) behind the RenderingSurface
interface and reports end-of-media and player errors to the controller.
"""
import logging
from pathlib import Path

from PySide6.QtCore import QObject, QUrl
from PySide6.QtMultimedia import QMediaPlayer, QAudioOutput

from sample_player_app.core import RenderingSurface

logger = logging.getLogger(__name__)


class QtRenderingSurface(RenderingSurface):
    """QMediaPlayer rendering surface.

    Args:
        media_control: Object the transport controls drive (usually the
            SampleVideoPlayer widget, so clicks go through the controller)
        parent: Optional QObject parent for the media player
    """

    def __init__(self, media_control=None, parent: QObject = None):
        super().__init__()
        self.media_control = media_control
        self.controls = None

        self.player = QMediaPlayer(parent)
        self.audio = QAudioOutput(parent)
        self.player.setAudioOutput(self.audio)

        self.player.mediaStatusChanged.connect(self._on_media_status_changed)
        self.player.errorOccurred.connect(self._on_error_occurred)

    # ---------- media operations ----------
    def start(self) -> None:
        self.player.play()

    def pause(self) -> None:
        self.player.pause()

    def stop_playback(self) -> None:
        self.player.stop()

    def reset(self) -> None:
        """Stop and drop the current source."""
        self.player.stop()
        self.player.setSource(QUrl())

    def set_target(self, target) -> None:
        self.player.setVideoOutput(target)

    def set_transport_controls(self, controls) -> None:
        if self.controls is not None and self.controls is not controls:
            self.controls.set_media_player(None)
            self.controls.hide()
        self.controls = controls
        if controls is not None:
            controls.set_media_player(self.media_control)
            controls.show()

    def set_source(self, path) -> None:
        self.player.setSource(QUrl.fromLocalFile(str(Path(path))))

    def seek_to(self, position_ms: int) -> None:
        self.player.setPosition(int(position_ms))

    def get_current_position(self) -> int:
        return self.player.position()

    def get_duration(self) -> int:
        return self.player.duration()

    # ---------- player signals ----------
    def _on_media_status_changed(self, status):
        if status == QMediaPlayer.MediaStatus.EndOfMedia:
            self.dispatch_completion()

    def _on_error_occurred(self, error, message=""):
        if error == QMediaPlayer.Error.NoError:
            return
        what = getattr(error, "value", error)
        logger.error("QMediaPlayer error %s: %s", what, message)
        self.dispatch_error(int(what), 0)
