"""
Playback controller for the sample video player.

The controller sits between a rendering surface and the application's player
callbacks. It tracks the playback state, owns the surface's completion and
error handlers, and turns state transitions into callback events.
"""
import logging
from abc import ABC, abstractmethod
from pathlib import Path

from .callbacks import PlayerCallbackList
from .errors import UnsupportedOperationError
from .models import PlaybackState, PlaybackStatus

logger = logging.getLogger(__name__)


class VideoPlayer(ABC):
    """Operations a video player exposes to application code."""

    @abstractmethod
    def play(self) -> None:
        pass

    @abstractmethod
    def pause(self) -> None:
        pass

    @abstractmethod
    def stop_playback(self) -> None:
        pass

    @abstractmethod
    def disable_playback_controls(self) -> None:
        pass

    @abstractmethod
    def enable_playback_controls(self) -> None:
        pass

    @abstractmethod
    def add_player_callback(self, callback) -> None:
        pass

    @abstractmethod
    def remove_player_callback(self, callback) -> None:
        pass


class PlaybackController(VideoPlayer):
    """Tracks playback state on top of a rendering surface.

    Installs the surface's completion and error handlers at construction;
    they cannot be replaced afterwards. Transport controls are attached
    immediately.

    Args:
        surface: RenderingSurface to drive
        target: Output handle the surface renders into
        transport_controls: Controls attached by enable_playback_controls()
    """

    def __init__(self, surface, target=None, transport_controls=None):
        self._surface = surface
        self._target = target
        self._transport_controls = transport_controls
        self._controls_enabled = False
        self._state = PlaybackState.STOPPED
        self._source = None
        self._callbacks = PlayerCallbackList()

        surface.install_callbacks(self._on_native_completion, self._on_native_error)
        if target is not None:
            surface.set_target(target)
        self.enable_playback_controls()

    # ---------- state ----------
    @property
    def playback_state(self) -> PlaybackState:
        return self._state

    @property
    def controls_enabled(self) -> bool:
        return self._controls_enabled

    @property
    def source(self):
        return self._source

    def is_playing(self) -> bool:
        return self._state is PlaybackState.PLAYING

    def status(self) -> PlaybackStatus:
        """Return a snapshot of the player."""
        return PlaybackStatus(
            state=self._state,
            source=self._source,
            position_ms=max(self._surface.get_current_position(), 0),
            duration_ms=max(self._surface.get_duration(), 0),
            controls_enabled=self._controls_enabled,
        )

    # ---------- playback ----------
    def play(self) -> None:
        self.start()

    def start(self) -> None:
        """Start or resume playback.

        Fires on_play when leaving STOPPED, on_resume when leaving PAUSED,
        and nothing when already playing.
        """
        self._surface.start()
        old_state = self._state
        self._state = PlaybackState.PLAYING
        logger.debug("start: %s -> %s", old_state.value, self._state.value)

        if old_state is PlaybackState.STOPPED:
            self._callbacks.notify("on_play")
        elif old_state is PlaybackState.PAUSED:
            self._callbacks.notify("on_resume")

    def pause(self) -> None:
        """Pause playback. on_pause fires even if already paused."""
        self._surface.pause()
        self._state = PlaybackState.PAUSED
        logger.debug("pause")
        self._callbacks.notify("on_pause")

    def stop_playback(self) -> None:
        """Stop playback. No callback fires."""
        self._surface.stop_playback()
        self._state = PlaybackState.STOPPED
        logger.debug("stop_playback")

    def set_video_path(self, path) -> None:
        """Load a new media source. The playback state is left as is.

        Args:
            path: Path to the media file
        """
        self._source = str(Path(path))
        logger.info("Loading media %s", self._source)
        self._surface.set_source(path)

    def seek_to(self, position_ms: int) -> None:
        self._surface.seek_to(int(position_ms))

    def get_current_position(self) -> int:
        return self._surface.get_current_position()

    def get_duration(self) -> int:
        return self._surface.get_duration()

    # ---------- transport controls ----------
    def disable_playback_controls(self) -> None:
        self._surface.set_transport_controls(None)
        self._controls_enabled = False

    def enable_playback_controls(self) -> None:
        self._surface.set_transport_controls(self._transport_controls)
        self._controls_enabled = True

    # ---------- callbacks ----------
    def add_player_callback(self, callback) -> None:
        self._callbacks.add(callback)
        logger.debug("add_player_callback: %d registered", len(self._callbacks))

    def remove_player_callback(self, callback) -> None:
        self._callbacks.remove(callback)

    def set_on_completion_listener(self, listener) -> None:
        # Completion is handled by the controller only.
        raise UnsupportedOperationError("The completion listener cannot be replaced")

    def set_on_error_listener(self, listener) -> None:
        # Errors are handled by the controller only.
        raise UnsupportedOperationError("The error listener cannot be replaced")

    # ---------- surface handlers ----------
    def _on_native_completion(self, surface) -> None:
        # Controls must be detached while the decoder is reset, otherwise
        # loading the next source from on_completed can crash the player.
        self.disable_playback_controls()
        finished = self._source
        surface.reset()
        self._source = None
        surface.set_target(self._target)
        self.enable_playback_controls()
        self._state = PlaybackState.STOPPED
        logger.debug("completion: %s", finished)

        self._callbacks.notify("on_completed")

    def _on_native_error(self, surface, what, extra) -> bool:
        logger.warning("Playback error on %s: what=%s extra=%s", self._source, what, extra)
        self._state = PlaybackState.STOPPED
        self._callbacks.notify("on_error")

        # Handled; the surface must not follow up with a completion.
        return True
