"""
Rendering surface interface.

A rendering surface is the media stack the controller drives: it decodes and
displays video and reports completion and errors back through two callback
slots. The slots can be installed exactly once, by the owning controller.
"""
import logging
from abc import ABC, abstractmethod

from .errors import UnsupportedOperationError

logger = logging.getLogger(__name__)


class RenderingSurface(ABC):
    """Base class for rendering surfaces.

    Concrete surfaces implement the media operations and call
    dispatch_completion() / dispatch_error() when the underlying
    player reports those events.
    """

    def __init__(self):
        self._on_completion = None
        self._on_error = None
        self._callbacks_installed = False

    # ---------- callback slots ----------
    def install_callbacks(self, on_completion, on_error) -> None:
        """Install the completion and error handlers.

        Args:
            on_completion: Callable taking the surface
            on_error: Callable taking (surface, what, extra); a truthy
                return value marks the error as handled

        Raises:
            UnsupportedOperationError: If handlers were already installed
        """
        if self._callbacks_installed:
            raise UnsupportedOperationError(
                "Completion and error handlers are owned by the playback controller"
            )
        self._on_completion = on_completion
        self._on_error = on_error
        self._callbacks_installed = True

    @property
    def callbacks_installed(self) -> bool:
        return self._callbacks_installed

    def dispatch_completion(self) -> None:
        """Report that the current media finished playing."""
        if self._on_completion is None:
            logger.debug("completion with no handler installed")
            return
        self._on_completion(self)

    def dispatch_error(self, what: int, extra: int = 0) -> bool:
        """Report a playback error.

        If no handler is installed, or the handler does not claim the error,
        a completion is dispatched afterwards.

        Returns:
            True if the error was handled
        """
        handled = False
        if self._on_error is not None:
            handled = bool(self._on_error(self, what, extra))
        if not handled:
            self.dispatch_completion()
        return handled

    # ---------- media operations ----------
    @abstractmethod
    def start(self) -> None:
        """Start or resume playback."""

    @abstractmethod
    def pause(self) -> None:
        """Pause playback."""

    @abstractmethod
    def stop_playback(self) -> None:
        """Stop playback."""

    @abstractmethod
    def reset(self) -> None:
        """Reset the decoder so it can be reused for a new source."""

    @abstractmethod
    def set_target(self, target) -> None:
        """Attach the output the video is rendered into."""

    @abstractmethod
    def set_transport_controls(self, controls) -> None:
        """Attach transport controls, or detach them when *controls* is None."""

    @abstractmethod
    def set_source(self, path) -> None:
        """Load a media source."""

    @abstractmethod
    def seek_to(self, position_ms: int) -> None:
        """Seek to a position in milliseconds."""

    @abstractmethod
    def get_current_position(self) -> int:
        """Return the playback position in milliseconds."""

    @abstractmethod
    def get_duration(self) -> int:
        """Return the media duration in milliseconds, 0 if unknown."""
