"""
Player callbacks and the ordered list used to fan events out to them.
"""
import logging

logger = logging.getLogger(__name__)

# Event names a PlayerCallback responds to
EVENTS = ("on_play", "on_resume", "on_pause", "on_completed", "on_error")


class PlayerCallback:
    """Listener for playback lifecycle events.

    Subclasses override the events they care about; the rest are no-ops.
    """

    def on_play(self):
        """Playback started from the stopped state."""

    def on_resume(self):
        """Playback resumed from the paused state."""

    def on_pause(self):
        """Playback paused."""

    def on_completed(self):
        """The media played to the end."""

    def on_error(self):
        """The surface reported a playback error."""


class PlayerCallbackList:
    """Ordered, non-owning list of player callbacks.

    Duplicates are allowed and removal drops the first matching entry,
    the same as a plain list.
    """

    def __init__(self):
        self._callbacks = []

    def add(self, callback) -> None:
        self._callbacks.append(callback)

    def remove(self, callback) -> None:
        """Remove a callback; removing one that was never added is a no-op."""
        try:
            self._callbacks.remove(callback)
        except ValueError:
            logger.debug("remove: callback %r not registered", callback)

    def notify(self, event: str) -> None:
        """Call *event* on every callback in registration order.

        Iterates over a snapshot, so callbacks added or removed from inside
        a handler only take effect on the next notification.

        Args:
            event: One of EVENTS
        """
        if event not in EVENTS:
            raise ValueError(f"Unknown player event: {event}")
        for callback in list(self._callbacks):
            getattr(callback, event)()

    def __len__(self):
        return len(self._callbacks)
