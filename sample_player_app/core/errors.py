"""
Exceptions raised by the playback core.
"""


class PlayerError(Exception):
    """Base class for all player errors."""


class UnsupportedOperationError(PlayerError, NotImplementedError):
    """Raised when outside code tries to replace a callback slot owned by the controller."""
