"""
Core playback logic for the sample video player.
"""

from .callbacks import PlayerCallback, PlayerCallbackList
from .controller import PlaybackController, VideoPlayer
from .errors import PlayerError, UnsupportedOperationError
from .models import PlaybackState, PlaybackStatus
from .surface import RenderingSurface
