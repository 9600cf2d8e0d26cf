"""
UI package for the sample video player.
"""

from .transport_bar import TransportBar
from .event_bus import PlaybackSignalBridge
from .player_widget import SampleVideoPlayer
