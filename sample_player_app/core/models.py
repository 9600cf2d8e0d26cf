"""
Playback state types for the sample video player.

This module contains the playback state enumeration and the status snapshot
handed out to application code.
"""
from enum import Enum

from pydantic import BaseModel, ConfigDict


class PlaybackState(str, Enum):
    """Playback state tracked by the controller.

    Exactly one value is held at a time; the controller starts in STOPPED.
    """
    STOPPED = "stopped"
    PAUSED = "paused"
    PLAYING = "playing"


class PlaybackStatus(BaseModel):
    """Point-in-time snapshot of a player.

    Attributes:
        state: Current playback state
        source: Path of the loaded media, if any
        position_ms: Current playback position in milliseconds
        duration_ms: Media duration in milliseconds (0 when unknown)
        controls_enabled: Whether transport controls are attached
    """
    state: PlaybackState
    source: str | None = None
    position_ms: int = 0
    duration_ms: int = 0
    controls_enabled: bool = True
    model_config = ConfigDict(frozen=True)

    @property
    def position_sec(self) -> float:
        """Position in seconds."""
        return self.position_ms / 1000.0
