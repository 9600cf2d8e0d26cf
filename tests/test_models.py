"""
Tests for the playback state types.
"""
import pytest
from pydantic import ValidationError

from sample_player_app.core import PlaybackState, PlaybackStatus


def test_playback_state_values():
    """Exactly three states exist."""
    assert [s.value for s in PlaybackState] == ["stopped", "paused", "playing"]
    assert PlaybackState("paused") is PlaybackState.PAUSED


def test_status_defaults():
    """Only the state is required."""
    status = PlaybackStatus(state=PlaybackState.STOPPED)
    assert status.source is None
    assert status.position_ms == 0
    assert status.duration_ms == 0
    assert status.controls_enabled is True


def test_status_parses_state_string():
    """The state may be given by value, e.g. from JSON."""
    status = PlaybackStatus.model_validate({"state": "playing", "position_ms": 1200})
    assert status.state is PlaybackState.PLAYING
    assert status.position_sec == 1.2


def test_status_rejects_unknown_state():
    with pytest.raises(ValidationError):
        PlaybackStatus(state="buffering")


def test_status_is_frozen():
    """Snapshots are immutable."""
    status = PlaybackStatus(state=PlaybackState.PAUSED)
    with pytest.raises(ValidationError):
        status.state = PlaybackState.PLAYING
