"""
Tests for PlayerCallback and PlayerCallbackList.
"""
import pytest

from sample_player_app.core import PlayerCallback, PlayerCallbackList
from conftest import RecordingCallback


def test_base_callback_is_noop():
    """The base class accepts every event without doing anything."""
    cb = PlayerCallback()
    for event in ("on_play", "on_resume", "on_pause", "on_completed", "on_error"):
        assert getattr(cb, event)() is None


def test_notify_in_registration_order():
    """Callbacks are notified in the order they were added."""
    log = []
    callbacks = PlayerCallbackList()
    for name in ("a", "b", "c"):
        callbacks.add(RecordingCallback(name, log))

    callbacks.notify("on_pause")
    assert log == [("a", "on_pause"), ("b", "on_pause"), ("c", "on_pause")]


def test_remove_first_occurrence_only():
    """Removing a duplicate drops a single entry."""
    cb = RecordingCallback()
    callbacks = PlayerCallbackList()
    callbacks.add(cb)
    callbacks.add(cb)
    callbacks.remove(cb)

    assert len(callbacks) == 1
    callbacks.notify("on_resume")
    assert cb.events == ["on_resume"]


def test_remove_missing_is_noop():
    """Removing an unknown callback leaves the list alone."""
    callbacks = PlayerCallbackList()
    callbacks.add(RecordingCallback())
    callbacks.remove(RecordingCallback())
    assert len(callbacks) == 1


def test_remove_during_notify_applies_next_pass():
    """A callback removing itself still gets the current event, not the next."""
    callbacks = PlayerCallbackList()

    class OneShot(RecordingCallback):
        def on_play(self):
            super().on_play()
            callbacks.remove(self)

    one_shot = OneShot()
    other = RecordingCallback()
    callbacks.add(one_shot)
    callbacks.add(other)

    callbacks.notify("on_play")
    callbacks.notify("on_play")

    assert one_shot.events == ["on_play"]
    assert other.events == ["on_play", "on_play"]


def test_add_during_notify_applies_next_pass():
    """A callback added mid-notification is skipped for the current event."""
    callbacks = PlayerCallbackList()
    late = RecordingCallback()

    class Adder(RecordingCallback):
        def on_error(self):
            super().on_error()
            callbacks.add(late)

    callbacks.add(Adder())
    callbacks.notify("on_error")
    assert late.events == []

    callbacks.notify("on_error")
    assert late.events == ["on_error"]


def test_unknown_event_rejected():
    """Only the five lifecycle events can be dispatched."""
    with pytest.raises(ValueError):
        PlayerCallbackList().notify("on_seek")

