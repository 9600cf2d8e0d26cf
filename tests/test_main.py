"""
Tests for command line parsing and configuration flags.
"""
from pathlib import Path

import pytest

from sample_player_app import config


def test_parse_args_defaults():
    main = pytest.importorskip("sample_player_app.main")
    args = main.parse_args([])
    assert args.media is None
    assert args.verbose is False
    assert args.autoplay is config.AUTOPLAY


def test_parse_args_media_and_flags():
    main = pytest.importorskip("sample_player_app.main")
    args = main.parse_args(["-v", "--autoplay", "movie.mp4"])
    assert args.media == Path("movie.mp4")
    assert args.verbose is True
    assert args.autoplay is True


@pytest.mark.parametrize("raw, expected", [
    ("1", True), ("true", True), ("YES", True), ("on", True),
    ("0", False), ("false", False), ("", False),
])
def test_env_flag(monkeypatch, raw, expected):
    monkeypatch.setenv("SAMPLE_FLAG", raw)
    assert config._env_flag("SAMPLE_FLAG", not expected) is expected


def test_env_flag_default(monkeypatch):
    monkeypatch.delenv("SAMPLE_FLAG", raising=False)
    assert config._env_flag("SAMPLE_FLAG", True) is True
