"""
Global configuration settings for the sample video player.
"""
import os
import pathlib
from dotenv import load_dotenv

# Load environment variables from .env file if present
load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# Paths
APP_DIR = pathlib.Path(__file__).parent.absolute()
LOG_FILE = pathlib.Path(os.environ.get("PLAYER_LOG_FILE", pathlib.Path.home() / ".sample_player_app.log"))

# Playback configuration
SHOW_CONTROLS = _env_flag("SHOW_CONTROLS", True)   # attach transport controls at startup
AUTOPLAY = _env_flag("AUTOPLAY", False)            # start playing as soon as media is loaded

# UI configuration
WINDOW_TITLE = "Sample Video Player"
MEDIA_FILTER = "Video (*.mp4 *.mkv *.avi *.mov *.webm *.m4v);;All (*)"
