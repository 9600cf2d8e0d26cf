"""
Sample video player: a Qt video widget with playback-state callbacks.
"""

__version__ = "0.1.0"
