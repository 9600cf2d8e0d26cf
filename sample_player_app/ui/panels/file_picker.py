"""
File picker panel for the sample video player.

This module provides a simple media file selection widget.
"""
import logging
from pathlib import Path

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QWidget, QPushButton, QHBoxLayout, QFileDialog, QLabel

from sample_player_app.config import MEDIA_FILTER

logger = logging.getLogger(__name__)


class FilePickerPanel(QWidget):
    """Panel for selecting video files.

    Signals:
        filePicked: Emitted when a file is selected with the file path
    """
    filePicked = Signal(Path)

    def __init__(self, parent=None):
        """Initialize the file picker panel.

        Args:
            parent: Optional parent widget
        """
        super().__init__(parent)

        self.select_btn = QPushButton("Open Video...")
        self.select_btn.clicked.connect(self.choose_file)
        self.label = QLabel("No media loaded")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.select_btn)
        layout.addWidget(self.label, 1)

    def set_current(self, path: Path) -> None:
        """Show *path* as the loaded media."""
        self.label.setText(Path(path).name)

    def choose_file(self):
        """Ask the user for a video file and emit filePicked."""
        path, _ = QFileDialog.getOpenFileName(
            self,
            "Open",
            str(Path.home()),
            MEDIA_FILTER
        )

        if path:
            logger.info("User selected %s", path)
            self.set_current(Path(path))
            self.filePicked.emit(Path(path))
