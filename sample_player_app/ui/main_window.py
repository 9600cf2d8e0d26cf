"""
Main window for the sample video player.

This module ties the file picker, the player widget and the event log
together into a small demo window.
"""
import logging
from pathlib import Path

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QSplitter, QMessageBox
from PySide6.QtGui import QAction

from sample_player_app.config import AUTOPLAY, SHOW_CONTROLS, WINDOW_TITLE
from sample_player_app.ui.player_widget import SampleVideoPlayer
from sample_player_app.ui.panels.file_picker import FilePickerPanel
from sample_player_app.ui.panels.event_log import EventLogPanel

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, autoplay: bool = AUTOPLAY):
        """Initialize the main window.

        Args:
            autoplay: Start playback as soon as a file is opened
        """
        super().__init__()
        self.autoplay = autoplay

        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(800, 600)

        self._init_ui()
        self._init_menu()
        self._init_connections()

    def _init_ui(self):
        """Initialize the user interface."""
        main_widget = QWidget()
        main_layout = QVBoxLayout(main_widget)

        self.file_picker = FilePickerPanel()
        main_layout.addWidget(self.file_picker)

        splitter = QSplitter(Qt.Vertical)
        self.player = SampleVideoPlayer(show_controls=SHOW_CONTROLS)
        self.event_log = EventLogPanel()
        splitter.addWidget(self.player)
        splitter.addWidget(self.event_log)
        splitter.setStretchFactor(0, 4)
        splitter.setStretchFactor(1, 1)
        main_layout.addWidget(splitter, 1)

        self.setCentralWidget(main_widget)

    def _init_menu(self):
        """Build the File and Playback menus."""
        menubar = self.menuBar()

        file_menu = menubar.addMenu("File")
        open_action = QAction("Open...", self)
        open_action.triggered.connect(self.file_picker.choose_file)
        file_menu.addAction(open_action)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

        playback_menu = menubar.addMenu("Playback")
        play_action = QAction("Play", self)
        play_action.triggered.connect(self.player.play)
        playback_menu.addAction(play_action)
        pause_action = QAction("Pause", self)
        pause_action.triggered.connect(self.player.pause)
        playback_menu.addAction(pause_action)
        stop_action = QAction("Stop", self)
        stop_action.triggered.connect(self.player.stop_playback)
        playback_menu.addAction(stop_action)

        playback_menu.addSeparator()
        self.controls_action = QAction("Show Controls", self)
        self.controls_action.setCheckable(True)
        self.controls_action.setChecked(self.player.controller.controls_enabled)
        self.controls_action.toggled.connect(self._on_controls_toggled)
        playback_menu.addAction(self.controls_action)

    def _init_connections(self):
        """Wire panels to the player."""
        self.file_picker.filePicked.connect(self.open_media)
        self.player.signals.eventFired.connect(self.event_log.add_event)
        self.player.signals.errored.connect(self._on_player_error)
        self.player.signals.completed.connect(self._sync_controls_action)
        self.player.positionChanged.connect(self._on_position_changed)

    def open_media(self, path: Path):
        """Load *path* into the player, starting it when autoplay is on.

        Args:
            path: Path to the media file
        """
        path = Path(path)
        if not path.exists():
            QMessageBox.warning(self, "Open", f"File not found:\n{path}")
            return

        self.player.stop_playback()
        self.player.load(path)
        self.file_picker.set_current(path)
        if self.autoplay:
            self.player.play()

    def _on_controls_toggled(self, checked: bool):
        if checked:
            self.player.enable_playback_controls()
        else:
            self.player.disable_playback_controls()

    def _sync_controls_action(self):
        # Completion re-attaches the controls
        self.controls_action.setChecked(self.player.controller.controls_enabled)

    def _on_position_changed(self, sec: float):
        minutes, seconds = divmod(int(sec), 60)
        self.statusBar().showMessage(f"{minutes:02d}:{seconds:02d}")

    def _on_player_error(self):
        self.statusBar().showMessage("Playback failed", 5000)
