"""
Event log panel for the sample video player.

Lists player callback events as they arrive, newest last.
"""
import logging
from datetime import datetime

from PySide6.QtWidgets import QWidget, QVBoxLayout, QGroupBox, QListWidget

logger = logging.getLogger(__name__)

# Maximum number of rows kept in the list
MAX_ROWS = 200


class EventLogPanel(QWidget):
    """Panel that lists player events."""

    def __init__(self, parent=None):
        super().__init__(parent)

        self.group = QGroupBox("Player Events")
        self.list = QListWidget()
        group_layout = QVBoxLayout(self.group)
        group_layout.addWidget(self.list)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.group)

    def add_event(self, event: str) -> None:
        """Append an event row, dropping the oldest rows past MAX_ROWS.

        Args:
            event: Callback name, e.g. "on_play"
        """
        stamp = datetime.now().strftime("%H:%M:%S")
        self.list.addItem(f"{stamp}  {event}")
        while self.list.count() > MAX_ROWS:
            self.list.takeItem(0)
        self.list.scrollToBottom()

    def events(self) -> list[str]:
        """Return the logged event names in order."""
        return [self.list.item(i).text().split(maxsplit=1)[1] for i in range(self.list.count())]

    def clear(self) -> None:
        self.list.clear()
