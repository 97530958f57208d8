from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QWidget

from tripboard.model.enums import FilterType

NO_POINTS_MESSAGES = {
    FilterType.EVERYTHING: "Click New Event to create your first point",
    FilterType.FUTURE: "There are no future events now",
    FilterType.PRESENT: "There are no present events now",
    FilterType.PAST: "There are no past events now",
}


class EmptyMessage(QLabel):
    """Shown instead of the sort bar and list when a filter matches nothing."""
    def __init__(self, filter_type: FilterType, parent: QWidget | None = None) -> None:
        super().__init__(NO_POINTS_MESSAGES[filter_type], parent)
        self.filter_type = filter_type
        self.setAlignment(Qt.AlignCenter)
        self.setStyleSheet("color: gray; font-size: 16px; padding: 24px;")
