"""
Sort Bar
========
Radio buttons selecting the SortType of the board.
"""
from __future__ import annotations

from typing import Callable

from PySide6.QtWidgets import QButtonGroup, QHBoxLayout, QRadioButton, QWidget

from tripboard.model.enums import SortType

LABELS = {
    SortType.DEFAULT: "Day",
    SortType.TIME: "Time",
    SortType.PRICE: "Price",
}


class SortBar(QWidget):
    def __init__(
        self,
        current_sort: SortType,
        on_sort_type_change: Callable[[SortType], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._on_sort_type_change = on_sort_type_change
        self._sort_types = list(SortType)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.group = QButtonGroup(self)
        for i, sort_type in enumerate(self._sort_types):
            button = QRadioButton(LABELS[sort_type], self)
            button.setChecked(sort_type is current_sort)
            self.group.addButton(button, i)
            layout.addWidget(button)
        layout.addStretch()

        self.group.idClicked.connect(self._on_clicked)

    def _on_clicked(self, button_id: int) -> None:
        self._on_sort_type_change(self._sort_types[button_id])
