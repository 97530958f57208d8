"""
Filter Bar
==========
Radio buttons selecting the FilterType. Filters without any point are
disabled.
"""
from __future__ import annotations

from typing import Callable, Sequence

from PySide6.QtWidgets import QButtonGroup, QHBoxLayout, QRadioButton, QWidget

from tripboard.model.enums import FilterType
from tripboard.model.filters import FilterItem


class FilterBar(QWidget):
    def __init__(
        self,
        filters: Sequence[FilterItem],
        current_filter: FilterType,
        on_filter_type_change: Callable[[FilterType], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._on_filter_type_change = on_filter_type_change
        self._filter_types = [item.type for item in filters]

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.group = QButtonGroup(self)
        for i, item in enumerate(filters):
            button = QRadioButton(f"{item.type.value.capitalize()} ({item.count})", self)
            button.setChecked(item.type is current_filter)
            button.setEnabled(not item.is_disabled or item.type is current_filter)
            self.group.addButton(button, i)
            layout.addWidget(button)

        self.group.idClicked.connect(self._on_clicked)

    def _on_clicked(self, button_id: int) -> None:
        self._on_filter_type_change(self._filter_types[button_id])
