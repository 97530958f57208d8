"""
Point Editor
============
Edit form for an existing point, or the creation form for a new one.

The form never touches the model. It builds an updated Point from its inputs
and passes it to ``on_submit``; the controller decides what happens next.
"""
from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Callable, Dict, List, Optional, Sequence

from PySide6.QtCore import QDate, QDateTime, QTime, Qt, QTimer
from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QCheckBox, QComboBox, QDateTimeEdit, QFormLayout, QFrame, QGroupBox, QHBoxLayout,
    QLabel, QPushButton, QSpinBox, QToolButton, QVBoxLayout, QWidget
)

from tripboard.config import EDITOR_DATETIME_FORMAT
from tripboard.model.enums import PointType
from tripboard.model.point import Destination, Offer, Point

SHAKE_DURATION_MS = 600
MAX_PRICE = 1_000_000


class PointEditor(QFrame):
    def __init__(
        self,
        point: Point,
        destinations: Sequence[Destination],
        offers_by_type: Dict[PointType, List[Offer]],
        on_submit: Callable[[Point], None],
        on_cancel: Callable[[], None],
        on_delete: Optional[Callable[[Point], None]] = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.point = point
        self._destinations = list(destinations)
        self._offers_by_type = offers_by_type
        self._on_submit = on_submit
        self._on_cancel = on_cancel
        self._on_delete = on_delete
        self._offer_checks: Dict[str, QCheckBox] = {}

        self.setFrameShape(QFrame.StyledPanel)
        self._base_style = self.styleSheet()

        layout = QVBoxLayout(self)

        # --- Header: type, destination, dates, price ---
        form = QFormLayout()

        self.type_combo = QComboBox(self)
        for point_type in PointType:
            self.type_combo.addItem(point_type.value.capitalize(), userData=point_type)
        self.type_combo.setCurrentIndex(list(PointType).index(point.type))
        self.type_combo.currentIndexChanged.connect(self._on_type_changed)
        form.addRow("Type", self.type_combo)

        self.destination_combo = QComboBox(self)
        self.destination_combo.addItem("", userData=None)
        for destination in self._destinations:
            self.destination_combo.addItem(destination.name, userData=destination.id)
        index = self.destination_combo.findData(point.destination)
        self.destination_combo.setCurrentIndex(max(index, 0))
        self.destination_combo.currentIndexChanged.connect(self._on_destination_changed)
        form.addRow("Destination", self.destination_combo)

        self.date_from_edit = self._make_date_edit(point.date_from)
        form.addRow("From", self.date_from_edit)
        self.date_to_edit = self._make_date_edit(point.date_to)
        form.addRow("To", self.date_to_edit)

        self.price_spin = QSpinBox(self)
        self.price_spin.setRange(0, MAX_PRICE)
        self.price_spin.setPrefix("€ ")
        self.price_spin.setValue(point.base_price)
        form.addRow("Price", self.price_spin)

        layout.addLayout(form)

        # --- Offers ---
        self.offers_group = QGroupBox("Offers", self)
        self.offers_layout = QVBoxLayout(self.offers_group)
        layout.addWidget(self.offers_group)
        self._rebuild_offers(point.type, selected=point.offers)

        # --- Destination ---
        self.lbl_description = QLabel(self)
        self.lbl_description.setWordWrap(True)
        layout.addWidget(self.lbl_description)
        self._on_destination_changed()

        # --- Buttons ---
        buttons = QHBoxLayout()
        self.btn_save = QPushButton("Save", self)
        self.btn_save.clicked.connect(self._on_save_clicked)
        buttons.addWidget(self.btn_save)

        if on_delete is not None:
            self.btn_reset = QPushButton("Delete", self)
            self.btn_reset.clicked.connect(self._on_delete_clicked)
        else:
            self.btn_reset = QPushButton("Cancel", self)
            self.btn_reset.clicked.connect(self._on_cancel_clicked)
        buttons.addWidget(self.btn_reset)
        buttons.addStretch()

        if on_delete is not None:
            self.btn_rollup = QToolButton(self)
            self.btn_rollup.setArrowType(Qt.UpArrow)
            self.btn_rollup.setToolTip("Close event")
            self.btn_rollup.clicked.connect(self._on_cancel_clicked)
            buttons.addWidget(self.btn_rollup)

        layout.addLayout(buttons)

        # Escape closes the form
        self.shortcut_escape = QShortcut(QKeySequence(Qt.Key_Escape), self)
        self.shortcut_escape.setContext(Qt.WidgetWithChildrenShortcut)
        self.shortcut_escape.activated.connect(self._on_cancel_clicked)

    # --- PUBLIC ---

    def collect(self) -> Point:
        """Build the updated point from the current inputs."""
        point_type = PointType(self.type_combo.currentData())
        offers = tuple(offer_id for offer_id, check in self._offer_checks.items() if check.isChecked())
        return replace(
            self.point,
            type=point_type,
            destination=self.destination_combo.currentData(),
            date_from=self.date_from_edit.dateTime().toPython(),
            date_to=self.date_to_edit.dateTime().toPython(),
            base_price=self.price_spin.value(),
            offers=offers,
        )

    def shake(self) -> None:
        """Flash a red outline to signal that the model rejected the change."""
        self.setStyleSheet("PointEditor { border: 2px solid #d33; }")
        QTimer.singleShot(SHAKE_DURATION_MS, self._restore_style)

    # --- HELPERS ---

    def _make_date_edit(self, value: datetime) -> QDateTimeEdit:
        qt_value = QDateTime(QDate(value.year, value.month, value.day), QTime(value.hour, value.minute))
        edit = QDateTimeEdit(qt_value, self)
        edit.setDisplayFormat(EDITOR_DATETIME_FORMAT)
        edit.setCalendarPopup(True)
        return edit

    def _rebuild_offers(self, point_type: PointType, selected: Sequence[str] = ()) -> None:
        for check in self._offer_checks.values():
            self.offers_layout.removeWidget(check)
            check.deleteLater()
        self._offer_checks = {}

        offers = self._offers_by_type.get(point_type, [])
        for offer in offers:
            check = QCheckBox(f"{offer.title} +€{offer.price}", self.offers_group)
            check.setChecked(offer.id in selected)
            self.offers_layout.addWidget(check)
            self._offer_checks[offer.id] = check
        self.offers_group.setVisible(bool(offers))

    def _restore_style(self) -> None:
        self.setStyleSheet(self._base_style)

    # --- SLOTS ---

    def _on_type_changed(self) -> None:
        self._rebuild_offers(PointType(self.type_combo.currentData()))

    def _on_destination_changed(self) -> None:
        destination_id = self.destination_combo.currentData()
        destination = next((d for d in self._destinations if d.id == destination_id), None)
        self.lbl_description.setText(destination.description if destination else "")

    def _on_save_clicked(self) -> None:
        self._on_submit(self.collect())

    def _on_cancel_clicked(self) -> None:
        self._on_cancel()

    def _on_delete_clicked(self) -> None:
        self._on_delete(self.point)
