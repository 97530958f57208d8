"""
Point Row
=========
Read-only presentation of a single point.
"""
from __future__ import annotations

from typing import Callable, Optional, Sequence

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QToolButton, QVBoxLayout, QWidget

from tripboard.model.point import Destination, Offer, Point
from tripboard.utils import format_day, format_duration, format_time


class PointRow(QFrame):
    def __init__(
        self,
        point: Point,
        destination: Optional[Destination],
        offers: Sequence[Offer],
        on_edit_click: Callable[[], None],
        on_favorite_click: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.point = point
        self.setFrameShape(QFrame.StyledPanel)

        layout = QHBoxLayout(self)

        self.lbl_day = QLabel(format_day(point.date_from), self)
        self.lbl_day.setFixedWidth(60)
        layout.addWidget(self.lbl_day)

        # Title, schedule and offers
        body = QVBoxLayout()
        name = destination.name if destination else ""
        self.lbl_title = QLabel(f"<b>{point.type.value.capitalize()} {name}</b>", self)
        self.lbl_title.setTextFormat(Qt.RichText)
        body.addWidget(self.lbl_title)

        self.lbl_schedule = QLabel(
            f"{format_time(point.date_from)} - {format_time(point.date_to)}"
            f"   {format_duration(point.duration)}",
            self,
        )
        body.addWidget(self.lbl_schedule)

        if offers:
            lines = [f"{offer.title} +€{offer.price}" for offer in offers]
            self.lbl_offers = QLabel("\n".join(lines), self)
            self.lbl_offers.setStyleSheet("color: gray;")
            body.addWidget(self.lbl_offers)
        layout.addLayout(body, 1)

        self.lbl_price = QLabel(f"€ {point.base_price}", self)
        layout.addWidget(self.lbl_price)

        self.btn_favorite = QToolButton(self)
        self.btn_favorite.setText("★" if point.is_favorite else "☆")
        self.btn_favorite.setToolTip("Add to favorite")
        self.btn_favorite.clicked.connect(on_favorite_click)
        layout.addWidget(self.btn_favorite)

        self.btn_rollup = QToolButton(self)
        self.btn_rollup.setArrowType(Qt.DownArrow)
        self.btn_rollup.setToolTip("Open event")
        self.btn_rollup.clicked.connect(on_edit_click)
        layout.addWidget(self.btn_rollup)
