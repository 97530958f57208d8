"""
Main Application Window
=======================
The primary GUI container that holds the header (filters, "New event") and
the scrollable trip board.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It creates the controllers and connects the global "New event"
   action to the board.
"""
from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QHBoxLayout, QMainWindow, QPushButton, QScrollArea, QVBoxLayout, QWidget
)

from tripboard.config import APP_NAME
from tripboard.controller.board import BoardController
from tripboard.controller.filter import FilterController
from tripboard.model.filter_model import FilterModel
from tripboard.model.points_model import PointsModel
from tripboard.view.factory import QtViewFactory
from tripboard.view.renderer import QtRenderer


class MainWindow(QMainWindow):
    def __init__(self, points_model: PointsModel, filter_model: FilterModel) -> None:
        super().__init__()
        self.points_model = points_model
        self.filter_model = filter_model

        self.setWindowTitle(APP_NAME)
        self.resize(900, 800)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        main_layout = QVBoxLayout(main_widget)

        # --- 1. HEADER: Filters + New event ---
        header = QHBoxLayout()
        self.filter_container = QWidget()
        filter_layout = QHBoxLayout(self.filter_container)
        filter_layout.setContentsMargins(0, 0, 0, 0)
        header.addWidget(self.filter_container, 1)

        self.btn_new_event = QPushButton("New event")
        self.btn_new_event.setMinimumHeight(32)
        self.btn_new_event.clicked.connect(self.on_new_event_clicked)
        header.addWidget(self.btn_new_event)
        main_layout.addLayout(header)

        # --- 2. BOARD (scrollable) ---
        self.board_container = QWidget()
        board_layout = QVBoxLayout(self.board_container)
        board_layout.setAlignment(Qt.AlignTop)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self.board_container)
        main_layout.addWidget(scroll, 1)

        # --- CONTROLLERS ---
        views = QtViewFactory()
        renderer = QtRenderer()

        self.filter_controller = FilterController(
            container=self.filter_container,
            filter_model=filter_model,
            points_model=points_model,
            views=views,
            renderer=renderer,
        )
        self.board_controller = BoardController(
            container=self.board_container,
            points_model=points_model,
            filter_model=filter_model,
            views=views,
            renderer=renderer,
            on_new_point_destroy=self.on_new_point_form_closed,
        )

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        # Initial Render
        self.filter_controller.init()
        self.board_controller.init()

    def _create_actions(self) -> None:
        self.act_new_event = QAction("New Event", self)
        self.act_new_event.setShortcut("Ctrl+N")
        self.act_new_event.triggered.connect(self.on_new_event_clicked)

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        trip_menu = self.menuBar().addMenu("&Trip")
        trip_menu.addAction(self.act_new_event)
        trip_menu.addSeparator()
        trip_menu.addAction(self.act_exit)

    # --- SLOTS ---

    def on_new_event_clicked(self) -> None:
        if not self.btn_new_event.isEnabled():
            return
        self.board_controller.create_point()
        self.btn_new_event.setEnabled(False)
        self.act_new_event.setEnabled(False)

    def on_new_point_form_closed(self) -> None:
        """Creation form destroyed: the button may be used again."""
        self.btn_new_event.setEnabled(True)
        self.act_new_event.setEnabled(True)
