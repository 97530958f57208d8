"""
Point Controller
================
Owns the view/edit lifecycle of a single rendered point.

Exactly one view is mounted at a time: the read-only row in VIEW mode or the
edit form in EDITING mode. Switching modes replaces one with the other at the
same position in the list.
"""
from __future__ import annotations

from dataclasses import replace
from enum import Enum
import logging
from typing import Any, Callable, Optional

from tripboard.model.enums import UpdateType, UserAction
from tripboard.model.point import Point
from tripboard.model.points_model import PointsModel
from tripboard.view.base import Renderer, ViewFactory

logger = logging.getLogger(__name__)

DataChangeHandler = Callable[[UserAction, UpdateType, Point], None]


class Mode(Enum):
    VIEW = "view"
    EDITING = "editing"


class PointController:
    def __init__(
        self,
        *,
        container: Any,
        points_model: PointsModel,
        views: ViewFactory,
        renderer: Renderer,
        on_data_change: DataChangeHandler,
        on_mode_change: Callable[[PointController], None],
    ) -> None:
        self._container = container
        self._points_model = points_model
        self._views = views
        self._renderer = renderer
        self._on_data_change = on_data_change
        self._on_mode_change = on_mode_change

        self._point: Optional[Point] = None
        self._view: Any = None  # whichever view is mounted
        self._mode = Mode.VIEW
        self._is_saving = False
        self._is_destroyed = False

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def point(self) -> Optional[Point]:
        return self._point

    @property
    def is_destroyed(self) -> bool:
        return self._is_destroyed

    def init(self, point: Point) -> None:
        """Render ``point`` in the current mode, replacing what is mounted."""
        if self._is_destroyed:
            logger.debug(f"Ignoring init of destroyed controller for '{point.id}'.")
            return

        self._point = point

        if self._mode is Mode.EDITING and self._is_saving:
            # The model accepted our own submit: close the form
            self._is_saving = False
            self._mode = Mode.VIEW

        if self._mode is Mode.EDITING:
            new_view = self._create_edit_view()
        else:
            new_view = self._create_point_view()

        if self._view is None:
            self._renderer.render(new_view, self._container)
        else:
            self._renderer.replace(new_view, self._view)
        self._view = new_view

    def destroy(self) -> None:
        self._renderer.remove(self._view)
        self._view = None
        self._mode = Mode.VIEW
        self._is_saving = False
        self._is_destroyed = True

    def reset_view(self) -> None:
        """Force EDITING -> VIEW, dropping unsaved edits."""
        if self._is_destroyed or self._mode is not Mode.EDITING:
            return
        self._replace_form_to_point()

    def set_aborting(self) -> None:
        """The model rejected our change: keep the form open and shake it."""
        self._is_saving = False
        if self._mode is Mode.EDITING and self._view is not None:
            self._view.shake()

    # --- MODE SWITCHING ---

    def _replace_point_to_form(self) -> None:
        self._on_mode_change(self)
        edit_view = self._create_edit_view()
        self._renderer.replace(edit_view, self._view)
        self._view = edit_view
        self._mode = Mode.EDITING

    def _replace_form_to_point(self) -> None:
        point_view = self._create_point_view()
        self._renderer.replace(point_view, self._view)
        self._view = point_view
        self._mode = Mode.VIEW
        self._is_saving = False

    def _create_point_view(self) -> Any:
        point = self._point
        offers = [
            offer for offer in self._points_model.get_offers(point.type)
            if offer.id in point.offers
        ]
        return self._views.create_point_view(
            point=point,
            destination=self._points_model.get_destination(point.destination),
            offers=offers,
            on_edit_click=self._handle_edit_click,
            on_favorite_click=self._handle_favorite_click,
        )

    def _create_edit_view(self) -> Any:
        return self._views.create_point_edit_view(
            point=self._point,
            destinations=self._points_model.destinations,
            offers_by_type=self._points_model.offers,
            on_submit=self._handle_form_submit,
            on_cancel=self._handle_form_cancel,
            on_delete=self._handle_delete_click,
        )

    # --- VIEW CALLBACKS ---

    def _handle_edit_click(self) -> None:
        if self._is_destroyed or self._mode is Mode.EDITING:
            return
        self._replace_point_to_form()

    def _handle_favorite_click(self) -> None:
        point = self._point
        self._on_data_change(
            UserAction.UPDATE_POINT,
            UpdateType.PATCH,
            replace(point, is_favorite=not point.is_favorite),
        )

    def _handle_form_submit(self, update: Point) -> None:
        point = self._point
        is_minor_update = (
            update.date_from != point.date_from
            or update.date_to != point.date_to
            or update.base_price != point.base_price
        )
        self._is_saving = True
        self._on_data_change(
            UserAction.UPDATE_POINT,
            UpdateType.MINOR if is_minor_update else UpdateType.PATCH,
            update,
        )

    def _handle_form_cancel(self) -> None:
        self.reset_view()

    def _handle_delete_click(self, point: Point) -> None:
        self._on_data_change(UserAction.DELETE_POINT, UpdateType.MINOR, point)
