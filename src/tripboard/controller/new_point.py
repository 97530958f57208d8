"""
New Point Controller
====================
Owns the creation form shown at the head of the event list.
"""
from __future__ import annotations

from datetime import datetime
import logging
from typing import Any, Callable, Optional

from tripboard.model.enums import UpdateType, UserAction
from tripboard.model.point import Point
from tripboard.model.points_model import PointsModel
from tripboard.view.base import RenderPosition, Renderer, ViewFactory
from tripboard.controller.point import DataChangeHandler

logger = logging.getLogger(__name__)


class NewPointController:
    def __init__(
        self,
        *,
        container: Any,
        points_model: PointsModel,
        views: ViewFactory,
        renderer: Renderer,
        on_data_change: DataChangeHandler,
        on_mode_change: Callable[[NewPointController], None],
        on_destroy: Callable[[], None],
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._container = container
        self._points_model = points_model
        self._views = views
        self._renderer = renderer
        self._on_data_change = on_data_change
        self._on_mode_change = on_mode_change
        self._on_destroy = on_destroy
        self._clock = clock

        self._edit_view: Optional[Any] = None

    @property
    def is_mounted(self) -> bool:
        return self._edit_view is not None

    def init(self) -> None:
        if self._edit_view is not None:
            return

        # Close any other editor before the form appears
        self._on_mode_change(self)

        self._edit_view = self._views.create_point_edit_view(
            point=Point.blank(self._clock()),
            destinations=self._points_model.destinations,
            offers_by_type=self._points_model.offers,
            on_submit=self._handle_form_submit,
            on_cancel=self._handle_cancel,
        )
        self._renderer.render(self._edit_view, self._container, RenderPosition.AFTERBEGIN)
        logger.debug("Creation form mounted.")

    def destroy(self) -> None:
        if self._edit_view is None:
            return

        self._renderer.remove(self._edit_view)
        self._edit_view = None
        logger.debug("Creation form destroyed.")
        self._on_destroy()

    def set_aborting(self) -> None:
        if self._edit_view is not None:
            self._edit_view.shake()

    def _handle_form_submit(self, point: Point) -> None:
        # MAJOR: the board must show the new point under the reset filter/sort
        self._on_data_change(UserAction.ADD_POINT, UpdateType.MAJOR, point)

    def _handle_cancel(self) -> None:
        self.destroy()
