"""
Board Controller
================
Orchestrates the trip board: the sort bar, the empty-state message, one
PointController per visible point and the creation form.

Why is this file needed?
------------------------
1. Projection: It derives the filtered and sorted list that is shown.
2. Routing: User actions raised by the point controllers are forwarded to
   the PointsModel; the board itself never validates them.
3. Reconciliation: Model notifications are answered with the cheapest
   re-render their granularity allows (PATCH touches one row, MINOR rebuilds
   the list, MAJOR also resets the sort).
4. Edit focus: Only one form (a point editor or the creation form) may be
   open at a time; the board is the single owner of that decision.
"""
from __future__ import annotations

from datetime import datetime
import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from tripboard.controller.new_point import NewPointController
from tripboard.controller.point import PointController
from tripboard.model.enums import FilterType, SortType, UpdateType, UserAction
from tripboard.model.filter_model import FilterModel
from tripboard.model.filters import filter_points
from tripboard.model.point import Point
from tripboard.model.points_model import PointsModel, PointsModelError
from tripboard.model.sorting import sort_points
from tripboard.view.base import RenderPosition, Renderer, ViewFactory

logger = logging.getLogger(__name__)

EditFocus = Union[PointController, NewPointController]


class BoardController:
    def __init__(
        self,
        *,
        container: Any,
        points_model: PointsModel,
        filter_model: FilterModel,
        views: ViewFactory,
        renderer: Renderer,
        on_new_point_destroy: Callable[[], None],
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._container = container
        self._points_model = points_model
        self._filter_model = filter_model
        self._views = views
        self._renderer = renderer
        self._clock = clock

        self._event_list = views.create_event_list()
        self._sort_view: Optional[Any] = None
        self._empty_view: Optional[Any] = None

        self._point_controllers: Dict[str, PointController] = {}
        self._edit_focus: Optional[EditFocus] = None
        self._current_sort = SortType.DEFAULT
        self._filter_type = FilterType.EVERYTHING

        self._points_model.add_observer(self._handle_model_event)
        self._filter_model.add_observer(self._handle_model_event)

        self._new_point_controller = NewPointController(
            container=self._event_list,
            points_model=points_model,
            views=views,
            renderer=renderer,
            on_data_change=self._handle_view_action,
            on_mode_change=self._handle_mode_change,
            on_destroy=on_new_point_destroy,
            clock=clock,
        )

    # --- STATE ---

    @property
    def points(self) -> List[Point]:
        """Current points, filtered by the active filter and sorted."""
        self._filter_type = self._filter_model.current_filter
        filtered = filter_points(self._filter_type, self._points_model.points, self._clock())
        return sort_points(self._current_sort, filtered)

    @property
    def current_sort(self) -> SortType:
        return self._current_sort

    @property
    def filter_type(self) -> FilterType:
        return self._filter_type

    @property
    def point_controllers(self) -> Mapping[str, PointController]:
        return MappingProxyType(self._point_controllers)

    @property
    def new_point_controller(self) -> NewPointController:
        return self._new_point_controller

    @property
    def edit_focus(self) -> Optional[EditFocus]:
        return self._edit_focus

    # --- PUBLIC API ---

    def init(self) -> None:
        self._renderer.render(self._event_list, self._container)
        self._render_board()

    def create_point(self) -> None:
        """Open the creation form with the filter and sort reset."""
        self._release_edit_focus()
        self._current_sort = SortType.DEFAULT
        self._filter_model.set_filter(UpdateType.MAJOR, FilterType.EVERYTHING)
        self._new_point_controller.init()

    # --- HANDLERS ---

    def _handle_mode_change(self, requester: EditFocus) -> None:
        self._release_edit_focus()
        self._edit_focus = requester

    def _release_edit_focus(self) -> None:
        owner = self._edit_focus
        self._edit_focus = None
        if owner is None:
            return
        if isinstance(owner, NewPointController):
            owner.destroy()
        elif not owner.is_destroyed:
            owner.reset_view()

    def _handle_view_action(self, action: UserAction, update_type: UpdateType, update: Point) -> None:
        try:
            if action is UserAction.UPDATE_POINT:
                self._points_model.update_point(update_type, update)
            elif action is UserAction.ADD_POINT:
                self._points_model.add_point(update_type, update)
            elif action is UserAction.DELETE_POINT:
                self._points_model.delete_point(update_type, update)
            else:
                raise ValueError(f"Unknown user action '{action}'")
        except PointsModelError as e:
            logger.warning(f"{action} rejected: {e}")
            self._abort_action(action, update)

    def _abort_action(self, action: UserAction, update: Point) -> None:
        if action is UserAction.ADD_POINT:
            self._new_point_controller.set_aborting()
            return
        controller = self._point_controllers.get(update.id)
        if controller is not None:
            controller.set_aborting()

    def _handle_model_event(self, update_type: UpdateType, data: Any) -> None:
        if update_type is UpdateType.PATCH:
            point_id = getattr(data, "id", None)
            controller = self._point_controllers.get(point_id)
            if controller is None:
                logger.debug(f"PATCH for '{point_id}' has no rendered controller, skipped.")
                return
            controller.init(data)
        elif update_type is UpdateType.MINOR:
            self._clear_board()
            self._render_board()
        elif update_type is UpdateType.MAJOR:
            self._clear_board(reset_sort_type=True)
            self._render_board()
        else:
            raise ValueError(f"Unknown update type '{update_type}'")

    def _handle_sort_type_change(self, sort_type: SortType) -> None:
        if self._current_sort is sort_type:
            return

        self._current_sort = sort_type
        self._clear_board()
        self._render_board()

    # --- RENDERING ---

    def _render_sort(self) -> None:
        self._sort_view = self._views.create_sort_view(
            current_sort=self._current_sort,
            on_sort_type_change=self._handle_sort_type_change,
        )
        self._renderer.render(self._sort_view, self._container, RenderPosition.AFTERBEGIN)

    def _render_empty(self) -> None:
        self._empty_view = self._views.create_empty_view(filter_type=self._filter_type)
        self._renderer.render(self._empty_view, self._container, RenderPosition.AFTERBEGIN)

    def _render_point(self, point: Point) -> None:
        controller = PointController(
            container=self._event_list,
            points_model=self._points_model,
            views=self._views,
            renderer=self._renderer,
            on_data_change=self._handle_view_action,
            on_mode_change=self._handle_mode_change,
        )
        controller.init(point)
        self._point_controllers[point.id] = controller

    def _render_board(self) -> None:
        points = self.points

        if not points:
            self._render_empty()
            return

        self._render_sort()
        for point in points:
            self._render_point(point)
        logger.debug(
            f"Board rendered: {len(points)} points, filter '{self._filter_type}', sort '{self._current_sort}'."
        )

    def _clear_board(self, *, reset_sort_type: bool = False) -> None:
        self._new_point_controller.destroy()
        for controller in self._point_controllers.values():
            controller.destroy()
        self._point_controllers.clear()
        self._edit_focus = None

        self._renderer.remove(self._sort_view)
        self._sort_view = None
        self._renderer.remove(self._empty_view)
        self._empty_view = None

        if reset_sort_type:
            self._current_sort = SortType.DEFAULT
