"""
Filter Controller
=================
Renders the filter bar and turns a filter click into a MAJOR update of the
FilterModel. The bar is re-rendered on every model notification so that the
per-filter counts (and disabled state of empty filters) stay current.
"""
from __future__ import annotations

from datetime import datetime
import logging
from typing import Any, Callable, List, Optional

from tripboard.model.enums import FilterType, UpdateType
from tripboard.model.filter_model import FilterModel
from tripboard.model.filters import FilterItem, count_filters
from tripboard.model.points_model import PointsModel
from tripboard.view.base import Renderer, ViewFactory

logger = logging.getLogger(__name__)


class FilterController:
    def __init__(
        self,
        *,
        container: Any,
        filter_model: FilterModel,
        points_model: PointsModel,
        views: ViewFactory,
        renderer: Renderer,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._container = container
        self._filter_model = filter_model
        self._points_model = points_model
        self._views = views
        self._renderer = renderer
        self._clock = clock

        self._filter_view: Optional[Any] = None

        self._points_model.add_observer(self._handle_model_event)
        self._filter_model.add_observer(self._handle_model_event)

    @property
    def filters(self) -> List[FilterItem]:
        return count_filters(self._points_model.points, self._clock())

    def init(self) -> None:
        previous = self._filter_view
        self._filter_view = self._views.create_filter_view(
            filters=self.filters,
            current_filter=self._filter_model.current_filter,
            on_filter_type_change=self._handle_filter_type_change,
        )

        if previous is None:
            self._renderer.render(self._filter_view, self._container)
            return
        self._renderer.replace(self._filter_view, previous)

    def _handle_model_event(self, update_type: UpdateType, data: Any) -> None:
        self.init()

    def _handle_filter_type_change(self, filter_type: FilterType) -> None:
        if self._filter_model.current_filter is filter_type:
            return
        logger.debug(f"Filter switched to '{filter_type}'.")
        self._filter_model.set_filter(UpdateType.MAJOR, filter_type)
