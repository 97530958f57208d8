"""
Qt View Factory
===============
Builds the PySide6 widgets the controllers ask for.
"""
from __future__ import annotations

from typing import Callable, Dict, List, Optional, Sequence

from tripboard.model.enums import FilterType, PointType, SortType
from tripboard.model.filters import FilterItem
from tripboard.model.point import Destination, Offer, Point
from tripboard.view.widgets.empty_message import EmptyMessage
from tripboard.view.widgets.event_list import EventList
from tripboard.view.widgets.filter_bar import FilterBar
from tripboard.view.widgets.point_editor import PointEditor
from tripboard.view.widgets.point_row import PointRow
from tripboard.view.widgets.sort_bar import SortBar


class QtViewFactory:
    def create_event_list(self) -> EventList:
        return EventList()

    def create_sort_view(
        self, current_sort: SortType, on_sort_type_change: Callable[[SortType], None]
    ) -> SortBar:
        return SortBar(current_sort, on_sort_type_change)

    def create_empty_view(self, filter_type: FilterType) -> EmptyMessage:
        return EmptyMessage(filter_type)

    def create_filter_view(
        self,
        filters: Sequence[FilterItem],
        current_filter: FilterType,
        on_filter_type_change: Callable[[FilterType], None],
    ) -> FilterBar:
        return FilterBar(filters, current_filter, on_filter_type_change)

    def create_point_view(
        self,
        point: Point,
        destination: Optional[Destination],
        offers: Sequence[Offer],
        on_edit_click: Callable[[], None],
        on_favorite_click: Callable[[], None],
    ) -> PointRow:
        return PointRow(point, destination, offers, on_edit_click, on_favorite_click)

    def create_point_edit_view(
        self,
        point: Point,
        destinations: Sequence[Destination],
        offers_by_type: Dict[PointType, List[Offer]],
        on_submit: Callable[[Point], None],
        on_cancel: Callable[[], None],
        on_delete: Optional[Callable[[Point], None]] = None,
    ) -> PointEditor:
        return PointEditor(point, destinations, offers_by_type, on_submit, on_cancel, on_delete)
