"""
View Contracts
==============
Interfaces the controllers use to put things on screen.

Why is this file needed?
------------------------
Controllers decide *what* is mounted and *when*; this module only says *how*
they talk to the rendering layer. Keeping the contract Qt-free lets the
controllers be exercised without a display (see tests/conftest.py), while
the Qt implementation lives in ``tripboard.view.renderer`` and
``tripboard.view.factory``.
"""
from __future__ import annotations

from enum import StrEnum
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence

from tripboard.model.enums import FilterType, PointType, SortType
from tripboard.model.filters import FilterItem
from tripboard.model.point import Destination, Offer, Point


class RenderPosition(StrEnum):
    AFTERBEGIN = "afterbegin"  # first child of the container
    BEFOREEND = "beforeend"  # last child of the container


class EditView(Protocol):
    def shake(self) -> None: ...


class Renderer(Protocol):
    def render(self, view: Any, container: Any, position: RenderPosition = RenderPosition.BEFOREEND) -> None: ...
    def replace(self, new_view: Any, old_view: Any) -> None: ...
    def remove(self, view: Optional[Any]) -> None: ...


class ViewFactory(Protocol):
    def create_event_list(self) -> Any: ...

    def create_sort_view(
        self, current_sort: SortType, on_sort_type_change: Callable[[SortType], None]
    ) -> Any: ...

    def create_empty_view(self, filter_type: FilterType) -> Any: ...

    def create_filter_view(
        self,
        filters: Sequence[FilterItem],
        current_filter: FilterType,
        on_filter_type_change: Callable[[FilterType], None],
    ) -> Any: ...

    def create_point_view(
        self,
        point: Point,
        destination: Optional[Destination],
        offers: Sequence[Offer],
        on_edit_click: Callable[[], None],
        on_favorite_click: Callable[[], None],
    ) -> Any: ...

    def create_point_edit_view(
        self,
        point: Point,
        destinations: Sequence[Destination],
        offers_by_type: Dict[PointType, List[Offer]],
        on_submit: Callable[[Point], None],
        on_cancel: Callable[[], None],
        on_delete: Optional[Callable[[Point], None]] = None,
    ) -> EditView: ...
