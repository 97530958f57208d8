"""Shared fixtures: recording fakes of the rendering layer and sample data.

The fakes keep a parent/children tree so tests can inspect what is mounted
where, without a display.
"""
from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, List, Optional

import pytest

from tripboard.controller.board import BoardController
from tripboard.model.enums import PointType
from tripboard.model.filter_model import FilterModel
from tripboard.model.point import Destination, Offer, Point
from tripboard.model.points_model import PointsModel
from tripboard.view.base import RenderPosition

NOW = datetime(2024, 6, 15, 12, 0)

DESTINATIONS = [
    Destination(id="ams", name="Amsterdam", description="Canals."),
    Destination(id="gva", name="Geneva", description="Lake."),
]

OFFERS = {
    PointType.TAXI: [Offer(id="taxi-radio", title="Choose the radio station", price=10)],
    PointType.FLIGHT: [
        Offer(id="flight-luggage", title="Add luggage", price=50),
        Offer(id="flight-meal", title="Add meal", price=15),
    ],
}


def make_point(
    point_id: str,
    start_hours: float = 1,
    duration_hours: float = 1,
    price: int = 100,
    *,
    point_type: PointType = PointType.TAXI,
    destination: Optional[str] = "ams",
    offers: tuple = (),
    is_favorite: bool = False,
) -> Point:
    """Point starting ``start_hours`` after NOW (negative: before)."""
    start = NOW + timedelta(hours=start_hours)
    return Point(
        id=point_id,
        type=point_type,
        date_from=start,
        date_to=start + timedelta(hours=duration_hours),
        base_price=price,
        destination=destination,
        offers=offers,
        is_favorite=is_favorite,
    )


class FakeView:
    def __init__(self, kind: str, **props: Any) -> None:
        self.kind = kind
        self.props = props
        self.children: List[FakeView] = []
        self.parent: Optional[FakeView] = None
        self.removed = False
        self.shakes = 0

    def shake(self) -> None:
        self.shakes += 1

    def kinds(self) -> List[str]:
        return [child.kind for child in self.children]

    def child(self, kind: str) -> FakeView:
        return next(child for child in self.children if child.kind == kind)

    def __repr__(self) -> str:
        return f"FakeView({self.kind!r})"


class FakeRenderer:
    def __init__(self) -> None:
        self.calls: List[tuple] = []

    def render(self, view: FakeView, container: FakeView, position: RenderPosition = RenderPosition.BEFOREEND) -> None:
        self.calls.append(("render", view))
        if position is RenderPosition.AFTERBEGIN:
            container.children.insert(0, view)
        else:
            container.children.append(view)
        view.parent = container

    def replace(self, new_view: FakeView, old_view: FakeView) -> None:
        self.calls.append(("replace", new_view, old_view))
        parent = old_view.parent
        if parent is None:
            raise RuntimeError("Can't replace a view that is not mounted.")
        parent.children[parent.children.index(old_view)] = new_view
        new_view.parent = parent
        old_view.parent = None
        old_view.removed = True

    def remove(self, view: Optional[FakeView]) -> None:
        if view is None:
            return
        self.calls.append(("remove", view))
        if view.parent is not None:
            view.parent.children.remove(view)
            view.parent = None
        view.removed = True


class FakeViewFactory:
    def __init__(self) -> None:
        self.created: List[FakeView] = []

    def _make(self, kind: str, **props: Any) -> FakeView:
        view = FakeView(kind, **props)
        self.created.append(view)
        return view

    def create_event_list(self) -> FakeView:
        return self._make("event_list")

    def create_sort_view(self, current_sort, on_sort_type_change) -> FakeView:
        return self._make("sort", current_sort=current_sort, on_sort_type_change=on_sort_type_change)

    def create_empty_view(self, filter_type) -> FakeView:
        return self._make("empty", filter_type=filter_type)

    def create_filter_view(self, filters, current_filter, on_filter_type_change) -> FakeView:
        return self._make(
            "filter", filters=filters, current_filter=current_filter,
            on_filter_type_change=on_filter_type_change,
        )

    def create_point_view(self, point, destination, offers, on_edit_click, on_favorite_click) -> FakeView:
        return self._make(
            "point", point=point, destination=destination, offers=offers,
            on_edit_click=on_edit_click, on_favorite_click=on_favorite_click,
        )

    def create_point_edit_view(
        self, point, destinations, offers_by_type, on_submit, on_cancel, on_delete=None
    ) -> FakeView:
        kind = "edit" if on_delete is not None else "new"
        return self._make(
            kind, point=point, destinations=destinations, offers_by_type=offers_by_type,
            on_submit=on_submit, on_cancel=on_cancel, on_delete=on_delete,
        )


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def renderer() -> FakeRenderer:
    return FakeRenderer()


@pytest.fixture
def views() -> FakeViewFactory:
    return FakeViewFactory()


@pytest.fixture
def container() -> FakeView:
    return FakeView("board")


@pytest.fixture
def filter_model() -> FilterModel:
    return FilterModel()


def build_points_model(points=()) -> PointsModel:
    return PointsModel(points, DESTINATIONS, OFFERS)


class BoardHarness:
    """A BoardController wired to fakes, plus helpers to read the rendered tree."""

    def __init__(self, points=(), filter_model: Optional[FilterModel] = None) -> None:
        self.renderer = FakeRenderer()
        self.views = FakeViewFactory()
        self.container = FakeView("board")
        self.points_model = build_points_model(points)
        self.filter_model = filter_model or FilterModel()
        self.destroyed_forms = 0
        self.board = BoardController(
            container=self.container,
            points_model=self.points_model,
            filter_model=self.filter_model,
            views=self.views,
            renderer=self.renderer,
            on_new_point_destroy=self._on_new_point_destroy,
            clock=lambda: NOW,
        )

    def _on_new_point_destroy(self) -> None:
        self.destroyed_forms += 1

    @property
    def event_list(self) -> FakeView:
        return self.container.child("event_list")

    def rows(self) -> List[FakeView]:
        return [view for view in self.event_list.children if view.kind in ("point", "edit")]

    def row_ids(self) -> List[str]:
        return [view.props["point"].id for view in self.rows()]

    def row(self, point_id: str) -> FakeView:
        return next(view for view in self.rows() if view.props["point"].id == point_id)


@pytest.fixture
def make_board():
    def _make(points=(), filter_model: Optional[FilterModel] = None, init: bool = True) -> BoardHarness:
        harness = BoardHarness(points, filter_model)
        if init:
            harness.board.init()
        return harness
    return _make
