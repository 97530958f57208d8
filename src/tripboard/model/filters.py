"""
Filter Predicates
=================
Pure functions deciding whether a point belongs to a filter.

For a point with ``date_from <= date_to`` exactly one of FUTURE, PRESENT and
PAST holds at any moment ``now``.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, Iterable, List

from tripboard.model.enums import FilterType
from tripboard.model.point import Point

Predicate = Callable[[Point, datetime], bool]


def is_future(point: Point, now: datetime) -> bool:
    return point.date_from > now


def is_present(point: Point, now: datetime) -> bool:
    return point.date_from <= now <= point.date_to


def is_past(point: Point, now: datetime) -> bool:
    return point.date_to < now


PREDICATES: Dict[FilterType, Predicate] = {
    FilterType.EVERYTHING: lambda point, now: True,
    FilterType.FUTURE: is_future,
    FilterType.PRESENT: is_present,
    FilterType.PAST: is_past,
}


def filter_points(filter_type: FilterType, points: Iterable[Point], now: datetime) -> List[Point]:
    """Keep the points matching ``filter_type``, in their input order."""
    predicate = PREDICATES.get(filter_type)
    if predicate is None:
        raise ValueError(f"Unknown filter type '{filter_type}'")
    return [point for point in points if predicate(point, now)]


@dataclass(frozen=True)
class FilterItem:
    """One entry of the filter bar."""
    type: FilterType
    count: int

    @property
    def is_disabled(self) -> bool:
        return self.count == 0


def count_filters(points: Iterable[Point], now: datetime) -> List[FilterItem]:
    points = list(points)
    return [
        FilterItem(type=filter_type, count=len(filter_points(filter_type, points, now)))
        for filter_type in FilterType
    ]
