"""
Point Comparators
=================
Sort keys for every SortType.

Directions:
    DEFAULT -> start date, earliest first
    TIME    -> duration, longest first
    PRICE   -> base price, most expensive first

``sorted`` is stable (also with ``reverse=True``), so points with equal keys
keep the order they had after filtering. A PATCH that only touches one row
therefore never reorders its neighbours.
"""
from __future__ import annotations

from datetime import datetime, timedelta
from typing import Callable, Dict, Iterable, List, Tuple, Any

from tripboard.model.enums import SortType
from tripboard.model.point import Point


def by_start(point: Point) -> datetime:
    return point.date_from


def by_duration(point: Point) -> timedelta:
    return point.duration


def by_price(point: Point) -> int:
    return point.base_price


# SortType -> (key, reverse)
SORTERS: Dict[SortType, Tuple[Callable[[Point], Any], bool]] = {
    SortType.DEFAULT: (by_start, False),
    SortType.TIME: (by_duration, True),
    SortType.PRICE: (by_price, True),
}


def sort_points(sort_type: SortType, points: Iterable[Point]) -> List[Point]:
    try:
        key, reverse = SORTERS[sort_type]
    except KeyError:
        raise ValueError(f"Unknown sort type '{sort_type}'") from None
    return sorted(points, key=key, reverse=reverse)
