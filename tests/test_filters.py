"""Unit tests for tripboard.model.filters."""
from __future__ import annotations

import pytest

from tripboard.model.enums import FilterType
from tripboard.model.filters import (
    FilterItem,
    count_filters,
    filter_points,
    is_future,
    is_past,
    is_present,
)

from conftest import NOW, make_point


@pytest.fixture
def points():
    return [
        make_point("past", start_hours=-5, duration_hours=2),
        make_point("present", start_hours=-1, duration_hours=3),
        make_point("future", start_hours=4, duration_hours=1),
        make_point("ends-now", start_hours=-2, duration_hours=2),
        make_point("starts-now", start_hours=0, duration_hours=1),
    ]


def test_everything_keeps_all_points_in_order(points):
    result = filter_points(FilterType.EVERYTHING, points, NOW)
    assert result == points


def test_future_present_past_split(points):
    assert [p.id for p in filter_points(FilterType.FUTURE, points, NOW)] == ["future"]
    assert [p.id for p in filter_points(FilterType.PAST, points, NOW)] == ["past"]
    assert [p.id for p in filter_points(FilterType.PRESENT, points, NOW)] == [
        "present", "ends-now", "starts-now",
    ]


def test_exactly_one_time_filter_holds(points):
    for point in points:
        matches = [is_future(point, NOW), is_present(point, NOW), is_past(point, NOW)]
        assert matches.count(True) == 1, point.id


def test_empty_input():
    assert filter_points(FilterType.PAST, [], NOW) == []


def test_unknown_filter_type_raises(points):
    with pytest.raises(ValueError):
        filter_points("archived", points, NOW)


def test_count_filters_has_one_item_per_filter(points):
    items = count_filters(points, NOW)
    assert [item.type for item in items] == list(FilterType)
    counts = {item.type: item.count for item in items}
    assert counts == {
        FilterType.EVERYTHING: 5,
        FilterType.FUTURE: 1,
        FilterType.PRESENT: 3,
        FilterType.PAST: 1,
    }


def test_filter_item_disabled_when_empty():
    assert FilterItem(FilterType.PAST, 0).is_disabled
    assert not FilterItem(FilterType.PAST, 2).is_disabled
