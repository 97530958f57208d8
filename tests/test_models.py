"""Unit tests for PointsModel, FilterModel and the Observable base."""
from __future__ import annotations

from dataclasses import replace

import pytest

from tripboard.model.enums import FilterType, PointType, UpdateType
from tripboard.model.filter_model import FilterModel
from tripboard.model.points_model import PointsModelError

from conftest import build_points_model, make_point


class Recorder:
    def __init__(self, name, log):
        self.name = name
        self.log = log

    def __call__(self, update_type, data):
        self.log.append((self.name, update_type, data))


# ---------------------------------------------------------------------------
# Observers
# ---------------------------------------------------------------------------

def test_observers_called_in_registration_order():
    model = build_points_model([make_point("a")])
    log = []
    model.add_observer(Recorder("first", log))
    model.add_observer(Recorder("second", log))

    point = replace(model.points[0], base_price=5)
    model.update_point(UpdateType.PATCH, point)

    assert log == [("first", UpdateType.PATCH, point), ("second", UpdateType.PATCH, point)]


def test_observer_sees_applied_state():
    model = build_points_model([make_point("a")])
    seen = []
    model.add_observer(lambda update_type, data: seen.append([p.id for p in model.points]))

    model.add_point(UpdateType.MINOR, make_point("b"))

    assert seen == [["b", "a"]]


def test_removed_observer_not_called():
    model = build_points_model([make_point("a")])
    log = []
    observer = Recorder("x", log)
    model.add_observer(observer)
    model.remove_observer(observer)

    model.delete_point(UpdateType.MINOR, make_point("a"))

    assert log == []


# ---------------------------------------------------------------------------
# PointsModel mutations
# ---------------------------------------------------------------------------

def test_points_returns_a_copy():
    model = build_points_model([make_point("a")])
    model.points.clear()
    assert len(model.points) == 1


def test_update_replaces_in_place():
    model = build_points_model([make_point("a"), make_point("b")])
    model.update_point(UpdateType.PATCH, replace(make_point("b"), base_price=7))
    assert [(p.id, p.base_price) for p in model.points] == [("a", 100), ("b", 7)]


def test_add_assigns_id_when_missing():
    model = build_points_model()
    log = []
    model.add_observer(Recorder("x", log))

    model.add_point(UpdateType.MAJOR, make_point(""))

    (added,) = model.points
    assert added.id
    assert log[0][2] == added


def test_delete_removes_point():
    model = build_points_model([make_point("a"), make_point("b")])
    model.delete_point(UpdateType.MINOR, make_point("a"))
    assert [p.id for p in model.points] == ["b"]


@pytest.mark.parametrize(
    "point",
    [
        make_point("a", duration_hours=-1),
        make_point("a", price=-1),
        make_point("a", destination=None),
        make_point("a", destination="nowhere"),
        make_point("a", point_type=PointType.TAXI, offers=("flight-meal",)),
    ],
    ids=["ends-before-start", "negative-price", "no-destination", "unknown-destination", "foreign-offer"],
)
def test_invalid_update_rejected_without_notification(point):
    model = build_points_model([make_point("a")])
    log = []
    model.add_observer(Recorder("x", log))

    with pytest.raises(PointsModelError):
        model.update_point(UpdateType.PATCH, point)

    assert log == []
    assert model.points == [make_point("a")]


def test_update_unknown_id_rejected():
    model = build_points_model([make_point("a")])
    with pytest.raises(PointsModelError, match="not found"):
        model.update_point(UpdateType.PATCH, make_point("ghost"))


def test_delete_unknown_id_rejected():
    model = build_points_model()
    with pytest.raises(PointsModelError):
        model.delete_point(UpdateType.MINOR, make_point("ghost"))


def test_add_duplicate_id_rejected():
    model = build_points_model([make_point("a")])
    with pytest.raises(PointsModelError, match="already exists"):
        model.add_point(UpdateType.MINOR, make_point("a"))


def test_model_error_is_value_error():
    assert issubclass(PointsModelError, ValueError)


def test_catalogue_lookups():
    model = build_points_model()
    assert model.get_destination("gva").name == "Geneva"
    assert model.get_destination(None) is None
    assert model.get_destination("nowhere") is None
    assert [o.id for o in model.get_offers(PointType.FLIGHT)] == ["flight-luggage", "flight-meal"]
    assert model.get_offers(PointType.SHIP) == []


def test_offer_of_matching_type_accepted():
    model = build_points_model([make_point("a")])
    point = make_point("a", point_type=PointType.FLIGHT, offers=("flight-meal",))
    model.update_point(UpdateType.PATCH, point)
    assert model.points[0].offers == ("flight-meal",)


# ---------------------------------------------------------------------------
# FilterModel
# ---------------------------------------------------------------------------

def test_filter_model_defaults_to_everything():
    assert FilterModel().current_filter is FilterType.EVERYTHING


def test_set_filter_always_notifies():
    model = FilterModel()
    log = []
    model.add_observer(Recorder("x", log))

    model.set_filter(UpdateType.MAJOR, FilterType.EVERYTHING)
    model.set_filter(UpdateType.MAJOR, FilterType.PAST)

    assert model.current_filter is FilterType.PAST
    assert log == [
        ("x", UpdateType.MAJOR, FilterType.EVERYTHING),
        ("x", UpdateType.MAJOR, FilterType.PAST),
    ]
