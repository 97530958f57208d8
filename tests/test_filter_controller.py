"""Tests for FilterController: counts, idempotent clicks and re-rendering."""
from __future__ import annotations

import pytest

from tripboard.controller.filter import FilterController
from tripboard.model.enums import FilterType, UpdateType

from conftest import NOW, FakeView, build_points_model, make_point


@pytest.fixture
def setup(renderer, views, filter_model):
    container = FakeView("header")
    points_model = build_points_model([
        make_point("past", -30),
        make_point("now", -1, duration_hours=3),
        make_point("soon", 2),
        make_point("later", 10),
    ])
    controller = FilterController(
        container=container,
        filter_model=filter_model,
        points_model=points_model,
        views=views,
        renderer=renderer,
        clock=lambda: NOW,
    )
    controller.init()
    return controller, container, points_model


def counts(view):
    return {item.type: item.count for item in view.props["filters"]}


def test_init_renders_counts_per_filter(setup):
    _, container, _ = setup
    (view,) = container.children

    assert view.kind == "filter"
    assert view.props["current_filter"] is FilterType.EVERYTHING
    assert counts(view) == {
        FilterType.EVERYTHING: 4,
        FilterType.FUTURE: 2,
        FilterType.PRESENT: 1,
        FilterType.PAST: 1,
    }


def test_empty_filters_are_disabled(renderer, views, filter_model):
    container = FakeView("header")
    controller = FilterController(
        container=container,
        filter_model=filter_model,
        points_model=build_points_model([make_point("soon", 2)]),
        views=views,
        renderer=renderer,
        clock=lambda: NOW,
    )

    disabled = {item.type for item in controller.filters if item.is_disabled}

    assert disabled == {FilterType.PRESENT, FilterType.PAST}


def test_click_on_current_filter_is_noop(setup, filter_model):
    _, container, _ = setup
    log = []
    filter_model.add_observer(lambda *args: log.append(args))

    container.children[0].props["on_filter_type_change"](FilterType.EVERYTHING)

    assert log == []


def test_click_on_other_filter_sets_major(setup, filter_model):
    _, container, _ = setup
    log = []
    filter_model.add_observer(lambda *args: log.append(args))

    container.children[0].props["on_filter_type_change"](FilterType.FUTURE)

    assert filter_model.current_filter is FilterType.FUTURE
    assert log == [(UpdateType.MAJOR, FilterType.FUTURE)]


def test_filter_change_rerenders_bar_in_place(setup, renderer):
    _, container, _ = setup
    first = container.children[0]

    first.props["on_filter_type_change"](FilterType.PAST)

    (view,) = container.children
    assert first.removed
    assert view.props["current_filter"] is FilterType.PAST
    assert renderer.calls[-1][0] == "replace"


def test_points_change_updates_counts(setup):
    _, container, points_model = setup

    points_model.delete_point(UpdateType.MINOR, make_point("past"))

    assert counts(container.children[0])[FilterType.PAST] == 0
    assert counts(container.children[0])[FilterType.EVERYTHING] == 3
