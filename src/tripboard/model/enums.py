"""
Shared Enumerations
===================
Closed sets of values exchanged between the models, controllers and views.
"""
from enum import StrEnum


class PointType(StrEnum):
    TAXI = "taxi"
    BUS = "bus"
    TRAIN = "train"
    SHIP = "ship"
    DRIVE = "drive"
    FLIGHT = "flight"
    CHECK_IN = "check-in"
    SIGHTSEEING = "sightseeing"
    RESTAURANT = "restaurant"


class FilterType(StrEnum):
    EVERYTHING = "everything"
    FUTURE = "future"
    PRESENT = "present"
    PAST = "past"


class SortType(StrEnum):
    DEFAULT = "default"
    TIME = "time"
    PRICE = "price"


class UpdateType(StrEnum):
    """Scope of a model notification, used to decide how much to re-render."""
    PATCH = "patch"  # one point's non-structural fields
    MINOR = "minor"  # list membership or order
    MAJOR = "major"  # selection context (filter switch, create-with-reset)


class UserAction(StrEnum):
    UPDATE_POINT = "update_point"
    ADD_POINT = "add_point"
    DELETE_POINT = "delete_point"
