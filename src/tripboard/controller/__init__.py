"""
The CONTROLLER layer turns user actions into model mutations and model
notifications into view updates.
"""
from tripboard.controller.board import BoardController
from tripboard.controller.filter import FilterController
from tripboard.controller.new_point import NewPointController
from tripboard.controller.point import Mode, PointController

__all__ = [
    "BoardController",
    "FilterController",
    "Mode",
    "NewPointController",
    "PointController",
]
