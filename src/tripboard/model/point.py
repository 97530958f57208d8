"""
Trip Point Data Model
=====================
Defines the records shown on the board: points, their destinations and the
offers that can be attached to them.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional, Tuple

from tripboard.model.enums import PointType


@dataclass(frozen=True)
class Destination:
    id: str
    name: str
    description: str = ""


@dataclass(frozen=True)
class Offer:
    id: str
    title: str
    price: int = 0


@dataclass(frozen=True)
class Point:
    """
    A single scheduled item of the trip.

    Points are immutable; edits produce a new instance via
    ``dataclasses.replace`` which is then handed to the PointsModel.
    """
    id: str
    type: PointType
    date_from: datetime
    date_to: datetime
    base_price: int = 0
    destination: Optional[str] = None
    offers: Tuple[str, ...] = ()
    is_favorite: bool = False

    @property
    def duration(self) -> timedelta:
        return self.date_to - self.date_from

    @classmethod
    def blank(cls, now: datetime) -> Point:
        """Empty point used to seed the creation form."""
        start = now.replace(second=0, microsecond=0)
        return cls(
            id="",
            type=PointType.FLIGHT,
            date_from=start,
            date_to=start,
        )
