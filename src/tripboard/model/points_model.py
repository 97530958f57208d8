"""
Points Model (Collection)
=========================
The authoritative, in-memory set of trip points together with the
destination and offer catalogues they reference.

Why is this file needed?
------------------------
1. Authority: It is the only place that decides whether a mutation is valid.
   Controllers never validate; they forward user actions here.
2. Notification: Every successful mutation is followed by a synchronous
   notification so that the board can reconcile what is rendered.
"""
from __future__ import annotations

from dataclasses import replace
import logging
from typing import Dict, Iterable, List, Mapping, Optional, Sequence
from uuid import uuid4

from tripboard.model.enums import PointType, UpdateType
from tripboard.model.observable import Observable
from tripboard.model.point import Destination, Offer, Point

logger = logging.getLogger(__name__)


class PointsModelError(ValueError):
    """Raised when a mutation is rejected. No observer is notified."""


class PointsModel(Observable):
    def __init__(
        self,
        points: Iterable[Point] = (),
        destinations: Iterable[Destination] = (),
        offers: Optional[Mapping[PointType, Sequence[Offer]]] = None,
    ) -> None:
        super().__init__()
        self._destinations: Dict[str, Destination] = {d.id: d for d in destinations}
        self._offers: Dict[PointType, List[Offer]] = {
            point_type: list(items) for point_type, items in (offers or {}).items()
        }
        self._points: List[Point] = list(points)

    # --- READ ACCESS ---

    @property
    def points(self) -> List[Point]:
        """A copy of the current points, so callers may sort it freely."""
        return list(self._points)

    @property
    def destinations(self) -> List[Destination]:
        return list(self._destinations.values())

    @property
    def offers(self) -> Dict[PointType, List[Offer]]:
        return {point_type: list(items) for point_type, items in self._offers.items()}

    def get_destination(self, destination_id: Optional[str]) -> Optional[Destination]:
        if destination_id is None:
            return None
        return self._destinations.get(destination_id)

    def get_offers(self, point_type: PointType) -> List[Offer]:
        return list(self._offers.get(point_type, []))

    # --- MUTATIONS ---

    def update_point(self, update_type: UpdateType, point: Point) -> None:
        index = self._index_of(point.id)
        self._validate(point)
        self._points[index] = point
        logger.info(f"Point '{point.id}' updated ({update_type}).")
        self._notify(update_type, point)

    def add_point(self, update_type: UpdateType, point: Point) -> None:
        if not point.id:
            point = replace(point, id=str(uuid4()))
        elif any(p.id == point.id for p in self._points):
            raise PointsModelError(f"Point with id '{point.id}' already exists.")
        self._validate(point)
        self._points.insert(0, point)
        logger.info(f"Point '{point.id}' added ({update_type}).")
        self._notify(update_type, point)

    def delete_point(self, update_type: UpdateType, point: Point) -> None:
        index = self._index_of(point.id)
        del self._points[index]
        logger.info(f"Point '{point.id}' deleted ({update_type}).")
        self._notify(update_type, point)

    # --- HELPERS ---

    def _index_of(self, point_id: str) -> int:
        for i, p in enumerate(self._points):
            if p.id == point_id:
                return i
        raise PointsModelError(f"Point with id '{point_id}' not found.")

    def _validate(self, point: Point) -> None:
        if point.date_from > point.date_to:
            raise PointsModelError("Point cannot end before it starts.")
        if point.base_price < 0:
            raise PointsModelError("Price must not be negative.")
        if point.destination not in self._destinations:
            raise PointsModelError(f"Unknown destination '{point.destination}'.")

        available = {offer.id for offer in self._offers.get(point.type, [])}
        unknown = [offer_id for offer_id in point.offers if offer_id not in available]
        if unknown:
            raise PointsModelError(
                f"Offers {unknown} are not available for type '{point.type}'."
            )
