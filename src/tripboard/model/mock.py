"""
Mock Trip Data
==============
Seed data for running the application without a backend.

Points are generated around ``now`` so that past, present and future filters
all have something to show.
"""
from __future__ import annotations

from datetime import datetime, timedelta
import random
from typing import Dict, List

from tripboard.model.enums import PointType
from tripboard.model.point import Destination, Offer, Point

DESTINATIONS: List[Destination] = [
    Destination(id="amsterdam", name="Amsterdam", description="Canals, bikes and museums."),
    Destination(id="geneva", name="Geneva", description="A city on the lake, at the foot of the Alps."),
    Destination(id="chamonix", name="Chamonix", description="Ski resort under Mont Blanc."),
    Destination(id="prague", name="Prague", description="Bridges over the Vltava and a castle on the hill."),
    Destination(id="vienna", name="Vienna", description="Coffee houses and the opera."),
]

OFFERS: Dict[PointType, List[Offer]] = {
    PointType.TAXI: [
        Offer(id="taxi-business", title="Upgrade to a business class", price=120),
        Offer(id="taxi-radio", title="Choose the radio station", price=60),
    ],
    PointType.BUS: [Offer(id="bus-seat", title="Choose seats", price=5)],
    PointType.TRAIN: [
        Offer(id="train-meal", title="Add meal", price=15),
        Offer(id="train-comfort", title="Switch to comfort", price=80),
    ],
    PointType.SHIP: [Offer(id="ship-cabin", title="Private cabin", price=150)],
    PointType.DRIVE: [Offer(id="drive-rent", title="Rent a car", price=200)],
    PointType.FLIGHT: [
        Offer(id="flight-luggage", title="Add luggage", price=50),
        Offer(id="flight-comfort", title="Switch to comfort", price=80),
        Offer(id="flight-meal", title="Add meal", price=15),
    ],
    PointType.CHECK_IN: [Offer(id="check-in-breakfast", title="Add breakfast", price=50)],
    PointType.SIGHTSEEING: [
        Offer(id="sightseeing-tickets", title="Book tickets", price=40),
        Offer(id="sightseeing-lunch", title="Lunch in city", price=30),
    ],
    PointType.RESTAURANT: [],
}


def generate_points(now: datetime, count: int, seed: int = 0) -> List[Point]:
    """Deterministic list of ``count`` points spread over -5..+5 days around ``now``."""
    rng = random.Random(seed)
    points: List[Point] = []
    for i in range(count):
        point_type = rng.choice(list(PointType))
        start = now + timedelta(days=rng.randint(-5, 5), hours=rng.randint(-12, 12))
        start = start.replace(second=0, microsecond=0)
        end = start + timedelta(minutes=rng.randint(30, 3 * 24 * 60))
        available = OFFERS[point_type]
        offers = tuple(offer.id for offer in rng.sample(available, k=rng.randint(0, len(available))))
        points.append(Point(
            id=f"point-{i + 1}",
            type=point_type,
            date_from=start,
            date_to=end,
            base_price=rng.randint(2, 120) * 10,
            destination=rng.choice(DESTINATIONS).id,
            offers=offers,
            is_favorite=rng.random() < 0.3,
        ))
    return points
