"""
Observer Base
=============
Minimal publish-subscribe helper shared by the PointsModel and FilterModel.

Observers are plain callables ``observer(update_type, data)``. They are
called synchronously, in the order they were registered, after the model
has finished applying a change.
"""
from __future__ import annotations

from typing import Any, Callable, List

from tripboard.model.enums import UpdateType

Observer = Callable[[UpdateType, Any], None]


class Observable:
    def __init__(self) -> None:
        self._observers: List[Observer] = []

    def add_observer(self, observer: Observer) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        self._observers.remove(observer)

    def _notify(self, update_type: UpdateType, data: Any) -> None:
        # Copy: an observer may unsubscribe while we iterate
        for observer in list(self._observers):
            observer(update_type, data)
