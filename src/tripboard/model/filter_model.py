from __future__ import annotations

import logging

from tripboard.model.enums import FilterType, UpdateType
from tripboard.model.observable import Observable

logger = logging.getLogger(__name__)


class FilterModel(Observable):
    """Holds the active filter. Every ``set_filter`` call notifies observers."""

    def __init__(self, current_filter: FilterType = FilterType.EVERYTHING) -> None:
        super().__init__()
        self._current_filter = current_filter

    @property
    def current_filter(self) -> FilterType:
        return self._current_filter

    def set_filter(self, update_type: UpdateType, filter_type: FilterType) -> None:
        self._current_filter = filter_type
        logger.debug(f"Filter set to '{filter_type}' ({update_type}).")
        self._notify(update_type, filter_type)
