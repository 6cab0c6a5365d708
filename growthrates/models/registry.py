"""Registry of growth rates, keyed by id.

The data loading step builds one registry at startup and registers every
growth rate into it; afterwards it is only read. The registry is passed to
whoever needs it (the Flask app keeps it in ``app.extensions``) instead of
living in a module global.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Mapping, Optional, Union

from growthrates.errors import DuplicateIdError, NotFoundError
from growthrates.logging_utils import get_logger
from growthrates.models.growth_rate import GrowthRate

_log = get_logger("registry")


class GrowthRateRegistry:
    def __init__(self):
        self._data: Dict[str, GrowthRate] = {}

    def register(self, definition: Union[GrowthRate, Mapping[str, Any]]) -> None:
        """Add a growth rate. Raises DuplicateIdError if its id is taken."""
        growth_rate = definition if isinstance(definition, GrowthRate) else GrowthRate.from_dict(definition)
        if growth_rate.id in self._data:
            _log.warn(event="duplicate_growth_rate", id=growth_rate.id)
            raise DuplicateIdError(growth_rate.id)
        self._data[growth_rate.id] = growth_rate
        _log.debug(event="growth_rate_registered", id=growth_rate.id, has_formula=growth_rate.has_formula)

    def get(self, other: Union[str, GrowthRate]) -> GrowthRate:
        key = other.id if isinstance(other, GrowthRate) else other
        try:
            return self._data[key]
        except (KeyError, TypeError):
            raise NotFoundError(key) from None

    def try_get(self, other: Union[str, GrowthRate]) -> Optional[GrowthRate]:
        try:
            return self.get(other)
        except NotFoundError:
            return None

    def exists(self, other: Union[str, GrowthRate]) -> bool:
        return self.try_get(other) is not None

    def keys(self) -> List[str]:
        return list(self._data)

    def __contains__(self, other) -> bool:
        return self.exists(other)

    def __iter__(self) -> Iterator[GrowthRate]:
        return iter(list(self._data.values()))

    def __len__(self) -> int:
        return len(self._data)


__all__ = ["GrowthRateRegistry"]
