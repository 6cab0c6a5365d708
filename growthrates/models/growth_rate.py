"""Growth rate (experience curve) model.

A growth rate maps a level to the minimum cumulative Exp a creature needs to
be at that level. Values come from a precomputed table indexed by level
(index 0 is an unused sentinel); levels past the end of the table fall back to
an optional formula. Everything here is a pure function of the curve's data
plus the maximum level, which is owned by ``growthrates.settings``.

Every conversion accepts an optional ``max_level`` keyword. When omitted the
process-wide value from ``settings.max_level()`` is used.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Optional, Tuple

from growthrates import i18n, settings
from growthrates.errors import (
    CurveIntegrityError,
    InvalidExpError,
    InvalidLevelError,
    InvalidTableError,
    MissingFormulaError,
)

ExpFormula = Callable[[int], int]


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _resolve_cap(max_level: Optional[int]) -> int:
    if max_level is None:
        return settings.max_level()
    return settings.validate_max_level(max_level)


@dataclass(frozen=True)
class GrowthRate:
    id: str
    real_name: str
    exp_values: Tuple[int, ...]
    exp_formula: Optional[ExpFormula] = None

    def __post_init__(self):
        if not isinstance(self.id, str) or not self.id:
            raise InvalidTableError(f"Growth rate id must be a non-empty string, got {self.id!r}.")
        values = tuple(self.exp_values or ())
        if not all(_is_int(v) for v in values):
            raise InvalidTableError(f"Growth rate {self.id!r} has non-integer Exp values.")
        # exp_values[0] is a sentinel and is not part of the curve
        for level in range(2, len(values)):
            if values[level] < values[level - 1]:
                raise InvalidTableError(
                    f"Growth rate {self.id!r} decreases at level {level} "
                    f"({values[level - 1]} -> {values[level]})."
                )
        object.__setattr__(self, "exp_values", values)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GrowthRate":
        """Build a growth rate from a registration mapping.

        Keys: ``id``, ``name`` (defaults to "Unnamed"), ``exp_values`` and the
        optional ``exp_formula``.
        """
        return cls(
            id=data.get("id"),
            real_name=data.get("name") or "Unnamed",
            exp_values=tuple(data.get("exp_values") or ()),
            exp_formula=data.get("exp_formula"),
        )

    @property
    def name(self) -> str:
        """The translated display name."""
        return i18n.translate(self.real_name)

    @property
    def has_formula(self) -> bool:
        return self.exp_formula is not None

    def minimum_exp_for_level(self, level: int, *, max_level: Optional[int] = None) -> int:
        """Return the minimum Exp needed to be at ``level``.

        Levels above the maximum level are clamped to it.
        """
        if not _is_int(level) or level <= 0:
            raise InvalidLevelError(level)
        cap = _resolve_cap(max_level)
        level = min(level, cap)
        if level < len(self.exp_values):
            return self.exp_values[level]
        if self.exp_formula is None:
            raise MissingFormulaError(self.id, level)
        return int(self.exp_formula(level))

    def maximum_exp(self, *, max_level: Optional[int] = None) -> int:
        """Return the most Exp a creature with this growth rate can have."""
        cap = _resolve_cap(max_level)
        return self.minimum_exp_for_level(cap, max_level=cap)

    def add_exp(self, exp1: int, exp2: int, *, max_level: Optional[int] = None) -> int:
        """Return ``exp1 + exp2`` clamped to ``[0, maximum_exp()]``."""
        ceiling = self.maximum_exp(max_level=max_level)
        return max(0, min(exp1 + exp2, ceiling))

    def level_from_exp(self, exp: int, *, max_level: Optional[int] = None) -> int:
        """Return the level of a creature that has ``exp`` Exp."""
        if not _is_int(exp) or exp < 0:
            raise InvalidExpError(exp)
        cap = _resolve_cap(max_level)
        if exp >= self.maximum_exp(max_level=cap):
            return cap
        # Greatest level whose threshold is <= exp; thresholds are non-decreasing.
        lo, hi = 1, cap
        found = 0
        while lo <= hi:
            mid = (lo + hi) // 2
            if self.minimum_exp_for_level(mid, max_level=cap) <= exp:
                found = mid
                lo = mid + 1
            else:
                hi = mid - 1
        if found == 0:
            raise CurveIntegrityError(
                f"Exp amount {exp} is below the level 1 threshold of growth rate {self.id!r}."
            )
        return found

    def exp_to_next_level(self, exp: int, *, max_level: Optional[int] = None) -> int:
        """Return how much more Exp is needed to reach the next level (0 at max)."""
        cap = _resolve_cap(max_level)
        level = self.level_from_exp(exp, max_level=cap)
        if level >= cap:
            return 0
        return self.minimum_exp_for_level(level + 1, max_level=cap) - exp

    def exp_table(self, *, max_level: Optional[int] = None) -> List[Tuple[int, int]]:
        """Return (level, minimum Exp) pairs for every level up to the maximum."""
        cap = _resolve_cap(max_level)
        return [(level, self.minimum_exp_for_level(level, max_level=cap)) for level in range(1, cap + 1)]


__all__ = ["GrowthRate", "ExpFormula"]
