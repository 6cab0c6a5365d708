"""Error types raised by growth rate lookups and registration.

Every error derives from ``GrowthRateError`` so callers (the HTTP layer, the
CLI) can catch the whole family at once. They indicate data or programmer
errors and are never retried.
"""

from __future__ import annotations


class GrowthRateError(Exception):
    """Base class for all growth rate errors."""


class DuplicateIdError(GrowthRateError, ValueError):
    def __init__(self, growth_rate_id):
        super().__init__(f"Growth rate {growth_rate_id!r} is already registered.")
        self.growth_rate_id = growth_rate_id


class NotFoundError(GrowthRateError, LookupError):
    def __init__(self, growth_rate_id):
        super().__init__(f"Unknown growth rate {growth_rate_id!r}.")
        self.growth_rate_id = growth_rate_id


class InvalidLevelError(GrowthRateError, ValueError):
    def __init__(self, level):
        super().__init__(f"Level {level!r} is invalid.")
        self.level = level


class InvalidExpError(GrowthRateError, ValueError):
    def __init__(self, exp):
        super().__init__(f"Exp amount {exp!r} is invalid.")
        self.exp = exp


class MissingFormulaError(GrowthRateError, LookupError):
    def __init__(self, growth_rate_id, level):
        super().__init__(f"No Exp formula is defined for growth rate {growth_rate_id!r} (level {level}).")
        self.growth_rate_id = growth_rate_id
        self.level = level


class InvalidTableError(GrowthRateError, ValueError):
    """Raised when a growth rate definition is malformed (bad id, decreasing table)."""


class CurveIntegrityError(GrowthRateError, RuntimeError):
    """Raised when an exp amount falls below every level threshold of a curve."""


__all__ = [
    "GrowthRateError",
    "DuplicateIdError",
    "NotFoundError",
    "InvalidLevelError",
    "InvalidExpError",
    "MissingFormulaError",
    "InvalidTableError",
    "CurveIntegrityError",
]
