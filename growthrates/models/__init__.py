"""Growth rate model and registry."""

from .growth_rate import ExpFormula, GrowthRate  # noqa: F401
from .registry import GrowthRateRegistry  # noqa: F401

__all__ = ["ExpFormula", "GrowthRate", "GrowthRateRegistry"]
