import pytest

from growthrates import settings
from growthrates.errors import DuplicateIdError
from growthrates.seed_growth_rates import GROWTH_RATE_DEFINITIONS, register_default_growth_rates

GROWTH_RATE_IDS = ["Medium", "Erratic", "Fluctuating", "Parabolic", "Fast", "Slow"]

LEVEL_100_EXP = {
    "Medium": 1_000_000,
    "Erratic": 600_000,
    "Fluctuating": 1_640_000,
    "Parabolic": 1_059_860,
    "Fast": 800_000,
    "Slow": 1_250_000,
}


def test_all_growth_rates_registered(registry):
    assert registry.keys() == GROWTH_RATE_IDS
    for g in registry:
        assert len(g.exp_values) == 101
        assert g.exp_values[0] == -1
        assert g.has_formula


def test_default_max_level_is_100():
    assert settings.max_level() == 100


@pytest.mark.parametrize("growth_rate_id", GROWTH_RATE_IDS)
def test_thresholds_non_decreasing(registry, growth_rate_id):
    g = registry.get(growth_rate_id)
    values = [g.minimum_exp_for_level(level) for level in range(1, settings.max_level() + 1)]
    assert values == sorted(values)


@pytest.mark.parametrize("growth_rate_id", GROWTH_RATE_IDS)
def test_level_exp_round_trip(registry, growth_rate_id):
    g = registry.get(growth_rate_id)
    for level in range(1, settings.max_level() + 1):
        assert g.level_from_exp(g.minimum_exp_for_level(level)) == level


@pytest.mark.parametrize("growth_rate_id", GROWTH_RATE_IDS)
def test_boundaries(registry, growth_rate_id):
    g = registry.get(growth_rate_id)
    assert g.maximum_exp() == LEVEL_100_EXP[growth_rate_id]
    assert g.level_from_exp(g.maximum_exp()) == 100
    assert g.level_from_exp(0) == 1


@pytest.mark.parametrize("growth_rate_id", GROWTH_RATE_IDS)
@pytest.mark.parametrize("a,b", [(0, 0), (0, 5), (123_456, 987_654), (10**7, 10**7), (500, 0)])
def test_add_exp_stays_in_range(registry, growth_rate_id, a, b):
    g = registry.get(growth_rate_id)
    total = g.add_exp(a, b)
    assert 0 <= total <= g.maximum_exp()


def test_fast_curve_scenario(registry):
    fast = registry.get("Fast")
    assert fast.minimum_exp_for_level(100, max_level=100) == 800_000
    assert fast.level_from_exp(800_000, max_level=100) == 100
    assert fast.level_from_exp(799_999, max_level=100) == 99


def test_erratic_uses_formula_past_table():
    from growthrates.seed_growth_rates import build_registry

    settings.configure_max_level(150)
    erratic = build_registry().get("Erratic")
    last_tabulated = erratic.exp_values[-1]
    assert erratic.minimum_exp_for_level(101) == 101**4 * 3 // 500 == 624_362
    assert erratic.minimum_exp_for_level(101) >= last_tabulated
    assert erratic.maximum_exp() == 150**4 * 3 // 500
    assert erratic.level_from_exp(624_362) == 101
    assert erratic.level_from_exp(624_361) == 100


@pytest.mark.parametrize("growth_rate_id", GROWTH_RATE_IDS)
def test_formulas_continue_above_table(registry, growth_rate_id):
    g = registry.get(growth_rate_id)
    values = [g.minimum_exp_for_level(level, max_level=150) for level in range(100, 151)]
    assert values == sorted(values)
    assert values[1] > values[0]


def test_fast_formula_beyond_table(registry):
    assert registry.get("Fast").minimum_exp_for_level(101, max_level=101) == 824_240


def test_lower_max_level_caps_conversion(registry):
    fast = registry.get("Fast")
    assert fast.maximum_exp(max_level=50) == 100_000
    assert fast.level_from_exp(800_000, max_level=50) == 50
    assert fast.add_exp(99_000, 5_000, max_level=50) == 100_000


def test_invalid_levels_on_builtin_curve(registry):
    from growthrates.errors import InvalidLevelError

    for level in (0, -1):
        with pytest.raises(InvalidLevelError):
            registry.get("Medium").minimum_exp_for_level(level)


def test_seeding_twice_fails(registry):
    with pytest.raises(DuplicateIdError):
        register_default_growth_rates(registry)
    assert len(registry) == len(GROWTH_RATE_DEFINITIONS)
