import pytest

from growthrates import i18n
from growthrates.errors import DuplicateIdError, InvalidTableError, NotFoundError
from growthrates.models import GrowthRate, GrowthRateRegistry


def _curve(id_="Tiny", top=30):
    return GrowthRate(id=id_, real_name=id_, exp_values=(-1, 0, 10, top))


def test_register_and_get():
    reg = GrowthRateRegistry()
    assert reg.register(_curve()) is None
    assert reg.get("Tiny").exp_values == (-1, 0, 10, 30)
    assert "Tiny" in reg
    assert len(reg) == 1


def test_register_from_mapping():
    reg = GrowthRateRegistry()
    reg.register({"id": "Mapped", "name": "Mapped Curve", "exp_values": [-1, 0, 5], "exp_formula": lambda n: n * 5})
    g = reg.get("Mapped")
    assert isinstance(g, GrowthRate)
    assert g.real_name == "Mapped Curve"
    assert g.has_formula


def test_register_invalid_mapping_leaves_registry_empty():
    reg = GrowthRateRegistry()
    with pytest.raises(InvalidTableError):
        reg.register({"id": "Broken", "exp_values": [-1, 10, 5]})
    assert len(reg) == 0


def test_duplicate_registration_keeps_original(capsys):
    reg = GrowthRateRegistry()
    original = _curve(top=30)
    reg.register(original)
    with pytest.raises(DuplicateIdError) as exc:
        reg.register(_curve(top=999))
    assert exc.value.growth_rate_id == "Tiny"
    assert reg.get("Tiny") is original
    assert len(reg) == 1
    assert "duplicate_growth_rate" in capsys.readouterr().err


def test_get_unknown_raises_not_found():
    reg = GrowthRateRegistry()
    with pytest.raises(NotFoundError):
        reg.get("Missing")
    with pytest.raises(NotFoundError):
        reg.get(["unhashable"])
    assert reg.try_get("Missing") is None
    assert not reg.exists("Missing")


def test_get_accepts_growth_rate_instance():
    reg = GrowthRateRegistry()
    stored = _curve()
    reg.register(stored)
    lookalike = _curve()
    assert reg.get(lookalike) is stored


def test_keys_and_iteration_in_registration_order():
    reg = GrowthRateRegistry()
    for name in ("B", "A", "C"):
        reg.register(_curve(name))
    assert reg.keys() == ["B", "A", "C"]
    assert [g.id for g in reg] == ["B", "A", "C"]


def test_name_uses_installed_translator():
    reg = GrowthRateRegistry()
    reg.register(_curve("Fast"))
    i18n.set_translator(lambda key: f"<{key}>")
    g = reg.get("Fast")
    assert g.name == "<Fast>"
    assert g.real_name == "Fast"
    i18n.set_translator(None)
    assert g.name == "Fast"
