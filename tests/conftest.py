import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from growthrates import create_app, i18n, settings  # noqa: E402
from growthrates.seed_growth_rates import build_registry  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_process_settings(monkeypatch):
    """Keep the process-wide max level and translator from leaking between tests."""
    monkeypatch.delenv(settings.ENV_VAR, raising=False)
    settings.reset_max_level()
    i18n.set_translator(None)
    yield
    settings.reset_max_level()
    i18n.set_translator(None)


@pytest.fixture()
def registry():
    return build_registry()


@pytest.fixture()
def test_app(registry):
    app = create_app(registry=registry, config={"TESTING": True})
    return app


@pytest.fixture()
def client(test_app):
    return test_app.test_client()
