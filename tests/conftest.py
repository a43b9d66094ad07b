import sys
from pathlib import Path

import pytest

# Ensure the `mosque_proxy` package is importable when running pytest from the repository root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mosque_proxy.core import config  # noqa: E402


@pytest.fixture(autouse=True)
def api_key_env(monkeypatch):
    monkeypatch.setenv("GOOGLE_MAPS_API_KEY", "test-key")
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()
