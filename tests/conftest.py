import sys
from pathlib import Path

import pytest

# Ensure `src` is on sys.path for tests when the package is not installed editable.
SRC = Path(__file__).resolve().parent.parent / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def _isolate_settings_env(monkeypatch):
    # Keep host environment and the settings cache from leaking into tests.
    for key in ("LOG_LEVEL", "CLOCK", "FIXED_CLOCK_AT"):
        monkeypatch.delenv(key, raising=False)
    from mappersmith_utils.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
