import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT / "src") not in sys.path:
    sys.path.insert(0, str(ROOT / "src"))

import pytest

from sici import Sici


@pytest.fixture()
def lax_sici() -> Sici:
    return Sici()


@pytest.fixture()
def strict_sici() -> Sici:
    return Sici(mode="strict")


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch):
    """Keep developer .env settings out of the tests."""

    monkeypatch.delenv("SICI_MODE", raising=False)
    monkeypatch.delenv("SICI_LOG_LEVEL", raising=False)
