import pytest

from jwkforge.core.config import settings


@pytest.fixture(autouse=True)
def fast_rsa(monkeypatch):
    # 2048 is the smallest size the settings accept; keeps RSA tests quick
    monkeypatch.setattr(settings, "rsa_key_size", 2048)
