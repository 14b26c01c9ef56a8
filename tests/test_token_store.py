"""Tests for the encrypted token store."""

import pytest

from fitbit_gateway.token_store import TokenStore


@pytest.fixture(autouse=True)
def encryption_key(monkeypatch):
    from cryptography.fernet import Fernet

    monkeypatch.setattr(
        "fitbit_gateway.config.Config.ENCRYPTION_KEY", Fernet.generate_key().decode()
    )


def test_save_and_load(tmp_path):
    store = TokenStore(tmp_path / "nested" / "token.enc")

    store.save("abc")

    assert store.exists()
    assert "abc" not in store.path.read_text()
    assert store.load() == "abc"


def test_load_missing_returns_none(tmp_path):
    assert TokenStore(tmp_path / "token.enc").load() is None


def test_clear(tmp_path):
    store = TokenStore(tmp_path / "token.enc")
    store.save("abc")

    assert store.clear() is True
    assert not store.exists()
    assert store.clear() is False


def test_save_empty_token_rejected(tmp_path):
    with pytest.raises(ValueError):
        TokenStore(tmp_path / "token.enc").save("")


def test_default_path(monkeypatch, tmp_path):
    monkeypatch.setattr("fitbit_gateway.config.Config.TOKEN_PATH", tmp_path / "t.enc")

    assert TokenStore().path == tmp_path / "t.enc"
