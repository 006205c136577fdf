import pytest

from storefront.config import Settings
from storefront.core.errors import MissingCredential


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("BOT_TOKEN", "TELEGRAM_BOT_TOKEN", "MANAGER_CHAT_ID", "EXPORT_ORDERS"):
        monkeypatch.delenv(name, raising=False)


def test_missing_token_is_fatal():
    settings = Settings(_env_file=None)
    with pytest.raises(MissingCredential):
        settings.require_token()


def test_blank_token_is_fatal(monkeypatch):
    monkeypatch.setenv("BOT_TOKEN", "   ")
    with pytest.raises(MissingCredential):
        Settings(_env_file=None).require_token()


def test_token_from_env(monkeypatch):
    monkeypatch.setenv("BOT_TOKEN", "123:abc")
    assert Settings(_env_file=None).require_token() == "123:abc"


def test_token_alias(monkeypatch):
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "456:def")
    assert Settings(_env_file=None).require_token() == "456:def"


def test_optional_settings(monkeypatch, tmp_path):
    monkeypatch.setenv("MANAGER_CHAT_ID", "777")
    monkeypatch.setenv("EXPORT_ORDERS", "false")
    monkeypatch.setenv("ORDERS_DIR", str(tmp_path))

    settings = Settings(_env_file=None)

    assert settings.manager_chat_id == 777
    assert settings.export_orders is False
    assert settings.orders_path == tmp_path
    assert settings.images_path == settings.data_dir / "images"
