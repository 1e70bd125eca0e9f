from pathlib import Path

import pytest

from config import DEFAULT_DATA_DIR, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("GEO_DATA_DIR", "CORS_ORIGINS", "FRONTEND_URL", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = get_settings()

    assert settings.data_dir == DEFAULT_DATA_DIR
    assert settings.allowed_origins == ["*"]
    assert settings.log_level == "INFO"


def test_data_dir_override(monkeypatch, tmp_path):
    monkeypatch.setenv("GEO_DATA_DIR", str(tmp_path))

    assert get_settings().data_dir == Path(tmp_path)


def test_cors_origins_split_and_stripped(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://a, http://b ,")
    monkeypatch.setenv("FRONTEND_URL", "http://c")

    assert get_settings().allowed_origins == ["http://a", "http://b", "http://c"]


def test_frontend_url_added_once(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://a,http://c")
    monkeypatch.setenv("FRONTEND_URL", "http://c")

    assert get_settings().allowed_origins == ["http://a", "http://c"]


def test_log_level_upper_cased(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert get_settings().log_level == "DEBUG"
