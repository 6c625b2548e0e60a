import pytest
from pydantic import ValidationError

from src.utils.config_loader import DEFAULT_API_BASE_URL, load_portal_config

ENV_VARS = ("CONTRACT_API_BASE_URL", "CONTRACT_API_TIMEOUT", "PORTAL_DISPLAY_TIMEZONE", "INTEGRATIONS_MODE")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_yaml_values_are_loaded(tmp_path):
    path = tmp_path / "portal.yml"
    path.write_text(
        "api:\n  base_url: https://yaml.example.test/api\n  timeout_seconds: 7\n"
        "display:\n  timezone: Asia/Riyadh\n"
        "integrations_mode: mock\n",
        encoding="utf-8",
    )

    cfg = load_portal_config(path)

    assert cfg.api.base_url == "https://yaml.example.test/api"
    assert cfg.api.timeout_seconds == 7
    assert cfg.api.contract_prefix == "/portal/contract"
    assert cfg.display.timezone == "Asia/Riyadh"
    assert cfg.integrations_mode == "mock"


def test_environment_overrides_yaml(tmp_path, monkeypatch):
    path = tmp_path / "portal.yml"
    path.write_text("api:\n  base_url: https://yaml.example.test/api\n", encoding="utf-8")
    monkeypatch.setenv("CONTRACT_API_BASE_URL", "https://env.example.test/api")
    monkeypatch.setenv("CONTRACT_API_TIMEOUT", "4.5")
    monkeypatch.setenv("INTEGRATIONS_MODE", "test")

    cfg = load_portal_config(path)

    assert cfg.api.base_url == "https://env.example.test/api"
    assert cfg.api.timeout_seconds == 4.5
    assert cfg.integrations_mode == "mock"


def test_empty_yaml_uses_defaults(tmp_path):
    path = tmp_path / "portal.yml"
    path.write_text("", encoding="utf-8")

    cfg = load_portal_config(path)

    assert cfg.api.base_url == DEFAULT_API_BASE_URL
    assert cfg.api.timeout_seconds == 15.0
    assert cfg.display.locale == "ar"
    assert cfg.integrations_mode == "real"


def test_missing_explicit_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_portal_config(tmp_path / "missing.yml")


def test_invalid_timeout_is_rejected(tmp_path, monkeypatch):
    path = tmp_path / "portal.yml"
    path.write_text("", encoding="utf-8")
    monkeypatch.setenv("CONTRACT_API_TIMEOUT", "0")

    with pytest.raises(ValidationError):
        load_portal_config(path)


def test_bundled_config_loads():
    cfg = load_portal_config()

    assert cfg.api.contract_prefix == "/portal/contract"
