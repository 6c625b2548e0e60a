"""
Configuration loader for the contract portal
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "portal_config.yml"
DEFAULT_API_BASE_URL = "https://oupoun-test-272677622251.me-central1.run.app/api/v2"


class ContractAPIConfig(BaseModel):
    """External contract-management API settings"""

    base_url: str = DEFAULT_API_BASE_URL
    contract_prefix: str = "/portal/contract"
    timeout_seconds: float = Field(default=15.0, gt=0.0, le=300.0)


class DisplayConfig(BaseModel):
    """Presentation settings"""

    timezone: str = "UTC"
    locale: Literal["ar", "en"] = "ar"


class PortalConfig(BaseModel):
    """Complete portal configuration"""

    api: ContractAPIConfig = Field(default_factory=ContractAPIConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    integrations_mode: Literal["real", "mock"] = "real"


def _env_overrides() -> Dict[str, Any]:
    overrides: Dict[str, Any] = {"api": {}, "display": {}}

    base_url = os.getenv("CONTRACT_API_BASE_URL", "").strip()
    if base_url:
        overrides["api"]["base_url"] = base_url

    timeout = os.getenv("CONTRACT_API_TIMEOUT", "").strip()
    if timeout:
        overrides["api"]["timeout_seconds"] = timeout

    tz = os.getenv("PORTAL_DISPLAY_TIMEZONE", "").strip()
    if tz:
        overrides["display"]["timezone"] = tz

    mode = os.getenv("INTEGRATIONS_MODE", "").strip().lower()
    if mode in {"real", "live"}:
        overrides["integrations_mode"] = "real"
    elif mode in {"mock", "test"}:
        overrides["integrations_mode"] = "mock"

    return overrides


def load_portal_config(config_path: Optional[Path] = None) -> PortalConfig:
    """
    Load and validate portal configuration

    Values come from the YAML file first, then environment variables
    (CONTRACT_API_BASE_URL, CONTRACT_API_TIMEOUT, PORTAL_DISPLAY_TIMEZONE,
    INTEGRATIONS_MODE) override them.

    Args:
        config_path: Path to config file. Defaults to config/portal_config.yml,
            which may be absent.

    Returns:
        Validated PortalConfig object

    Raises:
        FileNotFoundError: If an explicit config_path doesn't exist
        ValidationError: If config doesn't match schema
    """
    data: Dict[str, Any] = {}
    if config_path is not None and not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    path = config_path or DEFAULT_CONFIG_PATH
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

    for section, values in _env_overrides().items():
        if isinstance(values, dict):
            data[section] = {**(data.get(section) or {}), **values}
        else:
            data[section] = values

    try:
        config = PortalConfig(**data)
        logger.info("Loaded portal config (api=%s, mode=%s)", config.api.base_url, config.integrations_mode)
        return config
    except ValidationError as e:
        logger.error("Portal config validation failed: %s", e)
        raise
