"""
Infrastructure layer - configuration

Loads config/app.yaml, overlays ELECCALC_* environment variables (optionally
from config/.env.local) and validates the result into AppSettings.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError as PydanticValidationError

from .exceptions import ConfigError
from .logging import get_logger

logger = get_logger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"
ENV_PREFIX = "ELECCALC_"


class AppSettings(BaseModel):
    """Validated application settings"""

    app_title: str = "Electrical Calculator"
    app_version: str = "1.0.1"
    default_panel: str = "wire-calc"
    default_standard: str = "NEC"
    breakpoint_px: int = Field(900, gt=0)
    drawer_width_px: int = Field(240, gt=0)
    log_level: str = "INFO"
    log_file: Optional[str] = None


class ConfigManager:
    """Configuration manager for the calculator app"""

    def __init__(self, config_dir: Optional[Path] = None, env: Optional[Dict[str, str]] = None):
        self.config_dir = Path(config_dir) if config_dir else CONFIG_DIR
        self._env = env
        self._cache: Optional[Dict[str, Any]] = None

    def _environ(self) -> Dict[str, str]:
        if self._env is not None:
            return self._env
        dotenv_path = self.config_dir / ".env.local"
        if dotenv_path.exists():
            load_dotenv(dotenv_path)
        return dict(os.environ)

    def load_file_config(self) -> Dict[str, Any]:
        """Read app.yaml; a missing file yields an empty dict"""
        if self._cache is not None:
            return dict(self._cache)

        cfg_path = self.config_dir / "app.yaml"
        data: Dict[str, Any] = {}
        if cfg_path.exists():
            try:
                data = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"invalid YAML in {cfg_path}: {e}", config_key=str(cfg_path)) from e
            if not isinstance(data, dict):
                raise ConfigError(f"{cfg_path} must contain a mapping", config_key=str(cfg_path))
        else:
            logger.info(f"no config file at {cfg_path}, using defaults")

        self._cache = data
        return dict(data)

    def get_config_value(self, key: str, default: Any = None) -> Any:
        env = self._environ()
        env_key = f"{ENV_PREFIX}{key.upper()}"
        if env_key in env:
            return env[env_key]
        return self.load_file_config().get(key, default)

    def load_settings(self) -> AppSettings:
        """Merge file config and environment overrides into AppSettings"""
        merged = self.load_file_config()
        env = self._environ()
        for name in AppSettings.model_fields:
            env_key = f"{ENV_PREFIX}{name.upper()}"
            if env_key in env:
                merged[name] = env[env_key]

        try:
            return AppSettings(**merged)
        except PydanticValidationError as e:
            first = e.errors()[0]
            key = ".".join(str(p) for p in first.get("loc", ()))
            raise ConfigError(f"invalid setting {key}: {first.get('msg')}", config_key=key) from e


def get_config_manager() -> ConfigManager:
    return ConfigManager()
