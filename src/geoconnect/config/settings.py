# src/geoconnect/config/settings.py
"""
Application settings (Pydantic).

Settings are loaded from `src/geoconnect/config/defaults.yaml`, then optionally overridden by:
- environment variables (e.g., `GEOCONNECT_RESOLVER_URL`, `GEOCONNECT_RESOLVER_API_KEY`)
- an external YAML file via `GEOCONNECT_CONFIG_PATH`

Design rule:
- Tuning knobs (globe radius, palette, default view) live in YAML, not hard-coded in business logic.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any
from geoconnect.core.env import load_dotenv_if_present

import yaml
from pydantic import BaseModel, Field

from geoconnect.core.geo import DEFAULT_GLOBE_RADIUS, EARTH_RADIUS_KM
from geoconnect.domain.models import ViewConfig
from geoconnect.topology.connections import CENTROID_COLOR, CENTROID_LABEL


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `geoconnect.config`."""
    text = resources.files("geoconnect.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


DEFAULT_PALETTE = [
    "#ef4444",  # red
    "#3b82f6",  # blue
    "#22c55e",  # green
    "#eab308",  # yellow
    "#ec4899",  # pink
    "#8b5cf6",  # violet
    "#f97316",  # orange
    "#06b6d4",  # cyan
]


class AppSettings(BaseModel):
    name: str = "GeoConnect"
    log_level: str = "INFO"


class GlobeSettings(BaseModel):
    radius: float = Field(DEFAULT_GLOBE_RADIUS, gt=0)
    earth_radius_km: float = Field(EARTH_RADIUS_KM, gt=0)
    centroid_color: str = CENTROID_COLOR
    centroid_label: str = CENTROID_LABEL
    palette: list[str] = Field(default_factory=lambda: list(DEFAULT_PALETTE), min_length=1)


class ResolverSettings(BaseModel):
    base_url: str | None = None
    timeout_seconds: float = 15
    api_key: str | None = None


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    globe: GlobeSettings = Field(default_factory=GlobeSettings)
    view: ViewConfig = Field(default_factory=ViewConfig)
    resolver: ResolverSettings = Field(default_factory=ResolverSettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload.

    Note: We intentionally keep this whitelist small to avoid exposing unsafe overrides.
    """
    load_dotenv_if_present()
    data = dict(data)

    log_level = os.getenv("GEOCONNECT_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level

    resolver_url = os.getenv("GEOCONNECT_RESOLVER_URL")
    resolver_key = os.getenv("GEOCONNECT_RESOLVER_API_KEY")
    if resolver_url:
        data.setdefault("resolver", {})["base_url"] = resolver_url
    if resolver_key:
        data.setdefault("resolver", {})["api_key"] = resolver_key

    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("GEOCONNECT_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
