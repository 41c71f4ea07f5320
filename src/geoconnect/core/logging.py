"""
Logging configuration.

We use a YAML logging config (`src/geoconnect/config/logging.yaml`) and then apply
runtime overrides from settings (`GEOCONNECT_LOG_LEVEL`) or an explicit level
(e.g. the CLI's `--log-level`).
"""

from __future__ import annotations

import logging.config

from geoconnect.config.settings import get_logging_config, get_settings


def configure_logging(level: str | None = None) -> None:
    """Configure the Python logging system based on packaged YAML config + settings."""
    config = dict(get_logging_config())
    level = (level or get_settings().app.log_level).upper()

    config["root"] = {**config.get("root", {}), "level": level}
    handlers = {}
    for name, handler in config.get("handlers", {}).items():
        if isinstance(handler, dict) and "level" in handler:
            handler = {**handler, "level": level}
        handlers[name] = handler
    config["handlers"] = handlers

    logging.config.dictConfig(config)
