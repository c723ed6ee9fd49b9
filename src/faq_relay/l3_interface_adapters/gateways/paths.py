"""Shared path constants for configuration and user knowledge bases."""

from __future__ import annotations

from platformdirs import user_config_path

CONFIG_DIR = user_config_path('faq-relay')
USER_FAQ_DIR = CONFIG_DIR / 'faq'

DEFAULT_CONFIG_PATHS = [
    CONFIG_DIR / 'config.yaml',
    CONFIG_DIR / 'config.yml',
]
