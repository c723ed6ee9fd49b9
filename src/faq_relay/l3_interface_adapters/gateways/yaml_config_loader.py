"""Gateway: YAML configuration reader — raw dicts for build_app_config / InfraConfig."""

from __future__ import annotations

from pathlib import Path

import yaml

from faq_relay.l3_interface_adapters.gateways.paths import DEFAULT_CONFIG_PATHS


class YamlConfigLoader:
    """Reads the user's YAML config without validating it.

    The result holds both the domain sections (completion, chunker, faq) and
    provider sections (openai); callers split and validate them.
    """

    def load_raw(
        self,
        config_path: str | None = None,
        overrides: dict | None = None,
    ) -> dict:
        """Return the explicit file, or the first default config found, with *overrides* merged in."""
        data = _read_yaml(_resolve_path(config_path))
        if overrides:
            deep_merge(data, overrides)
        return data


def _resolve_path(config_path: str | None) -> Path | None:
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f'Config file not found: {path}')
        return path
    return next((p for p in DEFAULT_CONFIG_PATHS if p.exists()), None)


def _read_yaml(path: Path | None) -> dict:
    if path is None:
        return {}
    data = yaml.safe_load(path.read_text(encoding='utf-8')) or {}
    if not isinstance(data, dict):
        raise ValueError(f'Config file must contain a mapping at the top level: {path}')
    return data


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base
