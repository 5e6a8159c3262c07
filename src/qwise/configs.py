"""YAML loading and saving for qwise configurations."""

from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any, Iterable

import yaml

from .config_schema import QWiseConfig, config_to_dict, parse_config

try:
    OmegaConf = importlib.import_module("omegaconf").OmegaConf
except ModuleNotFoundError as exc:
    raise RuntimeError(
        "qwise requires 'omegaconf'. Install dependencies with `uv sync`."
    ) from exc


def _clean_overrides(overrides: Iterable[str] | None) -> list[str]:
    return [item for item in (overrides or []) if item]


def _to_plain_dict(cfg: Any, *, context: str) -> dict[str, Any]:
    container = OmegaConf.to_container(cfg, resolve=True)
    if not isinstance(container, dict):
        raise TypeError(f"Expected mapping in {context}, got {type(container)!r}")
    return {str(key): item for key, item in container.items()}


def load_yaml(
    path: str | Path,
    *,
    overrides: Iterable[str] | None = None,
) -> dict[str, Any]:
    """Load a YAML file into a dictionary, with optional dotlist overrides."""
    cfg = OmegaConf.load(Path(path))
    override_list = _clean_overrides(overrides)
    if override_list:
        cfg = OmegaConf.merge(cfg, OmegaConf.from_dotlist(override_list))
    return _to_plain_dict(cfg, context=str(path))


def merge_overrides(
    data: dict[str, Any],
    overrides: Iterable[str] | None = None,
) -> dict[str, Any]:
    """Merge ``key.sub=value`` overrides into an existing mapping."""
    override_list = _clean_overrides(overrides)
    if not override_list:
        return dict(data)
    merged = OmegaConf.merge(
        OmegaConf.create(data), OmegaConf.from_dotlist(override_list)
    )
    return _to_plain_dict(merged, context="merged overrides")


def load_config(
    path: str | Path | None = None,
    *,
    overrides: Iterable[str] | None = None,
) -> QWiseConfig:
    """Load a YAML config (or the defaults) and apply dotlist overrides."""
    data = load_yaml(path) if path is not None else {}
    return parse_config(merge_overrides(data, overrides))


def save_config(path: str | Path, config: QWiseConfig) -> None:
    """Write a resolved :class:`QWiseConfig` to YAML."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(config_to_dict(config), handle, sort_keys=False)


def dump_config(config: QWiseConfig) -> str:
    """Render a :class:`QWiseConfig` as YAML text."""
    return yaml.safe_dump(config_to_dict(config), sort_keys=False)
