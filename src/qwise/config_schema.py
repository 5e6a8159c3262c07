"""Typed OmegaConf schemas for filtering configurations."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
import importlib
from typing import Any, Mapping, TypeVar, cast

import numpy as np

try:
    OmegaConf = importlib.import_module("omegaconf").OmegaConf
except ModuleNotFoundError as exc:  # pragma: no cover
    raise RuntimeError(
        "qwise.config_schema requires 'omegaconf'. Install dependencies with `uv sync`."
    ) from exc

PARTIAL_FRAME_POLICIES = ("drop", "pad")


@dataclass
class FrameConfig:
    """Framing configuration schema."""

    frame_size: int = 256
    window: str = "hann"
    partial_frame: str = "drop"


@dataclass
class PCMConfig:
    """Integer PCM representation schema."""

    dtype: str = "int16"


@dataclass
class MaskConfig:
    """Gain-mask provider schema."""

    type: str = "constant"
    params: dict[str, Any] = field(default_factory=dict)


@dataclass
class RuntimeConfig:
    """Runtime execution configuration schema."""

    log_level: str = "INFO"
    log_every: int = 500
    frame_log: str | None = None
    workers: int = 1


@dataclass
class QWiseConfig:
    """Top-level filtering configuration schema."""

    frame: FrameConfig = field(default_factory=FrameConfig)
    pcm: PCMConfig = field(default_factory=PCMConfig)
    mask: MaskConfig = field(default_factory=MaskConfig)
    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)


TSchema = TypeVar("TSchema")


def _decode_schema(
    data: Mapping[str, object],
    schema: type[TSchema],
) -> TSchema:
    base = OmegaConf.structured(schema)
    loaded = OmegaConf.create(dict(data))
    merged = OmegaConf.merge(base, loaded)
    decoded = OmegaConf.to_object(merged)
    if not isinstance(decoded, schema):
        raise TypeError(f"Failed to decode config as {schema.__name__}")
    return cast(TSchema, decoded)


def validate_config(config: QWiseConfig) -> QWiseConfig:
    """Check value ranges that the structured schema cannot express."""
    if config.frame.frame_size < 2:
        raise ValueError("frame.frame_size must be at least 2")
    if config.frame.partial_frame not in PARTIAL_FRAME_POLICIES:
        raise ValueError(
            f"frame.partial_frame must be one of {PARTIAL_FRAME_POLICIES}, "
            f"got '{config.frame.partial_frame}'"
        )
    try:
        dtype = np.dtype(config.pcm.dtype)
    except TypeError as exc:
        raise ValueError(f"Unknown PCM dtype '{config.pcm.dtype}'") from exc
    if dtype.kind != "i":
        raise ValueError(f"pcm.dtype must be a signed integer type, got '{dtype}'")
    if config.runtime.workers < 1:
        raise ValueError("runtime.workers must be at least 1")
    if config.runtime.log_every < 0:
        raise ValueError("runtime.log_every must be non-negative")
    return config


def parse_config(data: Mapping[str, object]) -> QWiseConfig:
    """Decode and validate a mapping into :class:`QWiseConfig`."""
    return validate_config(_decode_schema(data, QWiseConfig))


def config_to_dict(config: QWiseConfig) -> dict[str, Any]:
    """Convert :class:`QWiseConfig` to plain dictionary."""
    return asdict(config)
