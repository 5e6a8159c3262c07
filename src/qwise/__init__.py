"""qwise public API."""

from .config_schema import QWiseConfig, parse_config
from .configs import dump_config, load_config, load_yaml, save_config
from .engine import SpectralGainEngine
from .io_models import FilterResult, FrameOutput, NoInputError
from .logging_utils import JsonlLogger, configure_logging, log_frames_jsonl
from .masks import (
    BaseGainMaskProvider,
    BinGainMask,
    ConstantGainMask,
    FunctionGainMask,
    MaskProviderRegistry,
    RegistryError,
    default_mask_registry,
)
from .pipeline import FramePipeline, build_pipeline, filter_pcm
from .signal import AnalysisWindow, SpectralFilter

__all__ = [
    "AnalysisWindow",
    "SpectralFilter",
    "SpectralGainEngine",
    "FramePipeline",
    "build_pipeline",
    "filter_pcm",
    "BaseGainMaskProvider",
    "ConstantGainMask",
    "BinGainMask",
    "FunctionGainMask",
    "MaskProviderRegistry",
    "RegistryError",
    "default_mask_registry",
    "FrameOutput",
    "FilterResult",
    "NoInputError",
    "QWiseConfig",
    "parse_config",
    "load_config",
    "load_yaml",
    "save_config",
    "dump_config",
    "JsonlLogger",
    "configure_logging",
    "log_frames_jsonl",
]
