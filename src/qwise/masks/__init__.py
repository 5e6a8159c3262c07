"""Gain-mask providers.

A provider is the only place where external knowledge about the signal
enters the filter. The engine treats its output as an opaque per-bin
attenuation and never assumes how it was derived.
"""

from .base import BaseGainMaskProvider
from .interfaces import GainMaskProviderProtocol
from .providers import BinGainMask, ConstantGainMask, FunctionGainMask, GainFunction
from .registry import MaskProviderRegistry, RegistryError, default_mask_registry

__all__ = [
    "BaseGainMaskProvider",
    "GainMaskProviderProtocol",
    "ConstantGainMask",
    "BinGainMask",
    "FunctionGainMask",
    "GainFunction",
    "MaskProviderRegistry",
    "RegistryError",
    "default_mask_registry",
]
