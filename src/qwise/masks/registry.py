"""Registry utilities for gain-mask provider factories."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from .base import BaseGainMaskProvider
from .providers import BinGainMask, ConstantGainMask

ProviderFactory = Callable[[dict[str, Any]], BaseGainMaskProvider]


class RegistryError(RuntimeError):
    """Raised for invalid registry operations."""


@dataclass
class MaskProviderRegistry:
    """Simple name-to-factory mapping for gain-mask providers."""

    _factories: dict[str, ProviderFactory] = field(default_factory=dict)

    def register(
        self,
        name: str,
        factory: ProviderFactory,
        *,
        overwrite: bool = False,
    ) -> None:
        if not overwrite and name in self._factories:
            raise RegistryError(f"Mask provider '{name}' is already registered.")
        self._factories[name] = factory

    def create(
        self, name: str, params: Mapping[str, Any] | None = None
    ) -> BaseGainMaskProvider:
        if name not in self._factories:
            available = ", ".join(sorted(self._factories)) or "<none>"
            raise RegistryError(
                f"Unknown mask provider '{name}'. Available providers: {available}"
            )
        return self._factories[name]({} if params is None else dict(params))

    def available(self) -> list[str]:
        return sorted(self._factories)


def _build_constant(params: dict[str, Any]) -> BaseGainMaskProvider:
    return ConstantGainMask(**params)


def _build_bins(params: dict[str, Any]) -> BaseGainMaskProvider:
    if "gains" not in params:
        raise ValueError("Mask provider 'bins' requires a 'gains' parameter.")
    return BinGainMask(params["gains"])


def default_mask_registry() -> MaskProviderRegistry:
    """Return a registry populated with the built-in providers."""
    registry = MaskProviderRegistry()
    registry.register("constant", _build_constant)
    registry.register("bins", _build_bins)
    return registry
