"""Signal processing utilities."""

from .spectral import SpectralFilter, clamp_gain
from .window import AnalysisWindow

__all__ = ["AnalysisWindow", "SpectralFilter", "clamp_gain"]
