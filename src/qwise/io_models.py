"""Typed data models shared by the engine and the frame pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np


class NoInputError(ValueError):
    """Raised when the PCM source supplies no usable samples."""


@dataclass(slots=True)
class FrameOutput:
    """Result of filtering one frame.

    Parameters
    ----------
    samples:
        Reconstructed real-valued frame of length ``N``.
    gain:
        Clamped per-bin gain that was applied to the spectrum.
    frame_index:
        Position of the frame within the session.
    """

    samples: np.ndarray
    gain: np.ndarray
    frame_index: int = 0


@dataclass(slots=True)
class FilterResult:
    """Output of one full pipeline run.

    Parameters
    ----------
    samples:
        Concatenated reconstructed PCM in the input integer dtype.
    n_frames:
        Number of frames processed.
    frame_size:
        Frame length ``N``.
    n_dropped:
        Trailing input samples discarded because they did not fill a frame.
    n_padded:
        Zeros appended to complete the final frame (``pad`` policy only).
    metadata:
        Free-form run information for logging.
    """

    samples: np.ndarray
    n_frames: int
    frame_size: int
    n_dropped: int = 0
    n_padded: int = 0
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.samples.ndim != 1:
            raise ValueError("FilterResult samples must be 1-D.")
        if self.samples.shape[0] != self.n_frames * self.frame_size:
            raise ValueError(
                "FilterResult samples must contain exactly n_frames * frame_size values."
            )
