"""Frame pipeline: integer PCM in, filtered integer PCM out.

The pipeline partitions a mono PCM signal into consecutive, non-overlapping
frames of ``N`` samples, runs each frame through a
:class:`~qwise.engine.SpectralGainEngine`, and concatenates the results in
frame order. There is no overlap-add; every output frame is written
independently.

Trailing samples that do not fill a frame are dropped by default. The
``pad`` policy zero-pads the final frame instead, which lengthens the
output to a whole number of frames.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
import logging
from typing import Sequence

import numpy as np

from .config_schema import PARTIAL_FRAME_POLICIES, QWiseConfig
from .engine import SpectralGainEngine
from .io_models import FilterResult, FrameOutput, NoInputError
from .logging_utils import JsonlLogger, frame_record
from .masks import GainMaskProviderProtocol, MaskProviderRegistry, default_mask_registry

LOGGER = logging.getLogger(__name__)


def pcm_scale(dtype: np.dtype | str) -> float:
    """Return the normalization constant for a signed integer PCM type."""
    return float(np.iinfo(np.dtype(dtype)).max)


def pcm_to_float(samples: np.ndarray) -> np.ndarray:
    """Scale integer PCM into the normalized real range."""
    return np.asarray(samples, dtype=np.float64) / pcm_scale(samples.dtype)


def float_to_pcm(values: np.ndarray, dtype: np.dtype | str) -> np.ndarray:
    """Rescale normalized samples to integer PCM, rounding and clipping."""
    info = np.iinfo(np.dtype(dtype))
    scaled = np.rint(np.asarray(values, dtype=np.float64) * pcm_scale(dtype))
    upper = float(info.max)
    if int(upper) > info.max:
        # float64 cannot hold the int64 maximum; stay below it for the cast.
        upper = float(np.nextafter(upper, 0.0))
    pcm = np.clip(scaled, info.min, upper).astype(dtype)
    pcm[scaled >= float(info.max)] = info.max
    return pcm


def frame_signal(
    samples: np.ndarray,
    frame_size: int,
    partial_frame: str = "drop",
) -> tuple[np.ndarray, int, int]:
    """Split a 1-D signal into ``(n_frames, frame_size)`` rows.

    Returns
    -------
    tuple
        ``(frames, n_dropped, n_padded)``.
    """
    if partial_frame not in PARTIAL_FRAME_POLICIES:
        raise ValueError(
            f"partial_frame must be one of {PARTIAL_FRAME_POLICIES}, got '{partial_frame}'"
        )
    n_samples = samples.shape[0]
    remainder = n_samples % frame_size
    n_dropped = 0
    n_padded = 0
    if remainder and partial_frame == "pad":
        n_padded = frame_size - remainder
        samples = np.concatenate([samples, np.zeros(n_padded, dtype=samples.dtype)])
    elif remainder:
        n_dropped = remainder
        samples = samples[: n_samples - remainder]
    frames = samples.reshape(-1, frame_size)
    return frames, n_dropped, n_padded


class FramePipeline:
    """Drive a :class:`SpectralGainEngine` over a whole PCM signal.

    Parameters
    ----------
    engine:
        Engine owning the analysis window for this session.
    provider:
        Gain-mask provider queried once per frame.
    dtype:
        Integer PCM type used for plain sequence input.
    partial_frame:
        ``"drop"`` discards trailing samples, ``"pad"`` zero-pads them.
    log_every:
        Emit a progress log line every ``log_every`` frames (``0`` disables).
    frame_log:
        Optional JSONL path receiving one record per frame.
    workers:
        Thread count for mapping frames. Output order is preserved; providers
        must be thread-safe when ``workers > 1``.
    """

    def __init__(
        self,
        engine: SpectralGainEngine,
        provider: GainMaskProviderProtocol,
        *,
        dtype: str = "int16",
        partial_frame: str = "drop",
        log_every: int = 500,
        frame_log: str | None = None,
        workers: int = 1,
    ) -> None:
        if partial_frame not in PARTIAL_FRAME_POLICIES:
            raise ValueError(
                f"partial_frame must be one of {PARTIAL_FRAME_POLICIES}, got '{partial_frame}'"
            )
        if int(workers) < 1:
            raise ValueError("workers must be at least 1")
        self.engine = engine
        self.provider = provider
        self.dtype = np.dtype(dtype)
        self.partial_frame = partial_frame
        self.log_every = int(log_every)
        self.frame_log = frame_log
        self.workers = int(workers)

    @property
    def frame_size(self) -> int:
        return self.engine.frame_size

    def _coerce_input(self, samples: np.ndarray | Sequence[int]) -> np.ndarray:
        if isinstance(samples, np.ndarray):
            pcm = samples
        else:
            try:
                pcm = np.asarray(samples)
            except (TypeError, ValueError, OverflowError) as exc:
                raise NoInputError(f"PCM input could not be read: {exc}") from exc
        if pcm.size == 0:
            raise NoInputError("PCM input contains no samples")
        if pcm.ndim != 1:
            raise NoInputError(
                f"PCM input must be a single de-interleaved channel, got shape {pcm.shape}"
            )
        if pcm.dtype.kind != "i":
            raise NoInputError(
                f"PCM input must hold signed integer samples, got dtype {pcm.dtype}"
            )
        if pcm.dtype != self.dtype and not isinstance(samples, np.ndarray):
            info = np.iinfo(self.dtype)
            if pcm.min() < info.min or pcm.max() > info.max:
                raise NoInputError(
                    f"PCM input holds samples outside the {self.dtype} range "
                    f"[{info.min}, {info.max}]"
                )
            pcm = pcm.astype(self.dtype)
        return pcm

    def _process(self, frames: np.ndarray, index: int) -> FrameOutput:
        output = self.engine.process_frame(
            frames[index], self.provider, frame_index=index
        )
        if self.log_every and index > 0 and index % self.log_every == 0:
            LOGGER.info("Frame %d filtered", index)
        return output

    def run(self, samples: np.ndarray | Sequence[int]) -> FilterResult:
        """Filter all complete frames of ``samples`` and return the result."""
        pcm = self._coerce_input(samples)
        dtype = pcm.dtype
        frames, n_dropped, n_padded = frame_signal(
            pcm_to_float(pcm), self.frame_size, self.partial_frame
        )
        n_frames = frames.shape[0]
        LOGGER.info(
            "Filtering %d samples in %d frames of %d",
            pcm.shape[0],
            n_frames,
            self.frame_size,
        )
        if n_dropped:
            LOGGER.debug("Dropped %d trailing samples", n_dropped)
        if n_padded:
            LOGGER.debug("Zero-padded final frame with %d samples", n_padded)

        self.provider.reset()
        indices = range(n_frames)
        if self.workers > 1 and n_frames > 1:
            with ThreadPoolExecutor(max_workers=self.workers) as executor:
                outputs = list(
                    executor.map(lambda idx: self._process(frames, idx), indices)
                )
        else:
            outputs = [self._process(frames, idx) for idx in indices]

        if self.frame_log:
            logger = JsonlLogger(self.frame_log)
            logger.write_many(
                frame_record(frames[out.frame_index], out) for out in outputs
            )

        if outputs:
            reconstructed = np.concatenate([out.samples for out in outputs])
        else:
            reconstructed = np.zeros(0, dtype=np.float64)
        result = FilterResult(
            samples=float_to_pcm(reconstructed, dtype),
            n_frames=n_frames,
            frame_size=self.frame_size,
            n_dropped=n_dropped,
            n_padded=n_padded,
            metadata={
                "window": self.engine.window.window,
                "partial_frame": self.partial_frame,
                "dtype": str(dtype),
            },
        )
        LOGGER.info("Finished filtering %d frames", n_frames)
        return result

    def __call__(self, samples: np.ndarray | Sequence[int]) -> FilterResult:
        return self.run(samples)


def build_pipeline(
    config: QWiseConfig,
    *,
    registry: MaskProviderRegistry | None = None,
    provider: GainMaskProviderProtocol | None = None,
) -> FramePipeline:
    """Wire engine, gain-mask provider, and pipeline from ``config``.

    An explicit ``provider`` takes precedence over ``config.mask``.
    """
    engine = SpectralGainEngine(
        config.frame.frame_size,
        window=config.frame.window,
    )
    if provider is None:
        registry_obj = registry if registry is not None else default_mask_registry()
        provider = registry_obj.create(config.mask.type, config.mask.params)
    return FramePipeline(
        engine,
        provider,
        dtype=config.pcm.dtype,
        partial_frame=config.frame.partial_frame,
        log_every=config.runtime.log_every,
        frame_log=config.runtime.frame_log,
        workers=config.runtime.workers,
    )


def filter_pcm(
    samples: np.ndarray | Sequence[int],
    provider: GainMaskProviderProtocol,
    *,
    frame_size: int = 256,
    partial_frame: str = "drop",
) -> FilterResult:
    """Filter ``samples`` with a fresh engine and ``provider``."""
    engine = SpectralGainEngine(frame_size)
    return FramePipeline(engine, provider, partial_frame=partial_frame).run(samples)
