"""CLI example: filter one mono WAV file with a constant gain mask.

Usage
-----
Run with the default configuration:

``uv run python examples/denoise_wav_cli.py examples/data/noisy.wav``

Run with custom parameters:

``uv run python examples/denoise_wav_cli.py examples/data/noisy.wav --set mask.params.gain=0.4 --set frame.partial_frame=pad``
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

import numpy as np
import soundfile as sf

from qwise import build_pipeline, configure_logging, load_config

WAV_DTYPES: dict[str, str] = {"int16": "PCM_16", "int32": "PCM_32"}


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Filter one mono WAV file with a spectral gain mask.",
    )
    parser.add_argument("input_wav", type=Path, help="Path to input WAV.")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("outputs") / "qwise_enhanced.wav",
        help="Output WAV path.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Optional YAML configuration file.",
    )
    parser.add_argument(
        "--set",
        action="append",
        default=[],
        help="Configuration override in dotted key=value form.",
    )
    parser.add_argument(
        "--channel",
        type=int,
        default=0,
        help="Channel to filter when the input is multi-channel.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    config = load_config(args.config, overrides=args.set)
    configure_logging(config.runtime.log_level)
    if config.pcm.dtype not in WAV_DTYPES:
        supported = ", ".join(sorted(WAV_DTYPES))
        raise ValueError(
            f"pcm.dtype '{config.pcm.dtype}' is not supported for WAV I/O. "
            f"Use one of: {supported}"
        )

    audio, sample_rate = sf.read(args.input_wav, dtype=config.pcm.dtype, always_2d=True)
    mono = np.ascontiguousarray(audio[:, args.channel])

    pipeline = build_pipeline(config)
    result = pipeline.run(mono)

    args.output.parent.mkdir(parents=True, exist_ok=True)
    sf.write(
        args.output, result.samples, sample_rate, subtype=WAV_DTYPES[config.pcm.dtype]
    )
    print(f"Saved filtered waveform: {args.output}")
    print(
        f"Frames: {result.n_frames} x {result.frame_size} "
        f"(dropped {result.n_dropped}, padded {result.n_padded})"
    )


if __name__ == "__main__":
    main()
