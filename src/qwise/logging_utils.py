"""Logging setup and JSONL frame records."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Mapping

import numpy as np

from .io_models import FrameOutput

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"


def configure_logging(level: str) -> None:
    """Configure logging format and level for CLI commands."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )


class JsonlLogger:
    """Append JSON-serializable records to a JSON Lines file.

    The target file is truncated on construction so that one logger
    corresponds to one processing session.
    """

    def __init__(self, path: str | Path, *, append: bool = False) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if not append:
            self.path.write_text("", encoding="utf-8")

    def write(self, record: Mapping[str, Any]) -> None:
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(dict(record), ensure_ascii=False) + "\n")

    def write_many(self, records: Iterable[Mapping[str, Any]]) -> None:
        with self.path.open("a", encoding="utf-8") as handle:
            for record in records:
                handle.write(json.dumps(dict(record), ensure_ascii=False) + "\n")


def _rms(values: np.ndarray) -> float:
    if values.size == 0:
        return 0.0
    return float(np.sqrt(np.mean(np.square(values, dtype=np.float64))))


def frame_record(frame: np.ndarray, output: FrameOutput) -> dict[str, Any]:
    """Summarize one filtered frame as a JSON-friendly dictionary."""
    return {
        "frame": int(output.frame_index),
        "input_rms": _rms(np.asarray(frame)),
        "output_rms": _rms(output.samples),
        "mean_gain": float(np.mean(output.gain)),
    }


def log_frames_jsonl(path: str | Path, records: Iterable[Mapping[str, Any]]) -> None:
    """Write many frame records to a fresh JSONL file."""
    JsonlLogger(path).write_many(records)
