from __future__ import annotations

import json
from pathlib import Path

import numpy as np
import pytest

from qwise import (
    ConstantGainMask,
    FramePipeline,
    JsonlLogger,
    SpectralGainEngine,
    log_frames_jsonl,
)
from qwise.io_models import FrameOutput
from qwise.logging_utils import frame_record


def _read_jsonl(path: Path) -> list[dict[str, object]]:
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


def test_jsonl_logger_truncates_unless_appending(tmp_path: Path) -> None:
    path = tmp_path / "logs" / "frames.jsonl"
    JsonlLogger(path).write({"frame": 0})
    JsonlLogger(path, append=True).write({"frame": 1})
    assert _read_jsonl(path) == [{"frame": 0}, {"frame": 1}]

    JsonlLogger(path).write({"frame": 2})
    assert _read_jsonl(path) == [{"frame": 2}]


def test_log_frames_jsonl_writes_all_records(tmp_path: Path) -> None:
    path = tmp_path / "frames.jsonl"
    log_frames_jsonl(path, [{"frame": idx} for idx in range(3)])
    assert [row["frame"] for row in _read_jsonl(path)] == [0, 1, 2]


def test_frame_record_summarizes_frame() -> None:
    output = FrameOutput(
        samples=np.full(4, 0.5), gain=np.array([0.0, 1.0, 1.0, 0.0]), frame_index=3
    )
    record = frame_record(np.ones(4), output)
    assert record["frame"] == 3
    assert record["input_rms"] == pytest.approx(1.0)
    assert record["output_rms"] == pytest.approx(0.5)
    assert record["mean_gain"] == pytest.approx(0.5)


def test_pipeline_writes_one_record_per_frame(tmp_path: Path) -> None:
    path = tmp_path / "frames.jsonl"
    pipeline = FramePipeline(
        SpectralGainEngine(32),
        ConstantGainMask(0.65),
        frame_log=str(path),
    )

    pipeline.run(np.zeros(3 * 32 + 5, dtype=np.int16))

    rows = _read_jsonl(path)
    assert [row["frame"] for row in rows] == [0, 1, 2]
    for row in rows:
        assert row["input_rms"] == 0.0
        assert row["output_rms"] == 0.0
        assert row["mean_gain"] == pytest.approx(0.65)
