from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from qwise.cli import main


def test_list_masks(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--list-masks"])
    assert capsys.readouterr().out.split() == ["bins", "constant"]


def test_print_config_applies_overrides(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config_path = tmp_path / "qwise.yaml"
    config_path.write_text("frame:\n  frame_size: 512\n", encoding="utf-8")

    main(
        [
            "--print-config",
            "--config",
            str(config_path),
            "--set",
            "mask.params.gain=0.3",
        ]
    )

    printed = yaml.safe_load(capsys.readouterr().out)
    assert printed["frame"]["frame_size"] == 512
    assert printed["mask"]["params"] == {"gain": 0.3}
    assert printed["pcm"]["dtype"] == "int16"


def test_no_arguments_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    main([])
    assert "usage: qwise" in capsys.readouterr().out
