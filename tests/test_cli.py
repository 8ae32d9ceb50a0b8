from __future__ import annotations

import json
from pathlib import Path

import numpy as np
import pytest

from lutengine.cli import main


@pytest.fixture
def unit_cube_file(tmp_path: Path, unit_cube_text: str) -> Path:
    path = tmp_path / "unit.cube"
    path.write_text(unit_cube_text, encoding="utf-8")
    return path


def test_cli_inspect_json(unit_cube_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["inspect", str(unit_cube_file), "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["edge_length"] == 2
    assert payload["samples"] == 8
    assert payload["title"] == "unit"
    assert payload["domain_max"] == [1.0, 1.0, 1.0]
    assert len(payload["fingerprint"]) == 16


def test_cli_sample_centroid(unit_cube_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["sample", str(unit_cube_file), "0.5", "0.5", "0.5", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["output"] == pytest.approx([0.5, 0.5, 0.5])
    assert payload["intensity"] == 100.0


def test_cli_sample_uses_config_default_intensity(
    tmp_path: Path, unit_cube_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cfg = tmp_path / "config.yaml"
    cfg.write_text("engine:\n  default_intensity: 0\n", encoding="utf-8")
    assert main(["sample", str(unit_cube_file), "0.1", "0.2", "0.3", "--config", str(cfg)]) == 0
    assert capsys.readouterr().out.strip() == "0.100000 0.200000 0.300000"


def test_cli_export_texture(tmp_path: Path, unit_cube_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out = tmp_path / "tex.bin"
    assert main(["export-texture", str(unit_cube_file), "--out", str(out), "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["values"] == 32
    assert np.frombuffer(out.read_bytes(), dtype="<f4").shape == (32,)


def test_cli_reports_parse_errors(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    bad = tmp_path / "bad.cube"
    bad.write_text("LUT_3D_SIZE 2\n0 0 0\n", encoding="utf-8")
    assert main(["inspect", str(bad)]) == 1
    assert "requires 8 samples, got 1" in capsys.readouterr().err
    bad_3dl = tmp_path / "bad.3dl"
    bad_3dl.write_text("0 0 0\n" * 26, encoding="utf-8")
    assert main(["inspect", str(bad_3dl)]) == 1
    assert "cannot infer cube size" in capsys.readouterr().err


def test_cli_apply_tiff(tmp_path: Path, unit_cube_file: Path) -> None:
    tifffile = pytest.importorskip("tifffile")
    src = tmp_path / "in.tif"
    dst = tmp_path / "out" / "graded.tif"
    img = np.random.default_rng(0).uniform(size=(9, 5, 3)).astype(np.float32)
    tifffile.imwrite(str(src), img, photometric="rgb")

    assert main(["apply", str(unit_cube_file), str(src), str(dst), "--intensity", "100", "--clip"]) == 0
    out = tifffile.imread(str(dst))
    assert out.shape == img.shape
    assert np.allclose(out, img, atol=1e-6)
