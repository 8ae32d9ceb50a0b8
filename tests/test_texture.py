from __future__ import annotations

from pathlib import Path

import numpy as np

from lutengine.formats import parse_3dl, parse_cube
from lutengine.write import export_texture, write_texture


def test_export_texture_layout(unit_cube_text: str) -> None:
    lattice = parse_cube(unit_cube_text)
    data = export_texture(lattice)
    assert data.dtype == np.float32
    assert data.shape == (2**3 * 4,)

    rgba = data.reshape((8, 4))
    assert np.all(rgba[:, 3] == 1.0)
    assert np.array_equal(rgba[1, :3], [1.0, 0.0, 0.0])
    assert np.array_equal(rgba[2, :3], [0.0, 1.0, 0.0])
    assert np.array_equal(rgba[4, :3], [0.0, 0.0, 1.0])


def test_export_texture_matches_b_g_r_nesting(cube_text) -> None:
    size = 3
    lattice = parse_cube(cube_text(size, lambda r, g, b: (r / 4, g / 8, b / 16)))
    data = export_texture(lattice)
    i = 0
    for b in range(size):
        for g in range(size):
            for r in range(size):
                assert np.allclose(data[i : i + 4], [r / 4, g / 8, b / 16, 1.0])
                i += 4


def test_write_texture_raw_float32(tmp_path: Path) -> None:
    lattice = parse_3dl("0 0 0\n1023 1023 1023\n" * 4)
    out = tmp_path / "tex" / "look.rgba32f"
    count = write_texture(out, lattice)
    assert count == 8 * 4
    raw = np.frombuffer(out.read_bytes(), dtype="<f4")
    assert np.array_equal(raw, export_texture(lattice))
