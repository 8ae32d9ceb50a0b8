from __future__ import annotations

from typing import Callable

import pytest


def _format_cube(
    size: int,
    fn: Callable[[int, int, int], tuple[float, float, float]],
    title: str | None = None,
    header: str = "",
) -> str:
    lines = ["# generated test table"]
    if title is not None:
        lines.append(f'TITLE "{title}"')
    lines.append(f"LUT_3D_SIZE {size}")
    if header:
        lines.append(header)
    for b in range(size):
        for g in range(size):
            for r in range(size):
                lines.append("%.10f %.10f %.10f" % fn(r, g, b))
    return "\n".join(lines) + "\n"


@pytest.fixture
def cube_text() -> Callable[..., str]:
    return _format_cube


@pytest.fixture
def identity_cube_text() -> Callable[[int], str]:
    def make(size: int) -> str:
        last = max(size - 1, 1)
        return _format_cube(size, lambda r, g, b: (r / last, g / last, b / last))

    return make


@pytest.fixture
def unit_cube_text() -> str:
    return """TITLE "unit"
LUT_3D_SIZE 2
0 0 0
1 0 0
0 1 0
1 1 0
0 0 1
1 0 1
0 1 1
1 1 1
"""
