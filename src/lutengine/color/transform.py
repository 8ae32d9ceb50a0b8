from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from lutengine.lattice import LatticeTable


def _lattice_coordinate(value: float, lo: float, hi: float, last: int) -> float:
    span = hi - lo
    t = 0.0 if span == 0.0 else (value - lo) / span
    # NaN fails both comparisons and lands on the low edge.
    if not t >= 0.0:
        t = 0.0
    elif t > 1.0:
        t = 1.0
    return t * last


def _lerp(a: np.ndarray, b: np.ndarray, t: float) -> np.ndarray:
    return a + (b - a) * t


def sample_lattice(lattice: LatticeTable, rgb: Sequence[float]) -> tuple[float, float, float]:
    """Pure trilinear lookup of ``rgb`` without intensity blending."""
    n = lattice.edge_length
    last = n - 1
    lo, hi = lattice.domain_min, lattice.domain_max

    xr = _lattice_coordinate(float(rgb[0]), lo[0], hi[0], last)
    xg = _lattice_coordinate(float(rgb[1]), lo[1], hi[1], last)
    xb = _lattice_coordinate(float(rgb[2]), lo[2], hi[2], last)

    r0, g0, b0 = int(math.floor(xr)), int(math.floor(xg)), int(math.floor(xb))
    r1, g1, b1 = min(r0 + 1, last), min(g0 + 1, last), min(b0 + 1, last)
    fr, fg, fb = xr - r0, xg - g0, xb - b0

    s = lattice.samples
    nn = n * n
    c000 = s[b0 * nn + g0 * n + r0]
    c100 = s[b0 * nn + g0 * n + r1]
    c010 = s[b0 * nn + g1 * n + r0]
    c110 = s[b0 * nn + g1 * n + r1]
    c001 = s[b1 * nn + g0 * n + r0]
    c101 = s[b1 * nn + g0 * n + r1]
    c011 = s[b1 * nn + g1 * n + r0]
    c111 = s[b1 * nn + g1 * n + r1]

    c00 = _lerp(c000, c100, fr)
    c10 = _lerp(c010, c110, fr)
    c01 = _lerp(c001, c101, fr)
    c11 = _lerp(c011, c111, fr)

    c0 = _lerp(c00, c10, fg)
    c1 = _lerp(c01, c11, fg)

    out = _lerp(c0, c1, fb)
    return float(out[0]), float(out[1]), float(out[2])


def transform(
    lattice: LatticeTable,
    rgb: Sequence[float],
    intensity: float = 100.0,
) -> tuple[float, float, float]:
    """Map one colour through ``lattice`` and blend with the input by ``intensity`` percent.

    The result is not clipped; values outside [0, 1] pass through for the
    caller to handle.
    """
    r, g, b = float(rgb[0]), float(rgb[1]), float(rgb[2])
    k = float(intensity) / 100.0
    if k == 0.0:
        return r, g, b
    lut = sample_lattice(lattice, (r, g, b))
    if k == 1.0:
        return lut
    return r + (lut[0] - r) * k, g + (lut[1] - g) * k, b + (lut[2] - b) * k


def transform_image(lattice: LatticeTable, image: np.ndarray, intensity: float = 100.0) -> np.ndarray:
    """Vectorised :func:`transform` over any ``(..., 3)`` array; returns float32."""
    x = np.asarray(image, dtype=np.float64)
    if x.shape[-1:] != (3,):
        raise ValueError(f"expected trailing RGB axis of length 3, got shape {x.shape}")
    if float(intensity) == 0.0:
        return x.astype(np.float32)

    n = lattice.edge_length
    dom_min = np.asarray(lattice.domain_min, dtype=np.float64)
    dom_max = np.asarray(lattice.domain_max, dtype=np.float64)
    span = dom_max - dom_min
    degenerate = span == 0.0
    safe_span = np.where(degenerate, 1.0, span)

    t = np.where(degenerate, 0.0, (x - dom_min) / safe_span)
    t = np.nan_to_num(t, nan=0.0, posinf=1.0, neginf=0.0)
    t = np.clip(t, 0.0, 1.0)
    t = t * (n - 1)

    i0 = np.floor(t).astype(np.intp)
    i1 = np.minimum(i0 + 1, n - 1)
    f = t - i0

    r0, g0, b0 = i0[..., 0], i0[..., 1], i0[..., 2]
    r1, g1, b1 = i1[..., 0], i1[..., 1], i1[..., 2]
    fr, fg, fb = f[..., 0:1], f[..., 1:2], f[..., 2:3]

    table = lattice.table
    c000 = table[b0, g0, r0]
    c100 = table[b0, g0, r1]
    c010 = table[b0, g1, r0]
    c110 = table[b0, g1, r1]
    c001 = table[b1, g0, r0]
    c101 = table[b1, g0, r1]
    c011 = table[b1, g1, r0]
    c111 = table[b1, g1, r1]

    c00 = c000 + (c100 - c000) * fr
    c10 = c010 + (c110 - c010) * fr
    c01 = c001 + (c101 - c001) * fr
    c11 = c011 + (c111 - c011) * fr

    c0 = c00 + (c10 - c00) * fg
    c1 = c01 + (c11 - c01) * fg

    lut = c0 + (c1 - c0) * fb

    k = float(intensity) / 100.0
    if k == 1.0:
        return lut.astype(np.float32)
    out = x + (lut - x) * k
    return out.astype(np.float32)
