from __future__ import annotations

from dataclasses import dataclass
import hashlib
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from lutengine.formats.base import ParsedTable


@dataclass(frozen=True, eq=False)
class LatticeTable:
    """Immutable 3-D colour lattice.

    ``samples`` is a read-only ``(N**3, 3)`` float64 array in file order: the
    red index varies fastest, then green, then blue, so node ``(r, g, b)``
    lives at offset ``b * N * N + g * N + r``.
    """

    edge_length: int
    samples: np.ndarray
    domain_min: tuple[float, float, float] = (0.0, 0.0, 0.0)
    domain_max: tuple[float, float, float] = (1.0, 1.0, 1.0)
    title: str | None = None

    @property
    def table(self) -> np.ndarray:
        n = self.edge_length
        return self.samples.reshape((n, n, n, 3))

    @property
    def node_count(self) -> int:
        return self.edge_length ** 3

    def offset(self, r: int, g: int, b: int) -> int:
        n = self.edge_length
        return (b * n + g) * n + r

    def node(self, r: int, g: int, b: int) -> tuple[float, float, float]:
        n = self.edge_length
        if not (0 <= r < n and 0 <= g < n and 0 <= b < n):
            raise IndexError(f"lattice node ({r}, {g}, {b}) outside edge length {n}")
        row = self.samples[self.offset(r, g, b)]
        return float(row[0]), float(row[1]), float(row[2])

    def fingerprint(self) -> str:
        h = hashlib.sha256()
        h.update(str(self.edge_length).encode("ascii"))
        h.update(np.asarray(self.domain_min + self.domain_max, dtype="<f8").tobytes())
        h.update(np.ascontiguousarray(self.samples, dtype="<f8").tobytes())
        return h.hexdigest()[:16]


def _as_triple(values, name: str) -> tuple[float, float, float]:
    seq = tuple(float(v) for v in values)
    if len(seq) != 3:
        raise ValueError(f"{name} must have three components, got {len(seq)}")
    return seq  # type: ignore[return-value]


def build_lattice(parsed: ParsedTable) -> LatticeTable:
    n = int(parsed.edge_length)
    if n < 1:
        raise ValueError(f"edge length must be at least 1, got {n}")

    flat = np.array(parsed.samples, dtype=np.float64, copy=True)
    expected = n * n * n
    if flat.ndim != 2 or flat.shape != (expected, 3):
        raise ValueError(f"lattice of edge {n} needs samples shaped ({expected}, 3), got {flat.shape}")

    flat.setflags(write=False)
    return LatticeTable(
        edge_length=n,
        samples=flat,
        domain_min=_as_triple(parsed.domain_min, "domain_min"),
        domain_max=_as_triple(parsed.domain_max, "domain_max"),
        title=parsed.title,
    )
