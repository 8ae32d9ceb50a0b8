from __future__ import annotations

from pathlib import Path

import numpy as np

from lutengine.lattice import LatticeTable


def export_texture(lattice: LatticeTable) -> np.ndarray:
    """Flatten the lattice to RGBA float32 in (b, g, r) nesting order, alpha fixed at 1.0."""
    rgba = np.ones((lattice.node_count, 4), dtype=np.float32)
    rgba[:, :3] = lattice.samples
    return rgba.reshape(-1)


def write_texture(path: Path, lattice: LatticeTable) -> int:
    data = export_texture(lattice).astype("<f4", copy=False)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data.tobytes())
    return int(data.size)
