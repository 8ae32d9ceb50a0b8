from __future__ import annotations

from pathlib import Path

import numpy as np


def _tifffile():
    try:
        import tifffile  # type: ignore
    except Exception as exc:  # pragma: no cover - optional dependency
        raise RuntimeError("tifffile is required for image I/O. Install with: pip install '.[io]'") from exc
    return tifffile


def read_image(path: Path) -> np.ndarray:
    tifffile = _tifffile()
    arr = np.asarray(tifffile.imread(str(path)))
    if arr.ndim != 3 or arr.shape[-1] < 3:
        raise ValueError(f"expected an RGB image, got shape {arr.shape} from {path}")
    rgb = arr[..., :3]
    if np.issubdtype(rgb.dtype, np.integer):
        return rgb.astype(np.float32) / float(np.iinfo(rgb.dtype).max)
    return rgb.astype(np.float32)


def write_image(path: Path, rgb: np.ndarray) -> None:
    tifffile = _tifffile()
    arr = np.asarray(rgb, dtype=np.float32)
    path.parent.mkdir(parents=True, exist_ok=True)
    tifffile.imwrite(str(path), arr, photometric="rgb")
