from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
import logging

import numpy as np

from lutengine.color import LUTApplication, transform_image
from lutengine.config import EngineConfig

logger = logging.getLogger(__name__)


def row_bands(height: int, band_rows: int) -> list[tuple[int, int]]:
    step = max(1, int(band_rows))
    return [(start, min(start + step, height)) for start in range(0, height, step)]


class FrameProcessor:
    """Applies one LUT application to whole frames, band by band.

    The lattice is only ever read, so bands run on a thread pool without any
    locking. Each band writes to its own slice of a preallocated output.
    """

    def __init__(
        self,
        application: LUTApplication,
        max_workers: int = 2,
        band_rows: int = 64,
        clip_output: bool = False,
    ) -> None:
        self.application = application
        self.max_workers = max(1, int(max_workers))
        self.band_rows = max(1, int(band_rows))
        self.clip_output = bool(clip_output)

    @classmethod
    def from_config(cls, application: LUTApplication, cfg: EngineConfig) -> FrameProcessor:
        return cls(
            application,
            max_workers=cfg.max_workers,
            band_rows=cfg.band_rows,
            clip_output=cfg.clip_output,
        )

    def _process_band(self, frame: np.ndarray, out: np.ndarray, start: int, stop: int) -> None:
        band = transform_image(self.application.lattice, frame[start:stop], self.application.intensity)
        if self.clip_output:
            np.clip(band, 0.0, 1.0, out=band)
        out[start:stop] = band

    def process(self, frame: np.ndarray) -> np.ndarray:
        x = np.asarray(frame, dtype=np.float32)
        if x.ndim != 3 or x.shape[-1] != 3:
            raise ValueError(f"expected frame shaped (H, W, 3), got {x.shape}")

        out = np.empty(x.shape, dtype=np.float32)
        bands = row_bands(x.shape[0], self.band_rows)
        logger.debug(
            "processing frame %dx%d in %d bands on %d workers",
            x.shape[1],
            x.shape[0],
            len(bands),
            self.max_workers,
        )

        if self.max_workers == 1 or len(bands) <= 1:
            for start, stop in bands:
                self._process_band(x, out, start, stop)
            return out

        with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="lut-band") as pool:
            futures = [pool.submit(self._process_band, x, out, start, stop) for start, stop in bands]
            for fut in futures:
                fut.result()
        return out
