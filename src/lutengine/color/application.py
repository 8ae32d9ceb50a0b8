from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np

from lutengine.lattice import LatticeTable

from .transform import transform, transform_image


@dataclass(frozen=True, eq=False)
class LUTApplication:
    """A shared lattice attached to a target at a given intensity percent.

    Replace-only: use :meth:`with_intensity` to get a new value that reuses the
    same read-only lattice.
    """

    lattice: LatticeTable
    intensity: float = 100.0

    def __post_init__(self) -> None:
        value = float(self.intensity)
        if not 0.0 <= value <= 100.0:
            raise ValueError(f"intensity must be within 0..100, got {self.intensity}")
        object.__setattr__(self, "intensity", value)

    def with_intensity(self, intensity: float) -> LUTApplication:
        return LUTApplication(lattice=self.lattice, intensity=intensity)

    def apply(self, rgb: Sequence[float]) -> tuple[float, float, float]:
        return transform(self.lattice, rgb, self.intensity)

    def apply_image(self, image: np.ndarray) -> np.ndarray:
        return transform_image(self.lattice, image, self.intensity)

    def to_record(self) -> dict[str, Any]:
        return {
            "lattice_source_id": self.lattice.fingerprint(),
            "intensity": self.intensity,
        }
