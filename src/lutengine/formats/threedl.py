from __future__ import annotations

import logging

import numpy as np

from lutengine.lattice import LatticeTable, build_lattice

from .base import MalformedSampleLineError, ParsedTable, SampleCountMismatchError, iter_content_lines

logger = logging.getLogger(__name__)

MAX_CODE_VALUE = 1023


def integer_cube_root(count: int) -> int | None:
    if count < 1:
        return None
    guess = round(count ** (1.0 / 3.0))
    for n in (guess - 1, guess, guess + 1):
        if n >= 1 and n * n * n == count:
            return n
    return None


def _nearest_cube(count: int) -> int:
    n = max(1, round(max(count, 0) ** (1.0 / 3.0)))
    return n * n * n


def _parse_codes(number: int, line: str, parts: list[str]) -> list[int]:
    try:
        codes = [int(p) for p in parts]
    except ValueError as exc:
        raise MalformedSampleLineError(number, line, "expected integer code values") from exc
    for code in codes:
        if code < 0 or code > MAX_CODE_VALUE:
            raise MalformedSampleLineError(number, line, f"code value {code} outside 0..{MAX_CODE_VALUE}")
    return codes


class ThreeDLSource:
    """Autodesk ``.3dl`` text: 10-bit integer rows, cube size inferred from row count."""

    name = "3dl"
    extensions = (".3dl",)

    def parse(self, text: str) -> ParsedTable:
        rows: list[list[int]] = []
        first = True

        for number, line in iter_content_lines(text):
            parts = line.split()
            if len(parts) != 3:
                # Autodesk writers lead with a shaper line listing the input mesh points.
                if first and len(parts) > 3:
                    _parse_codes(number, line, parts)
                    logger.debug("skipping 3dl shaper line %d (%d points)", number, len(parts))
                    first = False
                    continue
                raise MalformedSampleLineError(number, line)
            first = False
            rows.append(_parse_codes(number, line, parts))

        count = len(rows)
        size = integer_cube_root(count)
        if size is None:
            expected = _nearest_cube(count)
            raise SampleCountMismatchError(
                expected,
                count,
                f"cannot infer cube size from {count} samples (nearest cube is {expected})",
            )

        samples = np.asarray(rows, dtype=np.float64).reshape((count, 3)) / float(MAX_CODE_VALUE)
        logger.debug("parsed 3dl table size=%d", size)
        return ParsedTable(edge_length=size, samples=samples)


def parse_3dl(text: str) -> LatticeTable:
    return build_lattice(ThreeDLSource().parse(text))
