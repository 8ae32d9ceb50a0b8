from __future__ import annotations

import logging

import numpy as np

from lutengine.lattice import LatticeTable, build_lattice

from .base import (
    DEFAULT_DOMAIN_MAX,
    DEFAULT_DOMAIN_MIN,
    InvalidDirectiveError,
    MalformedSampleLineError,
    MissingDirectiveError,
    ParsedTable,
    SampleCountMismatchError,
    iter_content_lines,
)

logger = logging.getLogger(__name__)


def _parse_triple(number: int, line: str, values: list[str]) -> tuple[float, float, float]:
    if len(values) != 3:
        raise InvalidDirectiveError(number, line, "expected three values")
    try:
        return float(values[0]), float(values[1]), float(values[2])
    except ValueError as exc:
        raise InvalidDirectiveError(number, line, "expected three numbers") from exc


def _parse_title(line: str, keyword: str) -> str:
    rest = line[len(keyword) :].strip()
    if len(rest) >= 2 and rest.startswith('"') and rest.endswith('"'):
        return rest[1:-1]
    return rest.replace('"', "")


class CubeSource:
    """Adobe/Resolve ``.cube`` text: directives followed by float sample rows."""

    name = "cube"
    extensions = (".cube",)

    def parse(self, text: str) -> ParsedTable:
        size: int | None = None
        title: str | None = None
        domain_min = DEFAULT_DOMAIN_MIN
        domain_max = DEFAULT_DOMAIN_MAX
        values: list[tuple[float, float, float]] = []

        for number, line in iter_content_lines(text):
            parts = line.split()
            head = parts[0].upper()

            if head == "TITLE":
                title = _parse_title(line, parts[0])
                continue
            if head == "LUT_3D_SIZE":
                if size is not None:
                    raise InvalidDirectiveError(number, line, "duplicate LUT_3D_SIZE")
                if len(parts) != 2:
                    raise InvalidDirectiveError(number, line, "LUT_3D_SIZE takes one integer")
                try:
                    size = int(parts[1])
                except ValueError as exc:
                    raise InvalidDirectiveError(number, line, "LUT_3D_SIZE takes one integer") from exc
                if size < 1:
                    raise InvalidDirectiveError(number, line, "LUT_3D_SIZE must be at least 1")
                continue
            if head == "DOMAIN_MIN":
                domain_min = _parse_triple(number, line, parts[1:])
                continue
            if head == "DOMAIN_MAX":
                domain_max = _parse_triple(number, line, parts[1:])
                continue
            if head == "LUT_3D_INPUT_RANGE":
                if len(parts) != 3:
                    raise InvalidDirectiveError(number, line, "LUT_3D_INPUT_RANGE takes two numbers")
                try:
                    lo, hi = float(parts[1]), float(parts[2])
                except ValueError as exc:
                    raise InvalidDirectiveError(number, line, "LUT_3D_INPUT_RANGE takes two numbers") from exc
                domain_min = (lo, lo, lo)
                domain_max = (hi, hi, hi)
                continue

            if len(parts) != 3:
                raise MalformedSampleLineError(number, line)
            try:
                values.append((float(parts[0]), float(parts[1]), float(parts[2])))
            except ValueError as exc:
                raise MalformedSampleLineError(number, line) from exc

        if size is None:
            raise MissingDirectiveError("LUT_3D_SIZE")

        expected = size * size * size
        if len(values) != expected:
            raise SampleCountMismatchError(
                expected,
                len(values),
                f"LUT_3D_SIZE {size} requires {expected} samples, got {len(values)}",
            )

        logger.debug("parsed cube table size=%d title=%r", size, title)
        return ParsedTable(
            edge_length=size,
            samples=np.asarray(values, dtype=np.float64).reshape((expected, 3)),
            domain_min=domain_min,
            domain_max=domain_max,
            title=title,
        )


def parse_cube(text: str) -> LatticeTable:
    return build_lattice(CubeSource().parse(text))
