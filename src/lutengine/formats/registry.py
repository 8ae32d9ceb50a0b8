from __future__ import annotations

import logging
from pathlib import Path

from lutengine.lattice import LatticeTable, build_lattice

from .base import TableSource, UnsupportedFormatError
from .cube import CubeSource
from .threedl import ThreeDLSource

logger = logging.getLogger(__name__)


class SourceRegistry:
    def __init__(self, sources: list[TableSource] | None = None) -> None:
        self._by_ext: dict[str, TableSource] = {}
        for source in sources if sources is not None else [CubeSource(), ThreeDLSource()]:
            self.register(source)

    def register(self, source: TableSource) -> None:
        for ext in source.extensions:
            self._by_ext[ext.lower()] = source

    def extensions(self) -> tuple[str, ...]:
        return tuple(sorted(self._by_ext))

    def source_for(self, filename: str | Path) -> TableSource:
        ext = Path(filename).suffix.lower()
        source = self._by_ext.get(ext)
        if source is None:
            raise UnsupportedFormatError(f"unsupported LUT extension {ext or '(none)'} for {filename}")
        return source

    def parse(self, filename: str | Path, text: str) -> LatticeTable:
        source = self.source_for(filename)
        return build_lattice(source.parse(text))


_default_registry = SourceRegistry()


def parse_lut(filename: str | Path, text: str) -> LatticeTable:
    return _default_registry.parse(filename, text)


def load_lut(path: str | Path) -> LatticeTable:
    lut_path = Path(path).expanduser()
    text = lut_path.read_text(encoding="utf-8-sig", errors="replace")
    lattice = _default_registry.parse(lut_path, text)
    logger.info("loaded LUT %s size=%d", lut_path.name, lattice.edge_length)
    return lattice
