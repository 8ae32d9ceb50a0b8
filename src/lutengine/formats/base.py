from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Protocol

import numpy as np


class LutParseError(ValueError):
    pass


class MissingDirectiveError(LutParseError):
    def __init__(self, directive: str) -> None:
        super().__init__(f"missing required directive {directive}")
        self.directive = directive


class InvalidDirectiveError(LutParseError):
    def __init__(self, line_number: int, content: str, reason: str) -> None:
        super().__init__(f"line {line_number}: {reason}: {content!r}")
        self.line_number = line_number
        self.content = content


class SampleCountMismatchError(LutParseError):
    def __init__(self, expected: int, actual: int, message: str | None = None) -> None:
        super().__init__(message or f"expected {expected} samples, got {actual}")
        self.expected = expected
        self.actual = actual


class MalformedSampleLineError(LutParseError):
    def __init__(self, line_number: int, content: str, reason: str = "expected three numeric values") -> None:
        super().__init__(f"line {line_number}: {reason}: {content!r}")
        self.line_number = line_number
        self.content = content


class UnsupportedFormatError(LutParseError):
    pass


DEFAULT_DOMAIN_MIN = (0.0, 0.0, 0.0)
DEFAULT_DOMAIN_MAX = (1.0, 1.0, 1.0)


@dataclass(frozen=True, eq=False)
class ParsedTable:
    """Dialect-neutral parse result: directives plus the flat sample list in file order."""

    edge_length: int
    samples: np.ndarray
    domain_min: tuple[float, float, float] = DEFAULT_DOMAIN_MIN
    domain_max: tuple[float, float, float] = DEFAULT_DOMAIN_MAX
    title: str | None = None


class TableSource(Protocol):
    name: str
    extensions: tuple[str, ...]

    def parse(self, text: str) -> ParsedTable:
        ...


def iter_content_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, stripped_line)`` for every non-blank, non-comment line."""
    if text.startswith("\ufeff"):
        text = text[1:]
    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        yield number, line
