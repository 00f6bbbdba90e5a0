"""Edge source adapter: whitespace-delimited text file.

One ``source target weight`` triple per line. Lines that do not start with
two tokens and a finite number are skipped; anything after the number
is ignored.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterator
from pathlib import Path

from densecluster.domain.models import WeightedEdge
from densecluster.ports.edge_source import EdgeSourcePort

log = logging.getLogger(__name__)


# Leading decimal number of the weight token; whatever follows it is ignored.
_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_edge_line(line: str) -> WeightedEdge | None:
    """Parse one line, returning ``None`` if it is malformed.

    The weight token only needs to start with a decimal number ("1.5x"
    reads as 1.5). ``nan``, ``inf`` and values that overflow are rejected.
    """
    parts = line.split()
    if len(parts) < 3:
        return None
    match = _NUMBER_PREFIX.match(parts[2])
    if match is None:
        return None
    weight = float(match.group())
    if not math.isfinite(weight):
        return None
    return WeightedEdge(source=parts[0], target=parts[1], weight=weight)


class TextFileEdgeSource(EdgeSourcePort):
    """Read edges lazily from a text file."""

    def __init__(self, path: str | Path, *, encoding: str = "utf-8"):
        self._path = Path(path)
        self._encoding = encoding

    @property
    def path(self) -> Path:
        return self._path

    def read_edges(self) -> Iterator[WeightedEdge]:
        if not self._path.is_file():
            raise FileNotFoundError(f"Unable to open file: {self._path}")

        read = skipped = 0
        with open(self._path, encoding=self._encoding) as f:
            for line_no, line in enumerate(f, start=1):
                edge = parse_edge_line(line)
                if edge is None:
                    skipped += 1
                    log.debug("Skipping malformed line %d: %r", line_no, line.rstrip("\n"))
                    continue
                read += 1
                yield edge

        log.info("Read %d edges from %s (%d lines skipped)", read, self._path, skipped)

    def describe(self) -> str:
        return f"text file {self._path}"
