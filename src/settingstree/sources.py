"""Line sources and the candidate-file fallback loop."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from settingstree.lexer import Line, number_lines

LOG = logging.getLogger(__name__)


class NoFileLoadedError(FileNotFoundError):
    """Raised when none of the candidate settings files could be opened."""

    def __init__(self, candidates: Iterable[str | os.PathLike[str]]) -> None:
        self.candidates = [Path(candidate) for candidate in candidates]
        message = "No settings file loaded."
        if self.candidates:
            tried = ", ".join(str(path) for path in self.candidates)
            message += f" Tried: {tried}"
        super().__init__(message)


class LineSource(Protocol):
    def open(self, path: Path) -> list[Line]:
        """Return the numbered lines of ``path`` or raise ``OSError``."""
        ...


class FileLineSource:
    """Reads settings files from disk."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def open(self, path: Path) -> list[Line]:
        with path.open("r", encoding=self.encoding) as handle:
            return list(number_lines(handle))


def open_first(
    candidates: Iterable[str | os.PathLike[str]],
    source: LineSource,
) -> tuple[Path, list[Line]]:
    """
    Open the first readable candidate and return its path and lines.

    Candidates that cannot be opened are logged and skipped. Raises
    NoFileLoadedError when every candidate fails.
    """
    tried: list[Path] = []
    for candidate in candidates:
        path = Path(candidate)
        tried.append(path)
        try:
            lines = source.open(path)
        except OSError as exc:
            LOG.warning("Could not open: %s (%s)", path, exc.strerror or exc)
            continue
        LOG.debug("Opened %s (%d line(s))", path, len(lines))
        return path, lines
    raise NoFileLoadedError(tried)
