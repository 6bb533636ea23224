"""The Settings object: load a settings file and look values up by key path."""

from __future__ import annotations

import copy
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from settingstree.config import LoaderConfig
from settingstree.lexer import Line, tokenize
from settingstree.sources import FileLineSource, LineSource, open_first
from settingstree.tree import SettingsTree, SettingsValue, build_tree

LOG = logging.getLogger(__name__)

KEY_SEPARATOR = ":"


class KeyNotFoundError(LookupError):
    """Raised when a key path does not resolve to a setting."""

    def __init__(self, keys: Iterable[str]) -> None:
        self.keys = tuple(keys)
        self.path = KEY_SEPARATOR.join(self.keys)
        super().__init__(f"No setting exists for {self.path}")


def parse_settings(lines: Iterable[Line | str], strict_levels: bool = False) -> SettingsTree:
    """Tokenize ``lines`` and fold them into a settings tree."""
    return build_tree(tokenize(lines, strict_levels=strict_levels))


class Settings:
    """
    Holds the settings tree parsed from the first loadable candidate file.

    A failed ``load`` leaves the previously loaded tree in place. The instance
    is not safe for concurrent ``load`` and lookups; serialise access externally.
    """

    def __init__(self, config: LoaderConfig | None = None, source: LineSource | None = None) -> None:
        self.config = config or LoaderConfig()
        self.source = source or FileLineSource(encoding=self.config.encoding)
        self.path: Path | None = None
        self._tree: SettingsTree = {}
        self._loaded = False

    @property
    def loaded(self) -> bool:
        return self._loaded

    def load(self, *candidates: str | os.PathLike[str]) -> None:
        """Parse the first candidate that can be opened, replacing the current tree.

        Without arguments the configured candidates are tried.
        """
        paths = candidates or tuple(self.config.candidates)
        path, lines = open_first(paths, self.source)
        self.load_lines(lines, path=path)
        LOG.info("Loaded settings from %s", path)

    def load_lines(self, lines: Iterable[Line | str] | str, path: Path | None = None) -> None:
        if isinstance(lines, str):
            lines = lines.splitlines()
        tree = parse_settings(lines, strict_levels=self.config.strict_levels)
        self._tree = tree
        self.path = path
        self._loaded = True

    def all(self) -> SettingsTree:
        return copy.deepcopy(self._tree)

    def get(self, *keys: str) -> SettingsValue:
        """
        Walk the tree with ``keys`` and return the leaf or sub-tree found.

        ``get()`` with no keys returns the whole tree. Raises KeyNotFoundError
        naming the full path when any key is missing.
        """
        return copy.deepcopy(self._walk(keys))

    def __contains__(self, keys: object) -> bool:
        path = tuple(keys) if isinstance(keys, (tuple, list)) else (keys,)
        try:
            self._walk(path)
        except (KeyNotFoundError, TypeError):
            return False
        return True

    def _walk(self, keys: tuple) -> SettingsValue:
        cursor: SettingsValue = self._tree
        for key in keys:
            if not isinstance(cursor, dict) or key not in cursor:
                raise KeyNotFoundError(keys)
            cursor = cursor[key]
        return cursor

    def __repr__(self) -> str:
        origin = str(self.path) if self.path else "<unloaded>"
        return f"Settings({origin}, {len(self._tree)} top-level key(s))"
