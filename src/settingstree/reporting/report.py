"""Result presentation utilities."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from settingstree.settings import KEY_SEPARATOR
from settingstree.tree import SettingsTree, SettingsValue

LOG = logging.getLogger(__name__)


def emit_report(value: SettingsValue, keys: Sequence[str] = (), as_json: bool = False) -> None:
    """Print a looked-up value: leaves as plain text, sub-trees as a rich tree or JSON."""
    console = Console()
    if as_json:
        console.print_json(json.dumps(value))
        return

    if isinstance(value, str):
        console.print(Text(value), soft_wrap=True)
        return

    if not value:
        console.print(Text("No settings found.", style="yellow"))
        return

    label = KEY_SEPARATOR.join(keys) if keys else "settings"
    console.print(tree_to_rich(value, label))


def export_json(value: SettingsValue, path: Path) -> None:
    """Write ``value`` to ``path`` as indented JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(value, handle, indent=2, ensure_ascii=False)
        handle.write("\n")
    LOG.info("JSON exported to %s", path)


def tree_to_rich(tree: SettingsTree, label: str) -> Tree:
    """Build a rich Tree mirroring ``tree``, keeping file order."""
    root = Tree(Text(label, style="bold cyan"))
    _add_branch(root, tree)
    return root


def _add_branch(parent: Tree, tree: SettingsTree) -> None:
    for key, value in tree.items():
        if isinstance(value, dict):
            child = parent.add(Text(key, style="cyan"))
            _add_branch(child, value)
        else:
            line = Text(key, style="bold")
            line.append(" = ")
            line.append(value, style="green")
            parent.add(line)
