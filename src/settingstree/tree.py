"""Fold a flat node sequence into the nested settings mapping."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Union

from settingstree.lexer import FlatNode

LOG = logging.getLogger(__name__)

SettingsValue = Union[str, "SettingsTree"]
SettingsTree = dict[str, SettingsValue]


def build_tree(nodes: Sequence[FlatNode]) -> SettingsTree:
    """Return the nested mapping described by ``nodes``.

    Nodes at the shallowest level in the sequence form the top of the tree.
    """
    tree: SettingsTree = {}
    if not nodes:
        return tree
    top_level = min(node.level for node in nodes)
    fold_nodes(nodes, 0, len(nodes), top_level, tree)
    return tree


def fold_nodes(
    nodes: Sequence[FlatNode],
    start: int,
    end: int,
    level: int,
    output: SettingsTree,
) -> None:
    """
    Fold every node in ``nodes[start:end]`` sitting at ``level`` into ``output``.

    Deeper nodes in the range are reached through the recursion of the node
    that owns them. A node followed by a deeper node becomes a branch keyed
    first by its key, then by its value; any other node is a leaf assignment.
    """
    for index in range(start, end):
        if nodes[index].level == level:
            _fold_node(nodes, index, end, output)


def _fold_node(nodes: Sequence[FlatNode], index: int, end: int, output: SettingsTree) -> None:
    node = nodes[index]
    value = node.value if node.value is not None else ""
    next_level = nodes[index + 1].level if index + 1 < end else node.level

    if next_level <= node.level:
        output[node.key] = value
        return

    container = output.get(node.key)
    if not isinstance(container, dict):
        if container is not None:
            LOG.debug("Replacing leaf '%s' with a branch (line %d)", node.key, node.line)
        container = output[node.key] = {}
    branch = container.get(value)
    if not isinstance(branch, dict):
        branch = container[value] = {}

    stop = index + 1
    while stop < end and nodes[stop].level > node.level:
        stop += 1
    if nodes[index + 1].level > node.level + 1:
        LOG.debug("Dropping over-indented children of '%s' (line %d)", node.key, node.line)
    fold_nodes(nodes, index + 1, stop, node.level + 1, branch)
