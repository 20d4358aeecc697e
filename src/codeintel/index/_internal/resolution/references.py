"""Bind identifier occurrences to definitions in their nearest scope."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from codeintel.index._internal.resolution.scopes import ScopeTable
from codeintel.index.models import Range

IDENTIFIER_MARKER = "identifier"


def walk_preorder(root: Any) -> Iterator[Any]:
    """Yield every node under *root*: the node first, then its children left to right."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def is_identifier_like(node: Any, marker: str = IDENTIFIER_MARKER) -> bool:
    """Node kinds embedding *marker* count (identifier, field_identifier, ...)."""
    return marker in node.type


def resolve_references(
    root: Any,
    source: bytes,
    table: ScopeTable,
    *,
    identifier_marker: str = IDENTIFIER_MARKER,
) -> int:
    """Append every matching identifier occurrence to its symbol's refs.

    Lookup is single level: an occurrence is only matched against the table
    of its nearest scope.  If the name is not defined there, outer scopes
    are not consulted.

    Returns:
        Number of references recorded.
    """
    recorded = 0
    for node in walk_preorder(root):
        if not is_identifier_like(node, identifier_marker):
            continue

        scope_id = table.nearest_scope(node)
        if scope_id is None:
            continue

        occurrence = Range.of(node)
        symbol = table.lookup(scope_id, occurrence.slice(source))
        if symbol is None or symbol.def_ == occurrence:
            continue

        symbol.refs.append(occurrence)
        recorded += 1
    return recorded
