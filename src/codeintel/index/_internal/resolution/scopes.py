"""Per-scope symbol tables.

A ``ScopeTable`` maps each scope node (by tree-sitter node id) to a table of
``name bytes -> Symbol``.  Scopes are not linked to each other: nesting is
whatever the syntax tree's parent chain says, looked up on demand.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import structlog

from codeintel.index.models import Range, Symbol

log = structlog.get_logger()


class ScopeTable:
    """Symbol tables for every scope node of one analyzed tree."""

    def __init__(self, scopes: Iterable[Any] = (), *, memoize: bool = True) -> None:
        self._tables: dict[int, dict[bytes, Symbol]] = {}
        self._spans: dict[int, Range] = {}
        self._memo: dict[int, int | None] | None = {} if memoize else None
        for node in scopes:
            self.add_scope(node)

    def add_scope(self, node: Any) -> None:
        """Register *node* as a scope with an empty table (idempotent)."""
        if node.id in self._tables:
            return
        self._tables[node.id] = {}
        self._spans[node.id] = Range.of(node)
        if self._memo is not None:
            self._memo.clear()

    def __contains__(self, node_id: int) -> bool:
        return node_id in self._tables

    def __len__(self) -> int:
        return len(self._tables)

    def nearest_scope(self, node: Any) -> int | None:
        """Id of the first scope on *node*'s ancestor chain, *node* included."""
        memo = self._memo
        if memo is None:
            return self._walk_to_scope(node)

        visited: list[int] = []
        cur = node
        found: int | None = None
        while cur is not None:
            if cur.id in memo:
                found = memo[cur.id]
                break
            visited.append(cur.id)
            if cur.id in self._tables:
                found = cur.id
                break
            cur = cur.parent
        for node_id in visited:
            memo[node_id] = found
        return found

    def _walk_to_scope(self, node: Any) -> int | None:
        cur = node
        while cur is not None:
            if cur.id in self._tables:
                return cur.id  # type: ignore[no-any-return]
            cur = cur.parent
        return None

    def table(self, scope_id: int) -> dict[bytes, Symbol]:
        return self._tables[scope_id]

    def span(self, scope_id: int) -> Range:
        return self._spans[scope_id]

    def define(self, scope_id: int, name: bytes, def_range: Range) -> Symbol:
        """Insert a fresh symbol, replacing any existing one with the same name."""
        symbol = Symbol(
            def_=def_range,
            refs=[],
            name=name.decode("utf-8", errors="replace"),
            scope=self._spans[scope_id],
        )
        self._tables[scope_id][name] = symbol
        return symbol

    def lookup(self, scope_id: int, name: bytes) -> Symbol | None:
        return self._tables[scope_id].get(name)

    def symbols(self) -> list[Symbol]:
        """Flatten every scope's table into one list.

        Order across scopes is not meaningful; each symbol's refs keep their
        document order.
        """
        return [symbol for table in self._tables.values() for symbol in table.values()]


def build_scope_table(
    scopes: Iterable[Any],
    definitions: Iterable[Any],
    source: bytes,
    *,
    memoize: bool = True,
) -> ScopeTable:
    """Create a table per scope node and file each definition under its nearest scope.

    A definition outside every scope is dropped.  Two definitions with the
    same text in the same scope collapse into one symbol: the one processed
    last wins.
    """
    table = ScopeTable(scopes, memoize=memoize)

    for node in definitions:
        scope_id = table.nearest_scope(node)
        def_range = Range.of(node)
        if scope_id is None:
            log.debug(
                "scopes.definition_dropped",
                start_byte=def_range.start_byte,
                end_byte=def_range.end_byte,
            )
            continue
        table.define(scope_id, def_range.slice(source), def_range)

    return table
