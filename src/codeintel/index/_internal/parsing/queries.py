"""Lazily compiled, process-wide tree-sitter queries.

A ``MemoizedQuery`` holds the S-expression source of one language's locals
query and compiles it on first use.  Compilation happens at most once per
instance even when several threads ask for it concurrently; a failed
compilation is not remembered, so the next caller tries again.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from typing import Any

import structlog
import tree_sitter

log = structlog.get_logger()


class MemoizedQuery:
    """Compile-once wrapper around :class:`tree_sitter.Query`."""

    __slots__ = ("_source", "_query", "_lock")

    def __init__(self, source: str) -> None:
        self._source = source
        self._query: tree_sitter.Query | None = None
        self._lock = threading.Lock()

    @property
    def source(self) -> str:
        return self._source

    @property
    def is_compiled(self) -> bool:
        return self._query is not None

    def query(self, language: tree_sitter.Language) -> tree_sitter.Query:
        """Return the compiled query, compiling it against *language* if needed.

        Raises:
            tree_sitter.QueryError: The pattern is invalid for this grammar.
        """
        query = self._query
        if query is not None:
            return query
        with self._lock:
            if self._query is None:
                self._query = tree_sitter.Query(language, self._source)
                log.debug("query.compiled", captures=self._query.capture_count)
            return self._query

    def reset(self) -> None:
        """Drop the compiled query (mainly for testing)."""
        with self._lock:
            self._query = None

    def __repr__(self) -> str:
        state = "compiled" if self.is_compiled else "pending"
        return f"MemoizedQuery({state}, {len(self._source)} chars)"


def run_captures(query: tree_sitter.Query, root: Any) -> Iterator[tuple[str, Any]]:
    """Run *query* over the tree under *root* as ``(capture_name, node)`` events.

    Events are grouped by capture name; within one name they keep the order
    the query cursor produced them in.
    """
    cursor = tree_sitter.QueryCursor(query)
    captures: dict[str, list[Any]] = cursor.captures(root)
    for name, nodes in captures.items():
        for node in nodes:
            yield name, node
