"""Tests for scope table construction.

The fake tree used throughout::

    source_file
    ├── function (outer)
    │   ├── identifier  alpha   <- parameter
    │   ├── identifier  alpha   <- use
    │   └── function (inner)
    │       ├── identifier  alpha
    │       └── identifier  beta
    └── identifier  alpha       <- outside every function
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pytest

from codeintel.index._internal.resolution import ScopeTable, build_scope_table
from codeintel.index.models import Range

SOURCE = b"fn outer(alpha) { alpha; fn inner() { alpha; beta } } alpha"


@dataclass
class Sample:
    root: Any
    outer: Any
    inner: Any
    param: Any
    use_outer: Any
    use_inner: Any
    beta: Any
    tail: Any


@pytest.fixture
def sample(node: Any, ident: Any) -> Sample:
    param = ident(SOURCE, b"alpha", 0)
    use_outer = ident(SOURCE, b"alpha", 1)
    use_inner = ident(SOURCE, b"alpha", 2)
    tail = ident(SOURCE, b"alpha", 3)
    beta = ident(SOURCE, b"beta", 0)

    inner_start = SOURCE.index(b"fn inner")
    inner_end = SOURCE.index(b"}", SOURCE.index(b"beta")) + 1
    outer_end = SOURCE.rindex(b"}") + 1

    inner = node("function", inner_start, inner_end, use_inner, beta)
    outer = node("function", 0, outer_end, param, use_outer, inner)
    root = node("source_file", 0, len(SOURCE), outer, tail)
    return Sample(root, outer, inner, param, use_outer, use_inner, beta, tail)


class TestNearestScope:
    """ScopeTable.nearest_scope() tests."""

    @pytest.mark.parametrize("memoize", [True, False])
    def test_finds_innermost_enclosing_scope(self, sample: Sample, memoize: bool) -> None:
        table = ScopeTable([sample.outer, sample.inner], memoize=memoize)

        assert table.nearest_scope(sample.use_outer) == sample.outer.id
        assert table.nearest_scope(sample.use_inner) == sample.inner.id
        assert table.nearest_scope(sample.beta) == sample.inner.id

    @pytest.mark.parametrize("memoize", [True, False])
    def test_outside_every_scope_is_none(self, sample: Sample, memoize: bool) -> None:
        table = ScopeTable([sample.outer, sample.inner], memoize=memoize)

        assert table.nearest_scope(sample.tail) is None
        assert table.nearest_scope(sample.root) is None

    def test_node_itself_counts(self, sample: Sample) -> None:
        """The walk starts at the node, so a scope is its own nearest scope."""
        table = ScopeTable([sample.outer, sample.inner])

        assert table.nearest_scope(sample.inner) == sample.inner.id

    def test_memo_is_invalidated_by_new_scope(self, sample: Sample) -> None:
        table = ScopeTable([sample.outer])
        assert table.nearest_scope(sample.use_inner) == sample.outer.id

        table.add_scope(sample.inner)

        assert table.nearest_scope(sample.use_inner) == sample.inner.id


class TestBuildScopeTable:
    """build_scope_table() tests."""

    def test_one_table_per_scope(self, sample: Sample) -> None:
        table = build_scope_table([sample.outer, sample.inner], [], SOURCE)

        assert len(table) == 2
        assert sample.outer.id in table
        assert table.symbols() == []

    def test_definition_filed_under_nearest_scope(self, sample: Sample) -> None:
        # When
        table = build_scope_table([sample.outer, sample.inner], [sample.param], SOURCE)

        # Then
        symbol = table.lookup(sample.outer.id, b"alpha")
        assert symbol is not None
        assert symbol.def_ == Range.of(sample.param)
        assert symbol.refs == []
        assert symbol.name == "alpha"
        assert symbol.scope == Range.of(sample.outer)
        assert table.lookup(sample.inner.id, b"alpha") is None

    def test_key_is_exact_source_text(self, sample: Sample) -> None:
        table = build_scope_table([sample.inner], [sample.beta], SOURCE)

        assert list(table.table(sample.inner.id)) == [b"beta"]

    def test_unscoped_definition_dropped(self, sample: Sample) -> None:
        """A definition with no scope ancestor produces no symbol."""
        table = build_scope_table([sample.outer, sample.inner], [sample.tail], SOURCE)

        assert table.symbols() == []

    def test_no_scopes_drops_everything(self, sample: Sample) -> None:
        table = build_scope_table([], [sample.param, sample.beta], SOURCE)

        assert table.symbols() == []

    def test_last_write_wins_on_duplicate_name(self, sample: Sample) -> None:
        """Two same-text definitions in one scope collapse into the later one."""
        # Given - both alphas directly under outer
        definitions = [sample.param, sample.use_outer]

        # When
        table = build_scope_table([sample.outer], definitions, SOURCE)

        # Then
        symbols = table.symbols()
        assert len(symbols) == 1
        assert symbols[0].def_ == Range.of(sample.use_outer)

    def test_last_write_wins_follows_processing_order(self, sample: Sample) -> None:
        """The winner is the last one processed, not the last in the text."""
        table = build_scope_table([sample.outer], [sample.use_outer, sample.param], SOURCE)

        [symbol] = table.symbols()
        assert symbol.def_ == Range.of(sample.param)

    def test_same_name_in_different_scopes(self, sample: Sample) -> None:
        table = build_scope_table(
            [sample.outer, sample.inner], [sample.param, sample.use_inner], SOURCE
        )

        assert len(table.symbols()) == 2
        assert table.lookup(sample.outer.id, b"alpha") is not None
        assert table.lookup(sample.inner.id, b"alpha") is not None

    def test_definition_that_is_a_scope_owns_itself(self, sample: Sample) -> None:
        table = build_scope_table([sample.outer, sample.param], [sample.param], SOURCE)

        [symbol] = table.symbols()
        assert symbol.scope == Range.of(sample.param)

    def test_def_lies_within_scope(self, sample: Sample) -> None:
        definitions = [sample.param, sample.use_inner, sample.beta, sample.tail]
        table = build_scope_table([sample.outer, sample.inner], definitions, SOURCE)

        for symbol in table.symbols():
            assert symbol.scope is not None
            assert symbol.scope.contains(symbol.def_)
