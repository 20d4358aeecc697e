"""Shared fixtures for index tests."""

from __future__ import annotations

import itertools
from collections.abc import Callable, Generator
from dataclasses import dataclass, field

import pytest

from codeintel.index._internal.parsing import TreeSitterParser

_ids = itertools.count(1)


@dataclass(eq=False)
class FakeNode:
    """Hand-built stand-in for ``tree_sitter.Node``.

    Points are ``(0, byte)`` since the fake sources are single-line.
    """

    type: str
    start_byte: int
    end_byte: int
    children: list[FakeNode] = field(default_factory=list)
    parent: FakeNode | None = None
    id: int = field(default_factory=lambda: next(_ids))

    def __post_init__(self) -> None:
        for child in self.children:
            child.parent = self

    @property
    def start_point(self) -> tuple[int, int]:
        return (0, self.start_byte)

    @property
    def end_point(self) -> tuple[int, int]:
        return (0, self.end_byte)


NodeFactory = Callable[..., FakeNode]


@pytest.fixture
def node() -> NodeFactory:
    """Build a fake node: ``node(type, start, end, *children)``."""

    def make(type_: str, start: int, end: int, *children: FakeNode) -> FakeNode:
        return FakeNode(type_, start, end, list(children))

    return make


@pytest.fixture
def ident(node: NodeFactory) -> NodeFactory:
    """Build an ``identifier`` node over the *nth* occurrence of *name* in *source*."""

    def make(source: bytes, name: bytes, nth: int = 0) -> FakeNode:
        start = -1
        for _ in range(nth + 1):
            start = source.index(name, start + 1)
        return node("identifier", start, start + len(name))

    return make


@pytest.fixture(autouse=True)
def fresh_parser() -> Generator[None, None, None]:
    """Each test starts without cached grammars or compiled queries."""
    TreeSitterParser.reset()
    yield
    TreeSitterParser.reset()
