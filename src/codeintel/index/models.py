"""Result types for file-local symbol tables.

``Range`` and ``Symbol`` are plain dataclasses: they outlive the tree-sitter
tree they were built from, so they never hold a reference to a node.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol


class SyntaxNode(Protocol):
    """The slice of ``tree_sitter.Node`` the scope resolver relies on."""

    @property
    def id(self) -> int: ...

    @property
    def type(self) -> str: ...

    @property
    def parent(self) -> SyntaxNode | None: ...

    @property
    def children(self) -> list[Any]: ...

    @property
    def start_byte(self) -> int: ...

    @property
    def end_byte(self) -> int: ...

    @property
    def start_point(self) -> Any: ...

    @property
    def end_point(self) -> Any: ...


@dataclass(frozen=True)
class Range:
    """Byte span ``[start_byte, end_byte)`` into the analyzed source.

    Points are 0-based ``(row, column)`` pairs carried for display; equality
    and hashing only look at the byte offsets.
    """

    start_byte: int
    end_byte: int
    start_point: tuple[int, int] = field(default=(0, 0), compare=False)
    end_point: tuple[int, int] = field(default=(0, 0), compare=False)

    @classmethod
    def of(cls, node: SyntaxNode) -> Range:
        return cls(
            start_byte=node.start_byte,
            end_byte=node.end_byte,
            start_point=(node.start_point[0], node.start_point[1]),
            end_point=(node.end_point[0], node.end_point[1]),
        )

    def slice(self, source: bytes) -> bytes:
        return source[self.start_byte : self.end_byte]

    def contains(self, other: Range) -> bool:
        return self.start_byte <= other.start_byte and other.end_byte <= self.end_byte

    def to_dict(self) -> dict[str, Any]:
        return {
            "start_byte": self.start_byte,
            "end_byte": self.end_byte,
            "start": {"line": self.start_point[0] + 1, "column": self.start_point[1]},
            "end": {"line": self.end_point[0] + 1, "column": self.end_point[1]},
        }


@dataclass
class Symbol:
    """A defined name, where it is defined, and where it is used.

    ``refs`` is in document order and never contains ``def_``.
    """

    def_: Range
    refs: list[Range] = field(default_factory=list)
    name: str = ""
    scope: Range | None = None  # Span of the owning scope node

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "def": self.def_.to_dict(),
            "refs": [r.to_dict() for r in self.refs],
            "scope": self.scope.to_dict() if self.scope is not None else None,
        }
