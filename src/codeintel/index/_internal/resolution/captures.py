"""Split a locals-query capture stream into scope and definition nodes."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

SCOPE_CAPTURE = "scope"
DEFINITION_CAPTURE = "definition"


@dataclass
class CaptureSets:
    """Nodes captured as scopes and as definitions, in emission order."""

    scopes: list[Any] = field(default_factory=list)
    definitions: list[Any] = field(default_factory=list)


def classify_captures(
    captures: Iterable[tuple[str, Any]],
    *,
    scope_capture: str = SCOPE_CAPTURE,
    definition_capture: str = DEFINITION_CAPTURE,
) -> CaptureSets:
    """Bucket ``(capture_name, node)`` events by capture name.

    Any other capture name is ignored; it may be meaningful to other
    consumers of the same query.
    """
    result = CaptureSets()
    for name, node in captures:
        if name == scope_capture:
            result.scopes.append(node)
        elif name == definition_capture:
            result.definitions.append(node)
    return result
