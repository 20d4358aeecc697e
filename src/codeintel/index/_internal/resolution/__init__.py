"""Scope resolution: captures -> per-scope symbol tables -> references."""

from codeintel.index._internal.resolution.captures import (
    DEFINITION_CAPTURE,
    SCOPE_CAPTURE,
    CaptureSets,
    classify_captures,
)
from codeintel.index._internal.resolution.references import (
    IDENTIFIER_MARKER,
    is_identifier_like,
    resolve_references,
    walk_preorder,
)
from codeintel.index._internal.resolution.scopes import ScopeTable, build_scope_table

__all__ = [
    "DEFINITION_CAPTURE",
    "IDENTIFIER_MARKER",
    "SCOPE_CAPTURE",
    "CaptureSets",
    "ScopeTable",
    "build_scope_table",
    "classify_captures",
    "is_identifier_like",
    "resolve_references",
    "walk_preorder",
]
