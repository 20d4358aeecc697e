"""Index module - file-local lexical symbol tables.

This module provides:
- Tree-sitter parsing with per-language locals queries (``@scope``/``@definition``)
- Scope table construction and single-level reference resolution

Public API is in `codeintel.index.ops`:
- code_intel: Symbols of one source buffer
- analyze_file: Symbols of one file, language detected from its extension
- supported_languages: Registered language ids

Internal implementations are in `codeintel.index._internal/`.
"""

from codeintel.index.models import Range, Symbol, SyntaxNode
from codeintel.index.ops import analyze_file, code_intel, supported_languages

__all__ = [
    "Range",
    "Symbol",
    "SyntaxNode",
    "analyze_file",
    "code_intel",
    "supported_languages",
]
