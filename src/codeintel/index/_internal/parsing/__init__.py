"""Tree-sitter parsing and per-language locals queries."""

from codeintel.index._internal.parsing.packs import (
    PACKS,
    LanguagePack,
    all_packs,
    get_pack,
    get_pack_for_ext,
)
from codeintel.index._internal.parsing.queries import MemoizedQuery, run_captures
from codeintel.index._internal.parsing.treesitter import ParseResult, TreeSitterParser

__all__ = [
    "PACKS",
    "LanguagePack",
    "MemoizedQuery",
    "ParseResult",
    "TreeSitterParser",
    "all_packs",
    "get_pack",
    "get_pack_for_ext",
    "run_captures",
]
