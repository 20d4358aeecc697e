"""Tree-sitter adapter: grammar loading, parsing and locals-query access.

Everything tree-sitter specific that the scope resolver needs lives here:

- Loading a grammar wheel into a ``tree_sitter.Language`` (cached per pack)
- Parsing source bytes into a tree (fresh ``Parser`` per call)
- Compiling the pack's locals query (cached per pack, see ``MemoizedQuery``)

Failures are translated into :class:`AnalysisError` with the matching code.
"""

from __future__ import annotations

import importlib
import threading
from dataclasses import dataclass, field
from typing import Any, ClassVar

import structlog
import tree_sitter

from codeintel.core.errors import AnalysisError
from codeintel.index._internal.parsing.packs import LanguagePack, all_packs

log = structlog.get_logger()


@dataclass
class ParseResult:
    """Result of parsing one source buffer."""

    tree: Any  # Tree-sitter Tree (not serializable)
    language: str
    root_node: Any  # Tree-sitter Node
    ts_language: Any = None  # tree-sitter Language the tree was parsed with


@dataclass
class TreeSitterParser:
    """
    Tree-sitter front end for scope resolution.

    Usage::

        parser = TreeSitterParser.get()
        pack = get_pack("go")

        result = parser.parse(pack, b"func f() {}")
        query = parser.locals_query(pack, result.ts_language)
    """

    _languages: dict[str, Any] = field(default_factory=dict, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    _instance: ClassVar[TreeSitterParser | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    @classmethod
    def get(cls) -> TreeSitterParser:
        """Return the shared parser (grammar cache is process-wide)."""
        instance = cls._instance
        if instance is not None:
            return instance
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset singleton and compiled queries (mainly for testing)."""
        with cls._instance_lock:
            cls._instance = None
        for pack in all_packs():
            pack.locals_query.reset()

    def get_language(self, pack: LanguagePack) -> tree_sitter.Language:
        """Get or load the tree-sitter language for *pack*."""
        lang = self._languages.get(pack.name)
        if lang is not None:
            return lang

        with self._lock:
            lang = self._languages.get(pack.name)
            if lang is None:
                lang = self._load_language(pack)
                self._languages[pack.name] = lang
        return lang

    @staticmethod
    def _load_language(pack: LanguagePack) -> tree_sitter.Language:
        try:
            mod = importlib.import_module(pack.grammar_module)
        except ImportError as err:
            raise AnalysisError.language_init(
                pack.name, f"{pack.grammar_package} is not installed"
            ) from err

        lang_fn = getattr(mod, pack.language_func, None)
        if lang_fn is None:
            raise AnalysisError.language_init(
                pack.name, f"{pack.grammar_module}.{pack.language_func} not found"
            )

        try:
            return tree_sitter.Language(lang_fn())
        except (TypeError, ValueError) as err:
            raise AnalysisError.language_init(pack.name, str(err)) from err

    def parse(self, pack: LanguagePack, content: bytes) -> ParseResult:
        """
        Parse *content* with the grammar of *pack*.

        Returns:
            ParseResult with tree and root node.

        Raises:
            AnalysisError: LANGUAGE_INIT_ERROR if the grammar cannot be loaded
                into a parser, PARSE_FAILURE if no tree is produced.
        """
        ts_lang = self.get_language(pack)

        try:
            parser = tree_sitter.Parser(ts_lang)
        except ValueError as err:
            raise AnalysisError.language_init(pack.name, str(err)) from err

        tree = parser.parse(content)
        if tree is None:
            raise AnalysisError.parse_failure(pack.name)

        return ParseResult(
            tree=tree,
            language=pack.name,
            root_node=tree.root_node,
            ts_language=ts_lang,
        )

    def locals_query(self, pack: LanguagePack, ts_language: Any) -> tree_sitter.Query:
        """Compiled locals query for *pack*, compiling it on first use.

        Raises:
            AnalysisError: QUERY_COMPILATION_ERROR with the compiler diagnostic.
        """
        try:
            return pack.locals_query.query(ts_language)
        except tree_sitter.QueryError as err:
            log.warning("query.compile_failed", language=pack.name, reason=str(err))
            raise AnalysisError.query_compilation(pack.name, str(err)) from err
