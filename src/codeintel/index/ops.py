"""Public analysis operations.

``code_intel`` is the whole pipeline for one buffer:

    registry lookup -> parse -> locals query -> classify captures
        -> build scope table -> resolve references -> flatten

Each call owns its tree and scope table; only the grammar and compiled-query
caches are shared between calls.
"""

from __future__ import annotations

import time
from pathlib import Path

import structlog

from codeintel.config.models import AnalysisConfig, CodeIntelConfig
from codeintel.core.errors import AnalysisError
from codeintel.core.logging import clear_request_id, get_request_id, set_request_id
from codeintel.index._internal.parsing import (
    TreeSitterParser,
    all_packs,
    get_pack,
    get_pack_for_ext,
    run_captures,
)
from codeintel.index._internal.resolution import (
    build_scope_table,
    classify_captures,
    resolve_references,
)
from codeintel.index.models import Symbol

log = structlog.get_logger()


def _analysis_config(config: CodeIntelConfig | AnalysisConfig | None) -> AnalysisConfig:
    if config is None:
        return AnalysisConfig()
    if isinstance(config, CodeIntelConfig):
        return config.analysis
    return config


def code_intel(
    source: bytes,
    language_id: str,
    *,
    config: CodeIntelConfig | AnalysisConfig | None = None,
) -> list[Symbol]:
    """Build the file-local symbol table of *source*.

    Args:
        source: Raw file contents.
        language_id: Registered language id (see ``supported_languages()``).
        config: Root or analysis config; defaults apply when omitted.

    Returns:
        One Symbol per surviving definition, in no particular order.

    Raises:
        AnalysisError: UNSUPPORTED_LANGUAGE, LANGUAGE_INIT_ERROR,
            QUERY_COMPILATION_ERROR or PARSE_FAILURE.  Nothing is returned
            on error.
    """
    settings = _analysis_config(config)
    owns_request_id = get_request_id() is None
    if owns_request_id:
        set_request_id()

    try:
        pack = get_pack(language_id)
        if pack is None:
            raise AnalysisError.unsupported_language(language_id)

        start = time.perf_counter()
        parser = TreeSitterParser.get()
        result = parser.parse(pack, source)
        query = parser.locals_query(pack, result.ts_language)

        captures = classify_captures(
            run_captures(query, result.root_node),
            scope_capture=settings.scope_capture,
            definition_capture=settings.definition_capture,
        )
        table = build_scope_table(
            captures.scopes,
            captures.definitions,
            source,
            memoize=settings.memoize_scope_lookup,
        )
        ref_count = resolve_references(
            result.root_node,
            source,
            table,
            identifier_marker=settings.identifier_marker,
        )
        symbols = table.symbols()

        log.debug(
            "analysis.done",
            language=pack.name,
            bytes=len(source),
            scopes=len(table),
            definitions=len(captures.definitions),
            symbols=len(symbols),
            refs=ref_count,
            elapsed_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        return symbols
    finally:
        if owns_request_id:
            clear_request_id()


def analyze_file(
    path: Path,
    language_id: str | None = None,
    *,
    config: CodeIntelConfig | AnalysisConfig | None = None,
) -> list[Symbol]:
    """Read *path* and analyze it, detecting the language from its extension.

    Raises:
        AnalysisError: UNSUPPORTED_LANGUAGE when no language id is given and
            the extension is unknown, plus everything ``code_intel`` raises.
    """
    if language_id is None:
        pack = get_pack_for_ext(path.suffix)
        if pack is None:
            raise AnalysisError.unsupported_language(path.suffix or path.name)
        language_id = pack.name

    log.debug("analysis.start", path=str(path), language=language_id)
    return code_intel(path.read_bytes(), language_id, config=config)


def supported_languages() -> list[str]:
    """Canonical ids of every registered language."""
    return [pack.name for pack in all_packs()]
