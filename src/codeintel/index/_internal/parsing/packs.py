"""LanguagePack: single source of truth for per-language tree-sitter config.

Every language codeintel supports has exactly ONE LanguagePack holding:
- Grammar metadata (package, module, loader function)
- File extension detection
- The locals query: S-expression patterns marking scope boundaries with
  ``@scope`` and defining names with ``@definition``.  References are not
  captured; every identifier-like node in the tree is a candidate.

The PACKS registry is the canonical lookup: ``PACKS["go"]``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from codeintel.index._internal.parsing.queries import MemoizedQuery

# =========================================================================
# Dataclasses
# =========================================================================


@dataclass(frozen=True)
class LanguagePack:
    """Complete tree-sitter configuration for a single language."""

    # -- Identity --
    name: str  # Canonical, lowercase language id ("go", "python", ...)

    # -- Grammar --
    grammar_package: str  # PyPI package ("tree-sitter-go")
    grammar_module: str  # Python import ("tree_sitter_go")
    # Non-standard function name (e.g. "language_typescript")
    language_func: str = "language"

    # -- File detection --
    extensions: frozenset[str] = field(default_factory=frozenset)

    # -- Scope resolution --
    locals_query: MemoizedQuery = field(default_factory=lambda: MemoizedQuery(""), compare=False)


# =========================================================================
# GO
# =========================================================================

# Blocks are not scopes: parameters and body declarations share the
# enclosing function's table.
_GO_LOCALS = """
(function_declaration) @scope
(method_declaration) @scope
(func_literal) @scope

(parameter_declaration name: (identifier) @definition)
(variadic_parameter_declaration name: (identifier) @definition)
(short_var_declaration left: (expression_list (identifier) @definition))
(range_clause left: (expression_list (identifier) @definition))
(var_spec name: (identifier) @definition)
(const_spec name: (identifier) @definition)
"""

GO_PACK = LanguagePack(
    name="go",
    grammar_package="tree-sitter-go",
    grammar_module="tree_sitter_go",
    extensions=frozenset({"go"}),
    locals_query=MemoizedQuery(_GO_LOCALS),
)


# =========================================================================
# PYTHON
# =========================================================================

_PYTHON_LOCALS = """
(module) @scope
(function_definition) @scope
(class_definition) @scope
(lambda) @scope

; Function and class names sit inside their own definition node, so each name
; is filed in that definition's scope and module-level uses of it do not bind.
(function_definition name: (identifier) @definition)
(class_definition name: (identifier) @definition)
(parameters (identifier) @definition)
(lambda_parameters (identifier) @definition)
(default_parameter name: (identifier) @definition)
(typed_parameter (identifier) @definition)
(typed_default_parameter name: (identifier) @definition)
(assignment left: (identifier) @definition)
(assignment left: (pattern_list (identifier) @definition))
(for_statement left: (identifier) @definition)
(import_statement name: (dotted_name . (identifier) @definition))
(import_from_statement name: (dotted_name (identifier) @definition))
(aliased_import alias: (identifier) @definition)
"""

PYTHON_PACK = LanguagePack(
    name="python",
    grammar_package="tree-sitter-python",
    grammar_module="tree_sitter_python",
    extensions=frozenset({"py", "pyi", "pyw"}),
    locals_query=MemoizedQuery(_PYTHON_LOCALS),
)


# =========================================================================
# JAVASCRIPT
# =========================================================================

_JAVASCRIPT_LOCALS = """
(program) @scope
(function_declaration) @scope
(function_expression) @scope
(arrow_function) @scope
(method_definition) @scope

; Same as Python: a declared function's name belongs to its own scope, so
; calls at program level do not bind to it.
(function_declaration name: (identifier) @definition)
(variable_declarator name: (identifier) @definition)
(formal_parameters (identifier) @definition)
(assignment_pattern left: (identifier) @definition)
(arrow_function parameter: (identifier) @definition)
(catch_clause parameter: (identifier) @definition)
"""

JAVASCRIPT_PACK = LanguagePack(
    name="javascript",
    grammar_package="tree-sitter-javascript",
    grammar_module="tree_sitter_javascript",
    extensions=frozenset({"js", "mjs", "cjs", "jsx"}),
    locals_query=MemoizedQuery(_JAVASCRIPT_LOCALS),
)


# =========================================================================
# RUST
# =========================================================================

_RUST_LOCALS = """
(function_item) @scope
(closure_expression) @scope

(parameter pattern: (identifier) @definition)
(closure_parameters (identifier) @definition)
(let_declaration pattern: (identifier) @definition)
(for_expression pattern: (identifier) @definition)
"""

RUST_PACK = LanguagePack(
    name="rust",
    grammar_package="tree-sitter-rust",
    grammar_module="tree_sitter_rust",
    extensions=frozenset({"rs"}),
    locals_query=MemoizedQuery(_RUST_LOCALS),
)


# =========================================================================
# Canonical registries
# =========================================================================

_ALL_PACKS: tuple[LanguagePack, ...] = (
    GO_PACK,
    PYTHON_PACK,
    JAVASCRIPT_PACK,
    RUST_PACK,
)

# name -> Pack
PACKS: dict[str, LanguagePack] = {pack.name: pack for pack in _ALL_PACKS}
PACKS["golang"] = GO_PACK
PACKS["js"] = JAVASCRIPT_PACK

# Extension -> Pack
_EXT_TO_PACK: dict[str, LanguagePack] = {}
for _pack in _ALL_PACKS:
    for _ext in _pack.extensions:
        _EXT_TO_PACK[_ext] = _pack


# =========================================================================
# Public API
# =========================================================================


def get_pack(name: str) -> LanguagePack | None:
    """Get a LanguagePack by language id (ids are lowercase)."""
    return PACKS.get(name)


def get_pack_for_ext(ext: str) -> LanguagePack | None:
    """Get a LanguagePack for a file extension (with or without leading dot)."""
    return _EXT_TO_PACK.get(ext.lower().lstrip("."))


def all_packs() -> tuple[LanguagePack, ...]:
    """Every distinct pack, in registration order (aliases excluded)."""
    return _ALL_PACKS
