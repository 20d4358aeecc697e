"""codeintel - file-local lexical symbol tables built on tree-sitter."""
