"""Internal implementations behind codeintel.index.ops."""
