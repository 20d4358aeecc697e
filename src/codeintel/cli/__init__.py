"""codeintel command line interface."""
