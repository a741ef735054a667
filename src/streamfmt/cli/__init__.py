"""Command-line interface for streamfmt."""
