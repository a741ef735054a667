"""Framework layer: configuration, logging and shared types."""
