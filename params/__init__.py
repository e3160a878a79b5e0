"""Parameter registry and config helpers."""
