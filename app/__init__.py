"""Application services: logging ring, diagnostics, crash reports."""
