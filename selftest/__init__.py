"""Selftests (pytest-collectable; also runnable via `python -m selftest.run_all`)."""
