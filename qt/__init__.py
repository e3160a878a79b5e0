"""Qt host for the mood simulation."""
