"""Preview package.

Headless engine components (simulation, frame clock, regression runner)
used by both the Qt host and the selftests.
"""
