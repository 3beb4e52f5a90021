"""Probe implementations, grouped by the subsystem they query."""
