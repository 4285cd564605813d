"""Integrations with the outside world (clock, process execution)."""
