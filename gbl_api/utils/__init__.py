"""Shared pure helpers used by services."""
