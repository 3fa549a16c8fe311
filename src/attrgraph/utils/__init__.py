"""Utility packages for the attributed graph."""
