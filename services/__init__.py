"""Segment planning services."""
