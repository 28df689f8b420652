"""Shared helpers: time, coercion, formatting, config."""
