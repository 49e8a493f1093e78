"""Helpers: CLI parsing and match logging."""
