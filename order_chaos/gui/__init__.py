"""Presentation layer: pygame window and terminal rendering."""
