"""Rule engine subpackage: exact-five detection and end-of-game checks."""
