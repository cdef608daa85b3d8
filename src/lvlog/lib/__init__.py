"""Reusable libraries bundled with lvlog."""
