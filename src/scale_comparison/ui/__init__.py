"""Textual widgets and rendering helpers."""
