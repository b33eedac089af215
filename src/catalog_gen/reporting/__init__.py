"""Markdown rendering of the model catalog."""
