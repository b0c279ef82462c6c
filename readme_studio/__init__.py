"""Compose a GitHub profile README from a form, with live preview."""

__version__ = "0.1.0"
