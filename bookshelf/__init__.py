"""Bookshelf - book collection manager with binary persistence."""

__version__ = "0.1.0"
