"""Utility modules and helper functions.

This package contains reusable utility modules used across the application.
"""

from .rwlock import RWLock

__all__ = ["RWLock"]
