"""
Player Registry Backend Application Package.

This package contains the REST service that manages game player characters:
search, creation, update, deletion and level progression.
"""

from .core import get_global_settings, db_manager, get_db

__version__ = "0.1.0"

__all__ = [
    "get_global_settings",
    "db_manager",
    "get_db",
]
