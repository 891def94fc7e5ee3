"""
Sugoroku Configuration.

Environment variables, settings, logging configuration and board files.
"""

from sugoroku.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
