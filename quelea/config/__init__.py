"""
Configuration management for Quelea.

This module handles the properties file, its default values, and typed
access to each setting.
"""

from .codecs import Color, ConfigDecodeError, Rectangle
from .defaults import DEFAULT_PROPERTIES
from .properties import DisplayTarget, NamedEntity, QueleaProperties
from .store import PropertyStore, StorageError

__all__ = [
    "QueleaProperties",
    "DisplayTarget",
    "NamedEntity",
    "Rectangle",
    "Color",
    "ConfigDecodeError",
    "PropertyStore",
    "StorageError",
    "DEFAULT_PROPERTIES",
]
