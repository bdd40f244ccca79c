"""
Quelea - free projection software for churches.

This package holds the per-user configuration subsystem.
"""

VERSION = "0.5"
__version__ = VERSION
