"""
Utility functions for Quelea.
"""

from pathlib import Path
from typing import Optional, Union

from .logger import setup_logging
from .styles import native_style_name

QUELEA_DIR_NAME = ".quelea"


def quelea_user_home_path(user_home: Optional[Union[str, Path]] = None) -> Path:
    """Get the path of the .quelea directory without creating it."""
    base = Path(user_home) if user_home is not None else Path.home()
    return base / QUELEA_DIR_NAME


def get_quelea_user_home(user_home: Optional[Union[str, Path]] = None) -> Path:
    """
    Get the Quelea directory in the user's home, creating it if needed.
    
    Args:
        user_home: Home directory to use instead of the current user's
        
    Returns:
        Path to the .quelea directory
        
    Raises:
        OSError: If the directory can't be created
    """
    quelea_home = quelea_user_home_path(user_home)
    quelea_home.mkdir(parents=True, exist_ok=True)
    return quelea_home


__all__ = ["get_quelea_user_home", "quelea_user_home_path", "setup_logging", "native_style_name"]
