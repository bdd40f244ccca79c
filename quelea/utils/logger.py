"""
Logging configuration for Quelea.
"""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional, Union


def setup_logging(
    log_level: str = "INFO",
    log_file: bool = True,
    user_home: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Configure application logging.
    
    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: If True, also log to file
        user_home: Home directory holding .quelea (defaults to the user's)
        
    Returns:
        Root logger instance
    """
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    
    # Clear any existing handlers
    logger.handlers.clear()
    
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    logger.addHandler(console_handler)
    
    if log_file:
        log_dir = get_log_dir(user_home)
        log_dir.mkdir(parents=True, exist_ok=True)
        
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file_path = log_dir / f"quelea_{timestamp}.log"
        
        file_handler = logging.FileHandler(log_file_path)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        logger.addHandler(file_handler)
        
        logger.info(f"Logging to file: {log_file_path}")
    
    return logger


def get_log_dir(user_home: Optional[Union[str, Path]] = None) -> Path:
    """
    Get the log directory inside the Quelea user home.
    
    Returns:
        Path to log directory
    """
    from . import get_quelea_user_home
    
    return get_quelea_user_home(user_home) / "logs"
