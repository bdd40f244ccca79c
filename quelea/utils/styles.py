"""
Qt style lookup for the "System" look and feel.
"""

import sys
from typing import List, Optional

FALLBACK_STYLE = "Fusion"

# Preferred native styles per platform, best first
NATIVE_STYLES = {
    "win32": ["windows11", "windowsvista", "Windows"],
    "darwin": ["macOS", "macintosh"],
}


def native_style_name(available: Optional[List[str]] = None) -> str:
    """
    Get the name of the platform's native Qt style.
    
    Args:
        available: Style names to choose from (defaults to the ones
            QStyleFactory reports)
        
    Returns:
        Style name as reported by Qt, or "Fusion" if no native style is
        installed
    """
    if available is None:
        from PySide6.QtWidgets import QStyleFactory
        available = list(QStyleFactory.keys())
    
    by_lower = {name.lower(): name for name in available}
    for candidate in NATIVE_STYLES.get(sys.platform, []):
        if candidate.lower() in by_lower:
            return by_lower[candidate.lower()]
    
    return FALLBACK_STYLE
