"""
Report outputs — rounding and formatting a time cost for the page.
"""

from .display import DisplayResult, to_display

__all__ = [
    "DisplayResult",
    "to_display",
]
