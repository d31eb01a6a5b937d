"""
gui - PySide6 Desktop Interface for Bulk Renamer
"""

from .gui_entry import main

__all__ = ["main"]
