"""
bulk_renamer - Bulk File Rename Tool

Preview and apply find/replace renames across a folder of files.
"""

__version__ = "1.0.0"
