"""
file_system.py - File System Service

Provides file enumeration under a root folder and the single-file move
primitive used by the apply step
"""

from pathlib import Path
from typing import List
import os


def parse_extension_filter(extension_filter: str) -> List[str]:
    """
    Parse a comma-separated extension list

    Args:
        extension_filter: e.g. "fbx, .PNG" (empty means no filter)

    Returns:
        Lowercase, dot-qualified extensions (e.g. [".fbx", ".png"])
    """
    extensions = []
    for token in extension_filter.split(","):
        token = token.strip().lower()
        if not token:
            continue
        if not token.startswith("."):
            token = "." + token
        if token not in extensions:
            extensions.append(token)
    return extensions


def directory_exists(path: str) -> bool:
    """Whether path points to an existing directory"""
    return bool(path) and Path(path).is_dir()


def get_files(folder_path: str, include_subfolders: bool = True, extension_filter: str = "") -> List[str]:
    """
    List absolute paths of files inside a folder

    Args:
        folder_path: Root folder
        include_subfolders: Whether to recurse into subfolders
        extension_filter: Comma-separated extension list (case-insensitive)

    Returns:
        Sorted file paths (empty if the folder does not exist)
    """
    if not directory_exists(folder_path):
        return []

    root = Path(folder_path).resolve()
    extensions = parse_extension_filter(extension_filter)

    if include_subfolders:
        candidates = (
            Path(dirpath) / filename
            for dirpath, _dirnames, filenames in os.walk(root)
            for filename in filenames
        )
    else:
        candidates = (item for item in root.iterdir() if item.is_file())

    results = [
        str(p) for p in candidates
        if not extensions or p.suffix.lower() in extensions
    ]
    return sorted(results)


def move_file(src: str, dst: str) -> None:
    """
    Rename src to dst without overwriting another file

    Raises:
        FileExistsError: dst is occupied by a different file
        OSError: the underlying rename failed
    """
    if os.path.lexists(dst) and not _is_same_file(src, dst):
        raise FileExistsError(f"Target already exists: {dst}")
    os.rename(src, dst)


def _is_same_file(path1: str, path2: str) -> bool:
    """Case-only renames on case-insensitive file systems point at the same file"""
    try:
        return os.path.samefile(path1, path2)
    except OSError:
        return False
