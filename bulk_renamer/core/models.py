"""
models.py - Core Data Structure Definitions

Contains:
- MatchMode / ReplaceMode / ApplyMode: rule enumerations
- RenameSettings: immutable snapshot of one computation run
- RenamePreview: a computed, not-yet-applied rename decision
- RenamePreviewStatus: outcome classification of a preview
"""

from dataclasses import dataclass, replace
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Tuple
from enum import Enum
import os
import re


class MatchMode(Enum):
    """How the filter text is matched against a stem"""
    CONTAINS = "contains"
    STARTS_WITH = "starts_with"
    ENDS_WITH = "ends_with"
    EXACT = "exact"


class ReplaceMode(Enum):
    """Whether find text is plain text or a regular expression"""
    PLAIN_TEXT = "plain"
    REGEX = "regex"


class ApplyMode(Enum):
    """Where within the stem a match may act"""
    ANYWHERE = "anywhere"
    PREFIX_ONLY = "prefix"
    SUFFIX_ONLY = "suffix"


class RenamePreviewStatus(Enum):
    """Outcome of a single preview"""
    WILL_RENAME = "will_rename"     # Name changes and collides with nothing
    NO_CHANGE = "no_change"         # New stem is identical to the old one
    COLLISION = "collision"         # Another file in the same folder already has the new stem


@dataclass(frozen=True)
class RenameSettings:
    """Full configuration for a rename run (read-only once built)"""
    # Scope
    folder_path: str = ""
    include_subfolders: bool = True
    extension_filter: str = ""          # e.g. "fbx, .png"

    # Filter
    use_filter: bool = False
    filter_match: MatchMode = MatchMode.CONTAINS
    filter_text: str = ""

    # Replace
    replace_mode: ReplaceMode = ReplaceMode.PLAIN_TEXT
    apply_mode: ApplyMode = ApplyMode.ANYWHERE
    case_sensitive: bool = True         # Shared by filter and replace
    find_text: str = ""
    replace_text: str = ""

    # Decoration
    add_prefix: str = ""
    add_suffix: str = ""
    replace_whitespace: bool = False
    whitespace_replacement: str = "_"

    # Safety
    skip_if_no_change: bool = True
    skip_if_collision: bool = True
    preview_only: bool = True           # Honoured by host layers, not by apply_renames

    def with_changes(self, **changes) -> "RenameSettings":
        """Return a copy with the given fields replaced"""
        return replace(self, **changes)


@dataclass(frozen=True)
class RenamePreview:
    """Snapshot of what a single file rename would look like"""
    full_path: str
    old_name: str                       # Stem before renaming
    new_name: str                       # Stem after renaming
    status: RenamePreviewStatus

    @property
    def directory(self) -> str:
        return split_path(self.full_path)[0]

    @property
    def target_path(self) -> str:
        """Original directory + new stem + original extension"""
        return join_target(self.full_path, self.new_name)


_WINDOWS_PATH_RE = re.compile(r"^(?:[A-Za-z]:[\\/]|\\\\)")


def _pure_path(full_path: str) -> PurePath:
    """Pick the path flavour: drive-letter and UNC paths are parsed as Windows paths on any OS"""
    if os.name == "nt" or _WINDOWS_PATH_RE.match(full_path):
        return PureWindowsPath(full_path)
    return PurePosixPath(full_path)


def split_path(full_path: str) -> Tuple[str, str, str]:
    """
    Split a path into (directory, stem, extension)

    A path without a directory part gets "" as its directory.
    """
    p = _pure_path(full_path)
    directory = str(p.parent) if len(p.parts) > 1 else ""
    return directory, p.stem, p.suffix


def join_target(full_path: str, new_stem: str) -> str:
    """Recombine the original directory and extension with a new stem"""
    p = _pure_path(full_path)
    new_name = new_stem + p.suffix
    if len(p.parts) > 1:
        return str(p.parent / new_name)
    return new_name
