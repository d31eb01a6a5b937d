"""
preview.py - Rename Preview Generation Module

Responsibilities:
- Apply filter and name transformer to each candidate path
- Collision detection against the batch's own original names, per folder
- Output an ordered list of RenamePreview
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Set
from collections import defaultdict
import logging

from .models import RenamePreview, RenamePreviewStatus, RenameSettings, split_path
from .text_match import matches_filter
from .transform import transform_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreviewSummary:
    """Preview counts by status"""
    total: int = 0
    will_rename: int = 0
    no_change: int = 0
    collision: int = 0

    def summary(self) -> str:
        """Generate summary"""
        lines = [
            f"Rename Preview Summary:",
            f"  - Files in preview: {self.total}",
            f"  - Will rename: {self.will_rename}",
            f"  - No change: {self.no_change}",
            f"  - Collisions: {self.collision}",
        ]
        return "\n".join(lines)


def build_existing_names_index(paths: Iterable[str]) -> Dict[str, Set[str]]:
    """
    Build folder -> stems lookup from the original names of every path

    Args:
        paths: All candidate paths (filtered or not)

    Returns:
        Mapping of directory to the set of stems it holds
    """
    index: Dict[str, Set[str]] = defaultdict(set)
    for full_path in paths:
        directory, stem, _ = split_path(full_path)
        index[directory].add(stem)
    return dict(index)


def resolve_status(
    directory: str,
    old_name: str,
    new_name: str,
    existing_names: Dict[str, Set[str]]
) -> RenamePreviewStatus:
    """Classify a computed name as NoChange, Collision or WillRename (in that order)"""
    if old_name == new_name:
        return RenamePreviewStatus.NO_CHANGE

    if new_name in existing_names.get(directory, ()):
        return RenamePreviewStatus.COLLISION

    return RenamePreviewStatus.WILL_RENAME


def build_preview(paths: Iterable[str], settings: RenameSettings) -> List[RenamePreview]:
    """
    Compute what each file would be renamed to without touching the file system

    Args:
        paths: Absolute paths of the candidate files
        settings: Filter and replace configuration

    Returns:
        One preview per path that passes the filter, in input order
    """
    paths = list(paths)
    existing_names = build_existing_names_index(paths)

    previews: List[RenamePreview] = []

    for full_path in paths:
        directory, old_name, _ = split_path(full_path)

        if settings.use_filter and not matches_filter(
            old_name, settings.filter_match, settings.filter_text, settings.case_sensitive
        ):
            continue

        new_name = transform_name(old_name, settings)
        status = resolve_status(directory, old_name, new_name, existing_names)

        previews.append(RenamePreview(full_path, old_name, new_name, status))

    logger.debug("Built %d previews from %d paths", len(previews), len(paths))
    return previews


def summarize_previews(previews: Iterable[RenamePreview]) -> PreviewSummary:
    """Count previews by status"""
    counts = {status: 0 for status in RenamePreviewStatus}
    total = 0
    for preview in previews:
        counts[preview.status] += 1
        total += 1

    return PreviewSummary(
        total=total,
        will_rename=counts[RenamePreviewStatus.WILL_RENAME],
        no_change=counts[RenamePreviewStatus.NO_CHANGE],
        collision=counts[RenamePreviewStatus.COLLISION],
    )
