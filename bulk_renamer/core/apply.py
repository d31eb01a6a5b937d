"""
apply.py - Rename Execution Module

Responsibilities:
- Skip previews blocked by the safety flags
- Sequential moves in input order, one failure never aborts the batch
- Exception handling and logging
"""

from typing import Callable, List, Optional, Sequence, Tuple
from dataclasses import dataclass, field
import logging

from .file_system import move_file
from .models import RenamePreview, RenamePreviewStatus, RenameSettings

logger = logging.getLogger(__name__)

# move(old_path, new_path); raising or returning False means failure
Mover = Callable[[str, str], Optional[bool]]


@dataclass
class ApplyResult:
    """Rename execution result"""
    renamed: List[RenamePreview] = field(default_factory=list)
    failed: List[Tuple[RenamePreview, str]] = field(default_factory=list)  # (preview, error_msg)
    skipped: List[RenamePreview] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        return len(self.renamed)

    @property
    def failed_count(self) -> int:
        return len(self.failed)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    def summary(self) -> str:
        """Generate summary"""
        lines = [
            f"Execution Result:",
            f"  - Renamed: {self.success_count}",
            f"  - Failed: {self.failed_count}",
            f"  - Skipped: {self.skipped_count}",
        ]
        if self.failed:
            lines.append("Failure Details:")
            for preview, error in self.failed[:10]:  # Show at most 10
                lines.append(f"  - {preview.full_path}: {error}")
            if len(self.failed) > 10:
                lines.append(f"  ... and {len(self.failed) - 10} more failures")
        return "\n".join(lines)


def should_skip(preview: RenamePreview, settings: RenameSettings) -> bool:
    """Whether the safety flags block this preview"""
    if settings.skip_if_no_change and preview.status is RenamePreviewStatus.NO_CHANGE:
        return True
    if settings.skip_if_collision and preview.status is RenamePreviewStatus.COLLISION:
        return True
    return False


def execute_previews(
    previews: Sequence[RenamePreview],
    settings: RenameSettings,
    mover: Optional[Mover] = None,
    progress_callback: Optional[Callable[[int, int, str], None]] = None
) -> ApplyResult:
    """
    Apply renames based on already-computed previews

    Args:
        previews: Previews produced by build_preview
        settings: Settings whose safety flags decide what is skipped
        mover: Move primitive (defaults to file_system.move_file)
        progress_callback: Progress callback (current, total, message)

    Returns:
        Execution result
    """
    if mover is None:
        mover = move_file

    result = ApplyResult()
    total = len(previews)

    for i, preview in enumerate(previews):
        target_path = preview.target_path

        if progress_callback:
            progress_callback(i + 1, total, f"{preview.old_name} -> {preview.new_name}")

        # A move onto itself has nothing to do
        if should_skip(preview, settings) or preview.new_name == preview.old_name:
            result.skipped.append(preview)
            continue

        try:
            moved = mover(preview.full_path, target_path)
        except Exception as e:
            logger.warning("Failed to rename '%s': %s", preview.full_path, e)
            result.failed.append((preview, str(e)))
            continue

        if moved is False:
            logger.warning("Failed to rename '%s': move was rejected", preview.full_path)
            result.failed.append((preview, "move was rejected"))
            continue

        logger.debug("Renamed '%s' -> '%s'", preview.full_path, target_path)
        result.renamed.append(preview)

    return result


def apply_renames(
    previews: Sequence[RenamePreview],
    settings: RenameSettings,
    mover: Optional[Mover] = None,
    progress_callback: Optional[Callable[[int, int, str], None]] = None
) -> int:
    """
    Apply renames and return the number of files successfully renamed

    See execute_previews for the arguments.
    """
    return execute_previews(previews, settings, mover, progress_callback).success_count
