"""
core - Bulk Renamer Core Module

Provides the rename computation engine (filter, name transformer, preview
builder, apply executor) and the file system service it talks to.
"""

from .models import (
    MatchMode,
    ReplaceMode,
    ApplyMode,
    RenameSettings,
    RenamePreview,
    RenamePreviewStatus,
    split_path,
    join_target,
)

from .text_match import (
    matches_filter,
    replace_anywhere,
    replace_prefix,
    replace_suffix,
)

from .pattern import (
    PatternResult,
    compile_pattern,
)

from .transform import transform_name

from .preview import (
    build_preview,
    build_existing_names_index,
    resolve_status,
    summarize_previews,
    PreviewSummary,
)

from .apply import (
    apply_renames,
    execute_previews,
    ApplyResult,
)

from .file_system import (
    get_files,
    directory_exists,
    parse_extension_filter,
    move_file,
)

__all__ = [
    # Data models
    "MatchMode",
    "ReplaceMode",
    "ApplyMode",
    "RenameSettings",
    "RenamePreview",
    "RenamePreviewStatus",
    "PreviewSummary",
    "ApplyResult",
    "split_path",
    "join_target",

    # Text processing
    "matches_filter",
    "replace_anywhere",
    "replace_prefix",
    "replace_suffix",
    "PatternResult",
    "compile_pattern",
    "transform_name",

    # Preview
    "build_preview",
    "build_existing_names_index",
    "resolve_status",
    "summarize_previews",

    # Execution
    "apply_renames",
    "execute_previews",

    # File system
    "get_files",
    "directory_exists",
    "parse_extension_filter",
    "move_file",
]
