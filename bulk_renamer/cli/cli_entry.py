"""
cli_entry.py - CLI Entry Point

Supports:
- Command-line argument mode (preview / apply)
- Interactive mode (no subcommand)
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from ..core import (
    ApplyMode, MatchMode, ReplaceMode, RenamePreview, RenamePreviewStatus, RenameSettings,
    build_preview, directory_exists, execute_previews, get_files, summarize_previews,
)
from .cli_interactive import interactive_mode

logger = logging.getLogger(__name__)

MATCH_CHOICES = {
    "contains": MatchMode.CONTAINS,
    "starts": MatchMode.STARTS_WITH,
    "ends": MatchMode.ENDS_WITH,
    "exact": MatchMode.EXACT,
}

APPLY_CHOICES = {
    "anywhere": ApplyMode.ANYWHERE,
    "prefix": ApplyMode.PREFIX_ONLY,
    "suffix": ApplyMode.SUFFIX_ONLY,
}

STATUS_LABELS = {
    RenamePreviewStatus.WILL_RENAME: "Will Rename",
    RenamePreviewStatus.NO_CHANGE: "No Change",
    RenamePreviewStatus.COLLISION: "Collision",
}


def setup_logging(verbose: bool = False) -> None:
    """Configure a console log handler unless the root logger already has one"""
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(asctime)s  %(levelname)-5s  %(message)s",
                                               datefmt="%H:%M:%S"))
        root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.INFO)


def _add_rule_arguments(parser: argparse.ArgumentParser) -> None:
    """Arguments shared by preview and apply"""
    parser.add_argument("directory", type=str, help="Root folder")
    parser.add_argument("--ext", "-e", type=str, default="", help="Extension filter (e.g. \"fbx, png\")")
    parser.add_argument("--no-recursive", action="store_true", help="Do not descend into subfolders")

    parser.add_argument("--filter", "-k", type=str, default="", help="Only include stems matching this text")
    parser.add_argument("--match", type=str, default="contains", choices=sorted(MATCH_CHOICES),
                        help="Filter match mode")

    parser.add_argument("--find", "-f", type=str, default="", help="Text or pattern to find")
    parser.add_argument("--replace", "-r", type=str, default="", help="Replacement text")
    parser.add_argument("--regex", action="store_true", help="Treat --find as a regular expression")
    parser.add_argument("--apply-mode", type=str, default="anywhere", choices=sorted(APPLY_CHOICES),
                        help="Where the match may act")
    parser.add_argument("--ignore-case", "-i", action="store_true", help="Case-insensitive filter and find")

    parser.add_argument("--prefix", type=str, default="", help="Text added before every new stem")
    parser.add_argument("--suffix", type=str, default="", help="Text added after every new stem")
    parser.add_argument("--whitespace", type=str, default=None, metavar="REPL",
                        help="Replace runs of whitespace with REPL")

    parser.add_argument("--allow-no-change", action="store_true", help="Do not skip unchanged names")
    parser.add_argument("--allow-collision", action="store_true", help="Do not skip colliding names")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog="bulk-renamer",
        description="Bulk File Renamer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive mode
  bulk-renamer

  # Preview a prefix swap
  bulk-renamer preview ./Assets --find "SM_" --replace "Hero_" --apply-mode prefix

  # Strip LOD suffixes from .fbx files
  bulk-renamer apply ./Assets --ext fbx --regex --find "_LOD\\d+" --apply-mode suffix --yes
"""
    )

    subparsers = parser.add_subparsers(dest="command", help="Subcommands")

    # preview subcommand
    preview_parser = subparsers.add_parser("preview", help="Show what would be renamed")
    _add_rule_arguments(preview_parser)

    # apply subcommand
    apply_parser = subparsers.add_parser("apply", help="Preview, confirm and rename")
    _add_rule_arguments(apply_parser)
    apply_parser.add_argument("--dry-run", "-d", action="store_true", help="Preview only, do not execute")
    apply_parser.add_argument("--yes", "-y", action="store_true", help="Skip confirmation")

    return parser


def settings_from_args(args: argparse.Namespace) -> RenameSettings:
    """Build RenameSettings from parsed arguments"""
    return RenameSettings(
        folder_path=str(Path(args.directory).resolve()),
        include_subfolders=not args.no_recursive,
        extension_filter=args.ext,
        use_filter=bool(args.filter),
        filter_match=MATCH_CHOICES[args.match],
        filter_text=args.filter,
        replace_mode=ReplaceMode.REGEX if args.regex else ReplaceMode.PLAIN_TEXT,
        apply_mode=APPLY_CHOICES[args.apply_mode],
        case_sensitive=not args.ignore_case,
        find_text=args.find,
        replace_text=args.replace,
        add_prefix=args.prefix,
        add_suffix=args.suffix,
        replace_whitespace=args.whitespace is not None,
        whitespace_replacement=args.whitespace or "",
        skip_if_no_change=not args.allow_no_change,
        skip_if_collision=not args.allow_collision,
        preview_only=getattr(args, "dry_run", False),
    )


def print_previews(previews: List[RenamePreview], limit: int = 50) -> None:
    """Print the preview table"""
    print("-" * 80)
    for preview in previews[:limit]:
        status = STATUS_LABELS[preview.status]
        print(f"  {preview.old_name:<30} -> {preview.new_name:<30} [{status}]")
    if len(previews) > limit:
        print(f"  ... and {len(previews) - limit} more files")
    print("-" * 80)


def load_previews(settings: RenameSettings) -> Optional[List[RenamePreview]]:
    """Enumerate files and build previews; None if the folder is missing"""
    if not directory_exists(settings.folder_path):
        print(f"Error: Directory does not exist: {settings.folder_path}")
        return None

    files = get_files(settings.folder_path, settings.include_subfolders, settings.extension_filter)
    logger.debug("Found %d files under %s", len(files), settings.folder_path)
    return build_preview(files, settings)


def cmd_preview(args) -> int:
    """Handle preview command"""
    settings = settings_from_args(args)
    previews = load_previews(settings)
    if previews is None:
        return 1

    if not previews:
        print("No matching files found")
        return 0

    print_previews(previews)
    print(summarize_previews(previews).summary())
    return 0


def cmd_apply(args) -> int:
    """Handle apply command"""
    settings = settings_from_args(args)
    previews = load_previews(settings)
    if previews is None:
        return 1

    if not previews:
        print("No matching files found")
        return 0

    print_previews(previews)
    print(summarize_previews(previews).summary())

    if settings.preview_only:
        print("\n[Preview mode] Will not actually execute")
        return 0

    if not args.yes:
        confirm = input("\nConfirm execution? (y/N): ").strip().lower()
        if confirm != 'y':
            print("Cancelled")
            return 0

    print("\nExecuting...")
    result = execute_previews(previews, settings)
    print(result.summary())
    print(f"Done. {result.success_count} file(s) renamed.")

    return 0 if result.failed_count == 0 else 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        # No subcommand, enter interactive mode
        setup_logging()
        return interactive_mode()

    setup_logging(args.verbose)

    # Handle subcommands
    if args.command == "preview":
        return cmd_preview(args)
    elif args.command == "apply":
        return cmd_apply(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
