"""
cli_interactive.py - Interactive CLI

Provides a menu-style interactive interface
"""

import os
from pathlib import Path
from typing import Dict, List, Optional

from ..core import (
    ApplyMode, MatchMode, ReplaceMode, RenamePreviewStatus, RenameSettings,
    build_preview, execute_previews, get_files, summarize_previews,
)


def clear_screen():
    """Clear screen"""
    os.system('cls' if os.name == 'nt' else 'clear')


def print_header(title: str):
    """Print header"""
    print()
    print("=" * 60)
    print(f"  {title}")
    print("=" * 60)
    print()


def input_directory(prompt: str = "Please enter directory path") -> Optional[Path]:
    """Input and validate directory"""
    while True:
        path_str = input(f"{prompt} (q to return): ").strip()
        if path_str.lower() == 'q':
            return None

        path = Path(path_str).expanduser().resolve()
        if path.is_dir():
            return path
        else:
            print(f"Error: Directory does not exist: {path}")


def input_choice(prompt: str, choices: List[str], default: Optional[str] = None) -> Optional[str]:
    """Input choice"""
    choices_str = "/".join(choices)
    default_str = f" [{default}]" if default else ""

    while True:
        value = input(f"{prompt} ({choices_str}){default_str}: ").strip()
        if not value and default:
            return default
        if value.lower() == 'q':
            return None
        if value in choices:
            return value
        print(f"Invalid choice, please enter: {choices_str}")


def input_bool(prompt: str, default: bool = False) -> bool:
    """Input boolean value"""
    default_str = "Y/n" if default else "y/N"
    value = input(f"{prompt} ({default_str}): ").strip().lower()
    if not value:
        return default
    return value == 'y'


_MATCH_MENU: Dict[str, MatchMode] = {
    "1": MatchMode.CONTAINS,
    "2": MatchMode.STARTS_WITH,
    "3": MatchMode.ENDS_WITH,
    "4": MatchMode.EXACT,
}

_APPLY_MENU: Dict[str, ApplyMode] = {
    "1": ApplyMode.ANYWHERE,
    "2": ApplyMode.PREFIX_ONLY,
    "3": ApplyMode.SUFFIX_ONLY,
}


def input_settings(directory: Path) -> Optional[RenameSettings]:
    """Ask for the rule set; None if the user backs out"""
    extension_filter = input("Extension filter (e.g. fbx, png; leave empty for all): ").strip()
    include_subfolders = input_bool("Include subfolders", default=True)
    case_sensitive = input_bool("Case sensitive", default=True)

    filter_text = input("Filter text (leave empty to include all files): ").strip()
    filter_match = MatchMode.CONTAINS
    if filter_text:
        print("  1. contains  2. starts with  3. ends with  4. exact")
        choice = input_choice("Filter match mode", list(_MATCH_MENU), "1")
        if choice is None:
            return None
        filter_match = _MATCH_MENU[choice]

    use_regex = input_bool("Treat find text as a regular expression", default=False)
    find_text = input("Find: ")
    replace_text = input("Replace with (leave empty to delete): ")

    print("  1. anywhere  2. prefix only  3. suffix only")
    choice = input_choice("Apply mode", list(_APPLY_MENU), "1")
    if choice is None:
        return None

    return RenameSettings(
        folder_path=str(directory),
        include_subfolders=include_subfolders,
        extension_filter=extension_filter,
        use_filter=bool(filter_text),
        filter_match=filter_match,
        filter_text=filter_text,
        replace_mode=ReplaceMode.REGEX if use_regex else ReplaceMode.PLAIN_TEXT,
        apply_mode=_APPLY_MENU[choice],
        case_sensitive=case_sensitive,
        find_text=find_text,
        replace_text=replace_text,
    )


def menu_find_replace():
    """Find and replace rename menu"""
    print_header("Find and Replace Rename")

    directory = input_directory("Please enter root folder")
    if directory is None:
        return

    settings = input_settings(directory)
    if settings is None:
        return

    files = get_files(settings.folder_path, settings.include_subfolders, settings.extension_filter)
    previews = build_preview(files, settings)

    if not previews:
        print("No matching files found")
        input("Press Enter to return...")
        return

    # Display preview
    print(f"\n{len(previews)} file(s) in preview:")
    print("-" * 70)
    for p in previews[:15]:
        mark = " [Collision]" if p.status is RenamePreviewStatus.COLLISION else ""
        print(f"  {p.old_name:<30} -> {p.new_name}{mark}")
    if len(previews) > 15:
        print(f"  ... and {len(previews) - 15} more files")
    print("-" * 70)

    summary = summarize_previews(previews)
    print(summary.summary())

    if summary.will_rename == 0:
        print("No files need renaming")
        input("Press Enter to return...")
        return

    # Confirm execution
    print()
    if not input_bool("Confirm execution", default=False):
        print("Cancelled")
        input("Press Enter to return...")
        return

    print("\nExecuting...")
    result = execute_previews(previews, settings)
    print()
    print(result.summary())

    input("\nPress Enter to return...")


def interactive_mode() -> int:
    """Interactive mode main loop"""
    while True:
        clear_screen()
        print_header("Bulk Renamer")

        print("Please select function:")
        print()
        print("  1. Find and replace rename")
        print()
        print("  q. Exit")
        print()

        choice = input("Please select (1/q): ").strip().lower()

        if choice == 'q':
            print("Goodbye!")
            return 0
        elif choice == '1':
            menu_find_replace()
        else:
            print("Invalid choice")
            input("Press Enter to continue...")
