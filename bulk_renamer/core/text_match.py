"""
text_match.py - Text Matching Tools

Provides filter matching and plain-text replacement on file stems
"""

import re

from .models import MatchMode


def _fold(text: str, case_sensitive: bool) -> str:
    return text if case_sensitive else text.lower()


def matches_filter(
    name: str,
    match_mode: MatchMode,
    filter_text: str,
    case_sensitive: bool = True
) -> bool:
    """
    Check if a stem passes the filter

    Args:
        name: Stem to check
        match_mode: Filter predicate
        filter_text: Filter text (empty matches everything)
        case_sensitive: Whether case-sensitive

    Returns:
        Whether the stem matches
    """
    if not filter_text:
        return True

    name = _fold(name, case_sensitive)
    filter_text = _fold(filter_text, case_sensitive)

    if match_mode is MatchMode.CONTAINS:
        return filter_text in name
    elif match_mode is MatchMode.STARTS_WITH:
        return name.startswith(filter_text)
    elif match_mode is MatchMode.ENDS_WITH:
        return name.endswith(filter_text)
    elif match_mode is MatchMode.EXACT:
        return name == filter_text
    return True


def replace_anywhere(text: str, old: str, new: str, case_sensitive: bool = True) -> str:
    """
    Replace every non-overlapping occurrence, left to right

    Args:
        text: Original text
        old: String to replace
        new: Replacement string (taken literally)
        case_sensitive: Whether case-sensitive

    Returns:
        Replaced text
    """
    if not old:
        return text

    if case_sensitive:
        return text.replace(old, new)
    else:
        # Case-insensitive replacement
        pattern = re.compile(re.escape(old), re.IGNORECASE)
        return pattern.sub(lambda _m: new, text)


def replace_prefix(text: str, old: str, new: str, case_sensitive: bool = True) -> str:
    """Replace only a leading occurrence of old"""
    if not old or len(old) > len(text):
        return text

    if _fold(text[:len(old)], case_sensitive) == _fold(old, case_sensitive):
        return new + text[len(old):]
    return text


def replace_suffix(text: str, old: str, new: str, case_sensitive: bool = True) -> str:
    """Replace only a trailing occurrence of old"""
    if not old or len(old) > len(text):
        return text

    if _fold(text[-len(old):], case_sensitive) == _fold(old, case_sensitive):
        return text[:-len(old)] + new
    return text
