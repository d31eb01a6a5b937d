"""
transform.py - Name Transformer

Pure function from (old stem, settings) to new stem
"""

import re

from .models import RenameSettings, ReplaceMode, ApplyMode
from .pattern import compile_pattern
from .text_match import replace_anywhere, replace_prefix, replace_suffix

_WHITESPACE_RE = re.compile(r"\s+")


def _replace_plain(old_name: str, settings: RenameSettings) -> str:
    find, new, cs = settings.find_text, settings.replace_text, settings.case_sensitive

    if settings.apply_mode is ApplyMode.ANYWHERE:
        return replace_anywhere(old_name, find, new, cs)
    elif settings.apply_mode is ApplyMode.PREFIX_ONLY:
        return replace_prefix(old_name, find, new, cs)
    elif settings.apply_mode is ApplyMode.SUFFIX_ONLY:
        return replace_suffix(old_name, find, new, cs)
    return old_name


def _replace_regex(old_name: str, settings: RenameSettings) -> str:
    if not settings.find_text:
        return old_name

    result = compile_pattern(settings.find_text, settings.apply_mode, settings.case_sensitive)
    return result.substitute(old_name, settings.replace_text)


def _decorate(name: str, settings: RenameSettings) -> str:
    if settings.replace_whitespace:
        name = _WHITESPACE_RE.sub(lambda _m: settings.whitespace_replacement, name)
    return f"{settings.add_prefix}{name}{settings.add_suffix}"


def transform_name(old_name: str, settings: RenameSettings) -> str:
    """
    Compute the new stem for a file

    Args:
        old_name: Stem before renaming
        settings: Rename settings

    Returns:
        New stem (the original if nothing applies or the pattern is invalid)
    """
    if not old_name:
        return old_name

    if settings.replace_mode is ReplaceMode.REGEX:
        new_name = _replace_regex(old_name, settings)
    elif settings.replace_mode is ReplaceMode.PLAIN_TEXT:
        new_name = _replace_plain(old_name, settings)
    else:
        new_name = old_name

    return _decorate(new_name, settings)
