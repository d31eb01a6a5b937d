"""
pattern.py - Regular Expression Compilation

Compiles a user-typed find pattern into a PatternResult. A malformed pattern
is reported as a failed result instead of an exception, so callers map it to
"keep the original name".
"""

from dataclasses import dataclass
from typing import Optional
import logging
import re

from .models import ApplyMode

logger = logging.getLogger(__name__)

_GLOBAL_FLAGS_RE = re.compile(r"(?:\(\?[aiLmsux]+\))*")


@dataclass(frozen=True)
class PatternResult:
    """Either a compiled matcher or the reason compilation failed"""
    matcher: Optional[re.Pattern] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.matcher is not None

    def substitute(self, text: str, replacement: str) -> str:
        """
        Replace all matches in text

        Returns text unchanged if the pattern failed to compile or the
        replacement template is invalid (e.g. unknown group reference).
        """
        if self.matcher is None:
            return text
        try:
            return self.matcher.sub(replacement, text)
        except re.error as e:
            logger.debug("Substitution failed for %r: %s", self.matcher.pattern, e)
            return text


def anchor_pattern(find_text: str, apply_mode: ApplyMode) -> str:
    """
    Anchor the pattern to the start or end of the stem according to apply_mode

    Leading global flag groups such as (?i) stay in front of the anchor.
    """
    if apply_mode is ApplyMode.ANYWHERE:
        return find_text

    flags = _GLOBAL_FLAGS_RE.match(find_text).group(0)
    body = find_text[len(flags):]
    if apply_mode is ApplyMode.PREFIX_ONLY:
        return f"{flags}^(?:{body})"
    elif apply_mode is ApplyMode.SUFFIX_ONLY:
        return f"{flags}(?:{body})$"
    return find_text


def compile_pattern(find_text: str, apply_mode: ApplyMode, case_sensitive: bool = True) -> PatternResult:
    """
    Compile find text into a matcher

    Args:
        find_text: Pattern as typed by the user (without anchors)
        apply_mode: Anchoring rule
        case_sensitive: Whether case-sensitive (uses re.IGNORECASE otherwise)

    Returns:
        PatternResult with either matcher or error set
    """
    if not find_text:
        return PatternResult(error="Pattern is empty")

    flags = 0 if case_sensitive else re.IGNORECASE
    try:
        # The raw pattern must compile on its own; wrapping could balance stray parentheses
        re.compile(find_text, flags)
        return PatternResult(matcher=re.compile(anchor_pattern(find_text, apply_mode), flags))
    except re.error as e:
        logger.debug("Invalid pattern %r: %s", find_text, e)
        return PatternResult(error=str(e))
