"""Branch name construction: slug sanitization and collision handling."""

import itertools
import re
from collections.abc import Iterable, Sequence
from datetime import date

from .constants import DATE_FORMAT, FIRST_SUFFIX, SUFFIX_SEPARATOR

_WHITESPACE_RE = re.compile(r"\s+")
_DISALLOWED_RE = re.compile(r"[^a-z0-9-]")
_DASH_RUN_RE = re.compile(r"-{2,}")


def _today() -> date:
    return date.today()


def today_stamp(today: date | None = None) -> str:
    """Format today's date (or the given one) as YYMMDD."""
    return (today or _today()).strftime(DATE_FORMAT)


def sanitize_slug(text: str) -> str:
    """
    Turn free text into a branch-safe slug.

    The result contains only lowercase letters, digits and single dashes,
    never starts or ends with a dash, and may be empty. Applying it to an
    already sanitized slug returns the slug unchanged.

    Example:
        >>> sanitize_slug("Fix the   Login bug!")
        'fix-the-login-bug'
    """
    slug = text.lower()
    slug = _WHITESPACE_RE.sub("-", slug)
    slug = _DISALLOWED_RE.sub("", slug)
    slug = _DASH_RUN_RE.sub("-", slug)
    return slug.strip("-")


def build_base_name(prefix: str, words: Sequence[str], today: date | None = None) -> str:
    """
    Build ``<prefix>/<slug>`` from command-line words.

    No words, or words that sanitize to nothing, fall back to today's date.

    Args:
        prefix: Branch namespace segment (already resolved)
        words: Description words; joined with spaces before sanitizing
        today: Date to use for the fallback (defaults to the local date)

    Returns:
        Base branch name before collision adjustment
    """
    slug = sanitize_slug(" ".join(words)) if words else ""
    if not slug:
        slug = today_stamp(today)
    return f"{prefix}/{slug}"


def pick_available_name(base: str, existing: Iterable[str]) -> str:
    """
    Return the first of ``base``, ``base_2``, ``base_3``, ... not in ``existing``.

    Probing is sequential from 2, so a gap left by a deleted branch is reused.
    """
    taken = existing if isinstance(existing, (set, frozenset)) else set(existing)
    if base not in taken:
        return base

    for n in itertools.count(FIRST_SUFFIX):
        candidate = f"{base}{SUFFIX_SEPARATOR}{n}"
        if candidate not in taken:
            return candidate
