"""
Text normalization utilities shared by every pipeline stage.

split_lines() is the single entry point that turns raw document text into the
line record consumed downstream. The remaining helpers are small, conservative
string operations (bullets, dashes, header keys, keyword matching) that the
parsers reuse instead of re-implementing their own variants.
"""

import re
from functools import lru_cache
from typing import Callable, Iterable, List, Optional, Pattern, Tuple


# ============================================================================
# Patterns
# ============================================================================

WHITESPACE_RE = re.compile(r"\s+")

# Bullet/achievement line prefix
BULLET_RE = re.compile(r"^[\s•●○▪■◦‣∙·\-–—*>+]+")

# All three dash variants must be recognized: hyphen, en dash, em dash
DASH_CHARS = "-–—"
SPACED_DASH_RE = re.compile(r"\s+[-–—]+\s+")
UNSPACED_WIDE_DASH_RE = re.compile(r"[–—]")

HEADER_TRIM_CHARS = " \t:;,.-–—•●▪*#|_=~"


# ============================================================================
# Line record
# ============================================================================

def collapse_whitespace(text: str) -> str:
    return WHITESPACE_RE.sub(" ", text).strip()


def split_lines(text: str) -> List[str]:
    """
    Split raw text into trimmed, whitespace-collapsed, non-empty lines.

    Examples:
        "  Jane  Doe \\n\\n jane@mail.com" -> ["Jane Doe", "jane@mail.com"]
    """
    out: List[str] = []
    for raw in text.splitlines():
        line = collapse_whitespace(raw)
        if line:
            out.append(line)
    return out


# ============================================================================
# Small string helpers
# ============================================================================

def has_bullet(text: str) -> bool:
    """True for lines starting with a bullet glyph (•, -, *, ...)."""
    return bool(BULLET_RE.match(text))


def strip_bullet(text: str) -> str:
    return BULLET_RE.sub("", text).strip()


def normalize_header_key(text: str) -> str:
    """
    Lower-case a line and trim surrounding punctuation for header comparison.

    Examples:
        "WORK EXPERIENCE:" -> "work experience"
        "• Skills •"       -> "skills"
    """
    return collapse_whitespace(text).strip(HEADER_TRIM_CHARS).lower()


def title_case_each_word(text: str) -> str:
    """
    Convert to title case: lowercase everything then uppercase first letter of each word.
    This works better than str.title() for text with apostrophes.
    """
    words = text.split()
    return " ".join(w[0].upper() + w[1:].lower() if w else "" for w in words)


def clean_fragment(text: str) -> str:
    """Trim separator debris left after cutting a line apart ("BSc (", "- Colombo,")."""
    t = collapse_whitespace(text)
    t = re.sub(r"\(\s*\)", "", t)
    return t.strip(" \t,;:|/(" + DASH_CHARS).strip()


def split_on_dash(text: str,
                  hyphen_right: Optional[Callable[[str], bool]] = None) -> Optional[Tuple[str, str]]:
    """
    Split a line into (left, right) on its first dash.

    A dash surrounded by whitespace wins; otherwise an unspaced en/em dash is used.
    Bare hyphens inside words ("A-Level", "Jean-Luc") are split points only when
    hyphen_right accepts the text after them; the last such hyphen is used.

    Examples:
        "GCE A/L - Royal College" -> ("GCE A/L", "Royal College")
        "GCE A/L – Royal College" -> ("GCE A/L", "Royal College")
        "GCE A/L—Royal College"   -> ("GCE A/L", "Royal College")
        "GCE A-Level"             -> None
    """
    m = SPACED_DASH_RE.search(text) or UNSPACED_WIDE_DASH_RE.search(text)
    if not m:
        return _split_on_hyphen(text, hyphen_right) if hyphen_right else None
    left = clean_fragment(text[:m.start()])
    right = clean_fragment(text[m.end():])
    if not left or not right:
        return None
    return left, right


def _split_on_hyphen(text: str, accept: Callable[[str], bool]) -> Optional[Tuple[str, str]]:
    idx = text.rfind("-")
    while idx > 0:
        left = clean_fragment(text[:idx])
        right = clean_fragment(text[idx + 1:])
        if left and right and accept(right):
            return left, right
        idx = text.rfind("-", 0, idx)
    return None


# ============================================================================
# Keyword matching
# ============================================================================

@lru_cache(maxsize=64)
def term_pattern(terms: Tuple[str, ...]) -> Pattern[str]:
    """
    Compile a case-insensitive, boundary-safe alternation for a vocabulary table.

    Word characters on either side block a match, so "ma" never matches inside
    "management" and "b.sc" still matches "B.Sc." or "(B.Sc)".
    """
    ordered = sorted(set(terms), key=len, reverse=True)
    body = "|".join(re.escape(t) for t in ordered)
    return re.compile(rf"(?<![A-Za-z0-9])(?:{body})(?![A-Za-z0-9])", re.IGNORECASE)


def contains_term(text: str, terms: Iterable[str]) -> bool:
    return bool(term_pattern(tuple(terms)).search(text))


def find_term(text: str, terms: Iterable[str]) -> Optional[str]:
    m = term_pattern(tuple(terms)).search(text)
    return m.group(0) if m else None
