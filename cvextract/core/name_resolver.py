"""
Candidate name resolution.

A short chain of strategies is tried in order and the first non-empty candidate
wins: the document's first line, the first PERSON entity, then a scan of the
next few lines for something shaped like a name.
"""

import logging
import re
from typing import Callable, List, Optional, Tuple

from cvextract.core import nlp
from cvextract.core.config import get_settings
from cvextract.core.education_parser import names_educational_body
from cvextract.core.section_segmenter import header_kind
from cvextract.core.text_normalization import collapse_whitespace, find_term
from cvextract.core.vocabulary import DEGREE_TERMS, HONORIFICS, NAME_NOISE_WORDS

logger = logging.getLogger(__name__)


FIRST_LINE_RE = re.compile(r"^[A-Za-z\s.'\-]+$")
NAME_LINE_RE = re.compile(r"^[A-Za-z\s.\-]+$")
WORD_RE = re.compile(r"[A-Za-z]+")


def _has_noise_word(line: str) -> bool:
    return any(w.lower() in NAME_NOISE_WORDS for w in WORD_RE.findall(line))


def _is_section_or_education_line(line: str) -> bool:
    # Two-letter degree terms ("MA", "BA") are also surnames
    degree = find_term(line, DEGREE_TERMS)
    return (
        header_kind(line) is not None
        or (degree is not None and len(degree) > 2)
        or names_educational_body(line)
    )


# ===== STRATEGIES =====
# Each takes (lines, text) and returns a candidate or None.

def _from_first_line(lines: List[str], text: str) -> Optional[str]:
    if not lines:
        return None
    settings = get_settings()
    first = collapse_whitespace(lines[0])
    if not (settings.name_min_length < len(first) < settings.name_max_length):
        return None
    if not FIRST_LINE_RE.match(first) or _has_noise_word(first):
        return None
    if _is_section_or_education_line(first):
        return None
    return first


def _from_person_entity(lines: List[str], text: str) -> Optional[str]:
    for candidate in nlp.find_entities(text, {"PERSON"}):
        candidate = collapse_whitespace(candidate)
        if FIRST_LINE_RE.match(candidate):
            return candidate
    return None


def _from_leading_lines(lines: List[str], text: str) -> Optional[str]:
    settings = get_settings()
    for line in lines[1:settings.name_scan_lines]:
        words = line.split()
        if not (settings.name_min_words <= len(words) <= settings.name_max_words):
            continue
        if not NAME_LINE_RE.match(line) or _has_noise_word(line):
            continue
        if _is_section_or_education_line(line):
            continue
        return line
    return None


NAME_STRATEGIES: Tuple[Callable[[List[str], str], Optional[str]], ...] = (
    _from_first_line,
    _from_person_entity,
    _from_leading_lines,
)


# ===== SPLITTING =====

def _is_honorific(token: str) -> bool:
    t = token.lower()
    return t in HONORIFICS or t.rstrip(".") in HONORIFICS


def _strip_honorifics(tokens: List[str]) -> List[str]:
    while len(tokens) > 1 and _is_honorific(tokens[0]):
        tokens = tokens[1:]
    return tokens


def is_spacing_artifact(tokens: List[str]) -> bool:
    """
    Detect PDF letter-spacing damage: many short fragments where words should be.

    Examples:
        ["S", "an", "ge", "eth", "Per", "era"] -> True
        ["Jane", "Doe"] -> False
    """
    settings = get_settings()
    if len(tokens) < settings.spacing_artifact_min_tokens:
        return False
    short = sum(1 for t in tokens if len(t) <= settings.spacing_artifact_token_length)
    return short / len(tokens) >= settings.spacing_artifact_ratio


def split_name(candidate: str) -> Tuple[str, str]:
    """
    Split a name candidate into (first_name, last_name).

    Examples:
        "Jane Mary Doe"        -> ("Jane", "Mary Doe")
        "Dr. Jane Doe"         -> ("Jane", "Doe")
        "S an ge eth Per era"  -> ("Sange", "ethPerera")
        "Sa ngee th Pe rera"   -> ("Sangee", "thPerera")
        "Madonna"              -> ("Madonna", "")
    """
    tokens = _strip_honorifics(collapse_whitespace(candidate or "").split())
    if not tokens:
        return "", ""

    if is_spacing_artifact(tokens):
        mid = len(tokens) // 2
        logger.debug(f"Repairing spaced-out name {tokens!r} at midpoint {mid}")
        return "".join(tokens[:mid]), "".join(tokens[mid:])

    return tokens[0], " ".join(tokens[1:])


def resolve_name(lines: List[str], text: str) -> Tuple[str, str]:
    """Run the strategy chain and split the first candidate found."""
    for strategy in NAME_STRATEGIES:
        candidate = strategy(lines, text)
        if candidate:
            logger.debug(f"Name candidate '{candidate}' from {strategy.__name__}")
            return split_name(candidate)
    return "", ""
