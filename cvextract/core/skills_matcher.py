"""
Restricted-vocabulary skill matching.

Only Skills-section lines (and "Skills: ..." inline header text) are read, so a
language mentioned in a job description never becomes a skill. Two passes are
merged: a boundary-safe regex per vocabulary entry, and an exact lookup of each
comma/pipe/bullet separated token.
"""

import logging
import re
from functools import lru_cache
from typing import Dict, List, Pattern, Sequence, Tuple

from cvextract.core.section_segmenter import Section, SectionKind, lines_of
from cvextract.core.text_normalization import title_case_each_word
from cvextract.core.vocabulary import SKILL_VOCABULARY

logger = logging.getLogger(__name__)


TOKEN_SPLIT_RE = re.compile(r"[,;|•●▪\n\t]|\s[-–—]\s|[–—]")
LABEL_PREFIX_RE = re.compile(r"^[A-Za-z &/]{1,30}:\s*")


@lru_cache(maxsize=8)
def _compiled(vocabulary: Tuple[str, ...]) -> Tuple[Tuple[str, Pattern[str]], ...]:
    # '+', '#' and '.' may sit inside a name (C++, C#, Node.js) but letters and
    # digits on either side mean a different word ("Java" inside "JavaScript")
    return tuple(
        (skill, re.compile(rf"(?<![A-Za-z0-9+#]){re.escape(skill)}(?![A-Za-z0-9+#])", re.IGNORECASE))
        for skill in vocabulary
    )


def display_form(skill: str) -> str:
    """
    Curated casing wins; all-lower-case entries are title-cased per word.

    Examples:
        "JavaScript"      -> "JavaScript"
        "problem solving" -> "Problem Solving"
    """
    return skill if any(c.isupper() for c in skill) else title_case_each_word(skill)


def tokenize(text: str) -> List[str]:
    """
    Examples:
        "Languages: Python, C++ | React" -> ["Python", "C++", "React"]
    """
    tokens = []
    for raw in TOKEN_SPLIT_RE.split(text):
        token = LABEL_PREFIX_RE.sub("", raw.strip()).strip(" .")
        if token:
            tokens.append(token)
    return tokens


def match_skills(lines: List[str], sections: List[Section],
                 vocabulary: Sequence[str] = SKILL_VOCABULARY) -> List[str]:
    window = "\n".join(lines_of(lines, sections, SectionKind.SKILLS))
    if not window:
        return []

    vocabulary = tuple(vocabulary)
    found = set()

    for skill, pattern in _compiled(vocabulary):
        if pattern.search(window):
            found.add(skill)

    by_lower: Dict[str, str] = {s.lower(): s for s in vocabulary}
    for token in tokenize(window):
        skill = by_lower.get(token.lower())
        if skill and skill not in found:
            logger.debug(f"Skill '{skill}' matched by token pass")
            found.add(skill)

    return [display_form(s) for s in vocabulary if s in found]
