"""
Section segmentation for CV line records.

An explicit finite-state scanner walks the lines once. Its states are the
section kinds; header lines are the only events that change state. A header
must be the whole line (after punctuation trimming), or "<header>: <content>",
so prose such as "I have experience with Python" never opens a section.
"""

import logging
import re
from enum import Enum
from typing import Dict, FrozenSet, List, NamedTuple, Optional, Tuple

from cvextract.core.text_normalization import normalize_header_key
from cvextract.core.vocabulary import (
    EDUCATION_HEADERS,
    OTHER_HEADERS,
    PERSONAL_HEADERS,
    PROJECT_HEADERS,
    SKILLS_HEADERS,
    WORK_HEADERS,
)

logger = logging.getLogger(__name__)


class SectionKind(str, Enum):
    PERSONAL = "personal"
    EDUCATION = "education"
    WORK = "work"
    SKILLS = "skills"
    OTHER = "other"


class Section(NamedTuple):
    kind: SectionKind
    start: int  # first content line (header excluded)
    end: int  # exclusive
    header: str = ""
    inline: str = ""  # content after "Header:" on the header line itself

    @property
    def is_project(self) -> bool:
        return self.kind is SectionKind.WORK and normalize_header_key(self.header) in PROJECT_HEADERS


# Lookup order matters only for keywords shared between sets (none today)
HEADER_SETS: Tuple[Tuple[SectionKind, FrozenSet[str]], ...] = (
    (SectionKind.EDUCATION, EDUCATION_HEADERS),
    (SectionKind.WORK, WORK_HEADERS),
    (SectionKind.SKILLS, SKILLS_HEADERS),
    (SectionKind.PERSONAL, PERSONAL_HEADERS),
    (SectionKind.OTHER, OTHER_HEADERS),
)

INLINE_HEADER_RE = re.compile(r"^\s*([A-Za-z][A-Za-z &/]{1,40}?)\s*:\s*(.+)$")

# ===== TRANSITION TABLE =====
# Event "content" extends the open section; event "header" closes it and opens
# the header's kind at the next line. Event "inline" ("Skills: Python, SQL")
# opens a section only from the unscoped states; inside education, work or
# skills it is a label ("Technologies used: ...") and stays content.

EXTEND = "extend"
OPEN = "open"

INLINE_OPENING_STATES = (SectionKind.OTHER, SectionKind.PERSONAL)

TRANSITIONS: Dict[Tuple[SectionKind, str], str] = {
    (state, event): (
        OPEN if event == "header" or (event == "inline" and state in INLINE_OPENING_STATES) else EXTEND
    )
    for state in SectionKind
    for event in ("header", "inline", "content")
}


def header_kind(line: str, inline: bool = True) -> Optional[SectionKind]:
    """
    Return the section kind a header line opens, or None for content lines.

    With inline=False only whole-line headers count.
    """
    kind, inline_text = _classify_header(line)
    if inline_text and not inline:
        return None
    return kind


def _classify_header(line: str) -> Tuple[Optional[SectionKind], str]:
    key = normalize_header_key(line)
    for kind, keywords in HEADER_SETS:
        if key in keywords:
            return kind, ""

    # "Languages: Python, Java" inside a skills list is a label, not a terminator
    m = INLINE_HEADER_RE.match(line)
    if m:
        label = normalize_header_key(m.group(1))
        for kind, keywords in HEADER_SETS:
            if kind is not SectionKind.OTHER and label in keywords:
                return kind, m.group(2).strip()

    return None, ""


def segment(lines: List[str]) -> List[Section]:
    """
    Tag contiguous line ranges with a section kind.

    The scan starts in the OTHER state. Header lines are excluded from every
    range. Empty ranges are kept only when the header carried inline content.
    A "Label: content" line opens a section only outside education, work and
    skills sections.
    """
    sections: List[Section] = []
    state = SectionKind.OTHER
    start = 0
    header = ""
    inline = ""

    def close(end: int) -> None:
        if end > start or inline:
            sections.append(Section(state, start, end, header, inline))

    for idx, line in enumerate(lines):
        kind, inline_text = _classify_header(line)
        if kind is None:
            event = "content"
        else:
            event = "inline" if inline_text else "header"
        action = TRANSITIONS[(state, event)]

        if action == OPEN:
            close(idx)
            logger.debug(f"SECTION HEADER at line {idx}: '{line}' -> {kind.value}")
            state, start, header, inline = kind, idx + 1, line, inline_text

    close(len(lines))
    return sections


def sections_of(sections: List[Section], kind: SectionKind) -> List[Section]:
    return [s for s in sections if s.kind is kind]


def first_section(sections: List[Section], kind: SectionKind) -> Optional[Section]:
    for s in sections:
        if s.kind is kind:
            return s
    return None


def section_lines(lines: List[str], section: Section) -> List[str]:
    """Content lines of one section; inline header content comes first."""
    out = [section.inline] if section.inline else []
    out.extend(lines[section.start:section.end])
    return out


def lines_of(lines: List[str], sections: List[Section], kind: SectionKind) -> List[str]:
    """All content lines of every section of one kind, in source order."""
    out: List[str] = []
    for s in sections_of(sections, kind):
        out.extend(section_lines(lines, s))
    return out
