"""
Work experience and project parsing.

Three layouts are recognized, tried in this order at every line:

  Block layout:
      ABC Technologies (Pvt) Ltd - Colombo
      Worked as Software Engineer (Jan 2020 - Present)

  "At" layout:
      Senior Developer at Acme (2020 - Present)

  Single-line layout:
      Software Engineer | Acme  June 2021 – March 2023
      Acme Corporation            <- company on the next line (work sections only)

Lines after an entry that start no new entry become its description.
"""

import logging
import re
from datetime import date
from typing import List, Optional, Tuple

from cvextract.core.config import get_settings
from cvextract.core.date_parsing import DateRange, parse_date_range
from cvextract.core.education_parser import is_degree_line, is_qualification_line
from cvextract.core.schemas import WorkExperienceEntry
from cvextract.core.section_segmenter import Section, SectionKind, header_kind, section_lines, sections_of
from cvextract.core.text_normalization import (
    clean_fragment,
    contains_term,
    has_bullet,
    strip_bullet,
)
from cvextract.core.vocabulary import COMPANY_SUFFIXES, IMPERATIVE_VERBS

logger = logging.getLogger(__name__)


WORKED_AS_RE = re.compile(r"^worked\s+as\s+(?:an?\s+)?(?P<position>[^(]+?)\s*(?:\((?P<dates>[^)]*)\))?\s*$", re.IGNORECASE)
PAREN_DATES_RE = re.compile(r"\(([^)]*\d{4}[^)]*)\)")
AT_LAYOUT_RE = re.compile(r"^(?P<position>.+?)\s+at\s+(?P<company>.+?)\s*\((?P<dates>[^)]*\d{4}[^)]*)\)\s*$", re.IGNORECASE)
TRAILING_LOCATION_RE = re.compile(r"\s+[-–—]\s+[A-Z][A-Za-z .'\-]*$")

# Left out of the scan when there are no work sections
NON_WORK_KINDS = (SectionKind.EDUCATION, SectionKind.SKILLS, SectionKind.PERSONAL)


def _starts_with_imperative(text: str) -> bool:
    words = strip_bullet(text).split()
    return bool(words) and words[0].lower().strip(",.:;") in IMPERATIVE_VERBS


def is_company_line(line: str) -> bool:
    """
    Examples:
        "ABC Technologies (Pvt) Ltd"     -> True
        "Acme Solutions - Colombo"       -> True (trailing location)
        "• Built REST APIs with FastAPI" -> False
    """
    if has_bullet(line) or len(line) >= get_settings().company_line_max_length:
        return False
    return contains_term(line, COMPANY_SUFFIXES) or bool(TRAILING_LOCATION_RE.search(line))


def _entry_from_range(position: str, company: str, rng: DateRange) -> WorkExperienceEntry:
    return WorkExperienceEntry(
        company=clean_fragment(company),
        position=clean_fragment(position),
        start_date=rng.start_iso,
        end_date=rng.end_iso,
        current=rng.open_ended,
    )


# ===== STRATEGIES =====
# Each returns (entry, lines consumed) or None.

def _match_block(window: List[str], idx: int, today: Optional[date]) -> Optional[Tuple[WorkExperienceEntry, int]]:
    if idx + 1 >= len(window) or not is_company_line(window[idx]):
        return None
    m = WORKED_AS_RE.match(strip_bullet(window[idx + 1]))
    if not m:
        return None

    consumed = 2
    dates = m.group("dates") or ""
    if not dates and idx + 2 < len(window):
        nxt = PAREN_DATES_RE.search(window[idx + 2])
        if nxt and not clean_fragment(PAREN_DATES_RE.sub("", window[idx + 2])):
            dates = nxt.group(1)
            consumed = 3

    company = TRAILING_LOCATION_RE.sub("", window[idx])
    entry = _entry_from_range(m.group("position"), company, parse_date_range(dates, today))
    return entry, consumed


def _match_at_layout(window: List[str], idx: int, today: Optional[date]) -> Optional[Tuple[WorkExperienceEntry, int]]:
    m = AT_LAYOUT_RE.match(strip_bullet(window[idx]))
    if not m:
        return None
    rng = parse_date_range(m.group("dates"), today)
    if rng.start is None:
        return None
    return _entry_from_range(m.group("position"), m.group("company"), rng), 1


def _split_title(title: str) -> Tuple[str, str]:
    """'Position | Company' -> (position, company); otherwise (title, '')."""
    if "|" in title:
        position, company = title.split("|", 1)
        return clean_fragment(position), clean_fragment(company)
    return title, ""


def _match_single_line(window: List[str], idx: int, today: Optional[date],
                       is_project: bool) -> Optional[Tuple[WorkExperienceEntry, int]]:
    line = window[idx]
    if has_bullet(line) or _starts_with_imperative(line):
        return None
    rng = parse_date_range(line, today)
    if rng.start is None or not rng.explicit_range:
        return None

    if is_degree_line(line) or is_qualification_line(line):
        return None
    title = clean_fragment(line[:rng.start.start])
    if not title:
        return None
    position, company = _split_title(title)

    consumed = 1
    if not is_project and not company and idx + 1 < len(window):
        nxt = window[idx + 1]
        if (not has_bullet(nxt) and len(nxt) < get_settings().company_line_max_length
                and parse_date_range(nxt).start is None and not _starts_with_imperative(nxt)):
            company = nxt
            consumed = 2

    return _entry_from_range(position, company, rng), consumed


def _scan_window(window: List[str], is_project: bool, today: Optional[date]) -> List[WorkExperienceEntry]:
    entries: List[WorkExperienceEntry] = []
    description: List[str] = []

    def close_description() -> None:
        if entries and description:
            entries[-1].description = "\n".join(description)
        description.clear()

    idx = 0
    while idx < len(window):
        line = window[idx]
        kind = header_kind(line, inline=False)
        if kind is not None and kind is not SectionKind.WORK:
            break

        match = (
            _match_block(window, idx, today)
            or _match_at_layout(window, idx, today)
            or _match_single_line(window, idx, today, is_project)
        )
        if match:
            close_description()
            entry, consumed = match
            logger.debug(f"EXPERIENCE: '{line}' -> position={entry.position!r}, company={entry.company!r}")
            entries.append(entry)
            idx += consumed
            continue

        if entries:
            text = strip_bullet(line)
            if text:
                description.append(text)
        idx += 1

    close_description()
    return entries


def _fallback_window(lines: List[str], sections: List[Section]) -> List[str]:
    excluded = set()
    for s in sections:
        if s.kind in NON_WORK_KINDS:
            excluded.update(range(s.start, s.end))
    return [
        line for i, line in enumerate(lines)
        if i not in excluded and header_kind(line) is None
    ]


def parse_experience(lines: List[str], sections: List[Section],
                     today: Optional[date] = None) -> List[WorkExperienceEntry]:
    """
    Parse work and project entries.

    Entries missing a position or a start date are dropped.

    Examples:
        ["Senior Developer at Acme (2020 - Present)"]
            -> [position "Senior Developer", company "Acme",
                start_date "2020-01-01", end_date <today>, current True]
    """
    work_sections = sections_of(sections, SectionKind.WORK)
    if work_sections:
        windows = [(section_lines(lines, s), s.is_project) for s in work_sections]
    else:
        logger.debug("No work sections, scanning lines outside education/skills/personal")
        windows = [(_fallback_window(lines, sections), False)]

    entries: List[WorkExperienceEntry] = []
    for window, is_project in windows:
        entries.extend(_scan_window(window, is_project, today))

    return [e for e in entries if e.position and e.start_date]
