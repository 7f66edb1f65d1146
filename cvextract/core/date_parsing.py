"""
Natural-language date and date-range parsing for CV lines.

Date tokens are located with a regex (month-name + year, MM/YYYY, bare year) and
month-name tokens are resolved with dateparser. A range is two tokens joined by
a dash variant or "to"/"until"; open-ended ranges ("2020 - Present") resolve to
today's date.
"""

import logging
import re
from datetime import date
from typing import List, NamedTuple, Optional

import dateparser

from cvextract.core.vocabulary import OPEN_ENDED_TERMS
from cvextract.core.text_normalization import term_pattern

logger = logging.getLogger(__name__)


MONTH_NAME = (
    r"(?:jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?|aug(?:ust)?"
    r"|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)"
)
MONTH_NAME_RE = re.compile(rf"\b{MONTH_NAME}\b", re.IGNORECASE)

YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")

DATE_TOKEN_RE = re.compile(
    rf"\b{MONTH_NAME}\.?,?\s*(?:19|20)\d{{2}}\b"  # September 2023, Sept. 2023, Jan,2020
    r"|\b(?:0?[1-9]|1[0-2])\s*[/.]\s*(?:19|20)\d{2}\b"  # 09/2023
    r"|\b(?:19|20)\d{2}\b",  # 2023
    re.IGNORECASE,
)

# What may sit between two tokens of an explicit range
RANGE_JOINER_RE = re.compile(r"^\s*(?:[-–—~]+|to|until|till)\s*$", re.IGNORECASE)

NUMERIC_MONTH_RE = re.compile(r"^(\d{1,2})\s*[/.]\s*(\d{4})$")

DATEPARSER_SETTINGS = {
    "PREFER_DAY_OF_MONTH": "first",
    "REQUIRE_PARTS": ["month", "year"],
}


class DateMention(NamedTuple):
    text: str
    start: int
    end: int
    value: date
    has_month: bool

    def iso(self) -> str:
        return self.value.isoformat()


class DateRange(NamedTuple):
    start: Optional[DateMention]
    end: Optional[date]
    explicit_range: bool  # two dates joined by a dash/"to"
    open_ended: bool  # end resolved from "present"/"current"/...
    span: Optional[tuple]  # (start, end) character span of the date text

    @property
    def start_iso(self) -> str:
        return self.start.iso() if self.start else ""

    @property
    def end_iso(self) -> str:
        return self.end.isoformat() if self.end else ""


def _parse_token(token: str) -> Optional[date]:
    t = token.strip()
    m = NUMERIC_MONTH_RE.match(t)
    if m:
        return date(int(m.group(2)), int(m.group(1)), 1)

    if MONTH_NAME_RE.search(t):
        parsed = dateparser.parse(t, languages=["en"], settings=DATEPARSER_SETTINGS)
        if parsed is not None:
            return date(parsed.year, parsed.month, 1)
        logger.debug(f"dateparser could not resolve '{t}', keeping year only")

    y = YEAR_RE.search(t)
    if y:
        return date(int(y.group(0)), 1, 1)
    return None


def find_dates(text: str) -> List[DateMention]:
    """Every recognizable date token in text, left to right."""
    out: List[DateMention] = []
    for m in DATE_TOKEN_RE.finditer(text or ""):
        value = _parse_token(m.group(0))
        if value is None:
            continue
        out.append(DateMention(
            text=m.group(0),
            start=m.start(),
            end=m.end(),
            value=value,
            has_month=not YEAR_RE.fullmatch(m.group(0).strip()),
        ))
    return out


def has_open_ended_term(text: str) -> bool:
    return bool(term_pattern(OPEN_ENDED_TERMS).search(text or ""))


def parse_date_range(text: str, today: Optional[date] = None) -> DateRange:
    """
    Parse the first date range in text.

    start = first recognized date. end = explicit range end if present, else a
    second recognized date, else today when an open-ended term is present.

    Examples (today = 2026-10-17):
        "september 2023 – june 2024" -> 2023-09-01 .. 2024-06-01
        "2020 - Present"             -> 2020-01-01 .. 2026-10-17 (open_ended)
        "june 2021 - 2025 (expected)"-> 2021-06-01 .. 2025-01-01
    """
    mentions = find_dates(text)
    if not mentions:
        return DateRange(None, None, False, False, None)

    first = mentions[0]
    if len(mentions) >= 2:
        second = mentions[1]
        joiner = text[first.end:second.start]
        explicit = bool(RANGE_JOINER_RE.match(joiner))
        return DateRange(first, second.value, explicit, False, (first.start, second.end))

    if has_open_ended_term(text[first.end:]):
        today = today or date.today()
        open_match = term_pattern(OPEN_ENDED_TERMS).search(text, first.end)
        return DateRange(first, today, True, True, (first.start, open_match.end()))

    return DateRange(first, None, False, False, (first.start, first.end))


def extract_year(text: str) -> str:
    """
    Graduation-style year for a line: end year of an explicit range, else the
    first date's year. Empty when the line holds no date.
    """
    rng = parse_date_range(text)
    if rng.start is None:
        return ""
    if rng.explicit_range and rng.end is not None and not rng.open_ended:
        return str(rng.end.year)
    return str(rng.start.value.year)


def strip_dates(text: str, rng: DateRange) -> str:
    """Remove the date text matched by rng from text."""
    if not rng.span:
        return text
    s, e = rng.span
    return text[:s] + " " + text[e:]
