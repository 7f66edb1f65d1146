"""
Education and qualification parsing.

Education-section lines are walked once by a small state machine holding the
entry currently being built. Each line is classified, in order, as:

  1. qualification line (G.C.E. O/L, A/L, GCSE, ...) -> opens a QualificationEntry
  2. degree line (BSc, Master of ..., HND, ...)       -> opens an EducationEntry
  3. institution-only line                            -> fills the open entry
  4. GPA line / date-only line                        -> back-fills the open entry
  5. anything else                                    -> noise, ignored

When the section pass finds no degree at all, degree lines are searched for in
the whole document instead.
"""

import logging
import re
from typing import List, NamedTuple, Optional, Union

from cvextract.core.config import get_settings
from cvextract.core.date_parsing import (
    YEAR_RE,
    extract_year,
    parse_date_range,
    strip_dates,
)
from cvextract.core.schemas import EducationEntry, QualificationEntry
from cvextract.core.section_segmenter import (
    Section,
    SectionKind,
    header_kind,
    section_lines,
    sections_of,
)
from cvextract.core.text_normalization import (
    clean_fragment,
    contains_term,
    has_bullet,
    split_on_dash,
    strip_bullet,
)
from cvextract.core.vocabulary import (
    COMPANY_SUFFIXES,
    DEGREE_TERMS,
    EDUCATION_LEVELS,
    IMPERATIVE_VERBS,
    INSTITUTION_TERMS,
    JOB_TITLE_TERMS,
    QUALIFICATION_TERMS,
    SECONDARY_SCHOOL_TERMS,
)

logger = logging.getLogger(__name__)

Entry = Union[EducationEntry, QualificationEntry]


class EducationResult(NamedTuple):
    education: List[EducationEntry]
    qualifications: List[QualificationEntry]


# ===== PATTERNS =====

GPA_RE = re.compile(
    r"\b(?:c?gpa)\b\s*[:\-]?\s*(\d+(?:\.\d+)?(?:\s*/\s*\d+(?:\.\d+)?)?)",
    re.IGNORECASE,
)

# Parts of a degree line that may carry the institution
DEGREE_PART_SPLIT_RE = re.compile(r"\s+[-–—]\s+|\s*[–—]\s*|\s*\|\s*|\s*,\s*")

PROPER_NAME_RE = re.compile(r"^[A-Z][a-z]+ [A-Z][a-z]+$")

# Words that may sit next to a date without making the line anything but a date
DATE_FILLER_RE = re.compile(r"\b(?:expected|graduated|graduation|class of|completed)\b|[()\[\]]", re.IGNORECASE)


# ===== CLASSIFIERS =====

def _first_word(text: str) -> str:
    words = strip_bullet(text).split()
    return words[0].lower().strip(",.:;") if words else ""


def starts_with_imperative(text: str) -> bool:
    return _first_word(text) in IMPERATIVE_VERBS


def is_qualification_line(line: str) -> bool:
    """
    Pre-degree certificate line.

    Examples:
        "G.C.E. Advanced Level - Royal College" -> True
        "GCSE Mathematics (2015)"               -> True
        "BSc in Computer Science"               -> False
    """
    return contains_term(line, QUALIFICATION_TERMS)


def is_degree_line(line: str) -> bool:
    """
    Degree-vocabulary line that is not a detail, a responsibility bullet or prose.

    Examples:
        "BSc (Hons) in Computer Science (2016 - 2020)" -> True
        "Major: Software Engineering"                  -> False
        "Developed a certificate management portal"   -> False
    """
    if len(line) > get_settings().education_line_max_length:
        return False
    if "major:" in line.lower():
        return False
    if starts_with_imperative(line):
        return False
    return contains_term(line, DEGREE_TERMS)


def names_educational_body(line: str) -> bool:
    """Institution vocabulary, secondary schools included."""
    return contains_term(line, INSTITUTION_TERMS) or contains_term(line, SECONDARY_SCHOOL_TERMS)


def _is_leakage(line: str) -> bool:
    return (
        contains_term(line, COMPANY_SUFFIXES)
        or contains_term(line, JOB_TITLE_TERMS)
        or starts_with_imperative(line)
    )


def is_institution_line(line: str) -> bool:
    """
    Line naming a degree-granting institution and nothing else of interest.

    Examples:
        "University of Colombo"                 -> True
        "Royal College High School"             -> False (secondary school)
        "Software Engineer at Institute of Tech" -> False (job-title leakage)
    """
    if not contains_term(line, INSTITUTION_TERMS):
        return False
    if contains_term(line, SECONDARY_SCHOOL_TERMS):
        return False
    if is_degree_line(line) or is_qualification_line(line):
        return False
    return not _is_leakage(line)


def noise_reason(line: str) -> Optional[str]:
    """
    Why a line that fits no other class is ignored, or None when it fits none
    of the noise rules either (it is ignored all the same).
    """
    if has_bullet(line) and not is_degree_line(line):
        return "bullet"
    if "|" in line:
        return "pipe separator"
    if contains_term(line, COMPANY_SUFFIXES):
        return "company suffix"
    if contains_term(line, JOB_TITLE_TERMS):
        return "job title"
    if starts_with_imperative(line):
        return "imperative verb"
    if PROPER_NAME_RE.match(line):
        return "proper name"
    if len(line) > get_settings().education_line_max_length:
        return "too long"
    return None


def is_date_only_line(line: str) -> bool:
    """
    Examples:
        "2016 - 2020"          -> True
        "(Expected June 2025)" -> True
        "Colombo, 2019"        -> False
    """
    rng = parse_date_range(line)
    if rng.start is None:
        return False
    rest = DATE_FILLER_RE.sub(" ", strip_dates(line, rng))
    return not clean_fragment(rest)


# ===== ENTRY CONSTRUCTION =====

def _take_gpa(text: str) -> tuple:
    m = GPA_RE.search(text)
    if not m:
        return text, ""
    gpa = re.sub(r"\s+", "", m.group(1))
    return text[:m.start()] + " " + text[m.end():], gpa


def _take_year(text: str) -> tuple:
    if not YEAR_RE.search(text):
        return text, ""
    rng = parse_date_range(text)
    return strip_dates(text, rng), extract_year(text)


def _tidy(text: str) -> str:
    """Drop empty brackets and separator debris left after cutting dates/GPA out."""
    text = clean_fragment(re.sub(r"\(\s*\)|\[\s*\]", "", text))
    if text.count(")") > text.count("("):
        text = text.rstrip(") ").strip()
    return text


def _split_institution(text: str) -> tuple:
    """
    Separate an institution named on the degree line itself.

    Examples:
        "BSc in Computing, University of Colombo, Sri Lanka"
            -> ("BSc in Computing", "University of Colombo, Sri Lanka")
        "University of Moratuwa | BSc Engineering"
            -> ("BSc Engineering", "University of Moratuwa")
    """
    parts = [p for p in (clean_fragment(x) for x in DEGREE_PART_SPLIT_RE.split(text)) if p]
    if len(parts) < 2:
        return text, ""

    for idx, part in enumerate(parts):
        if names_educational_body(part) and not contains_term(part, DEGREE_TERMS):
            if idx == 0:
                return ", ".join(parts[1:]), part
            return ", ".join(parts[:idx]), ", ".join(parts[idx:])
    return text, ""


def start_degree_entry(line: str) -> EducationEntry:
    """
    Build an EducationEntry from a degree line.

    Examples:
        "BSc (Hons) in Computer Science (2016 - 2020)"
            -> degree "BSc (Hons) in Computer Science", graduation_year "2020"
        "MSc Data Science - University of Leeds | GPA: 3.8/4.0"
            -> degree "MSc Data Science", institution "University of Leeds", gpa "3.8/4.0"
    """
    text = strip_bullet(line)
    text, gpa = _take_gpa(text)
    text, year = _take_year(text)
    degree, institution = _split_institution(_tidy(text))
    return EducationEntry(
        degree=_tidy(degree),
        institution=_tidy(institution),
        graduation_year=year,
        gpa=gpa,
    )


def start_qualification_entry(line: str) -> QualificationEntry:
    """
    Build a QualificationEntry, splitting "<qualification> - <institution>".

    Examples:
        "G.C.E. A/L – Royal College (2015)"
            -> degree "G.C.E. A/L", institution "Royal College", graduation_year "2015"
        "GCE A-Level" -> degree "GCE A-Level", institution ""
    """
    text, year = _take_year(strip_bullet(line))
    text = _tidy(text)
    split = split_on_dash(text, hyphen_right=names_educational_body)
    degree, institution = split if split else (text, "")
    return QualificationEntry(
        degree=_tidy(degree),
        institution=_tidy(institution),
        graduation_year=year,
    )


def _institution_from_line(line: str) -> tuple:
    """(name, year) of an institution-only line, dates removed."""
    text, year = _take_year(strip_bullet(line))
    return _tidy(text), year


# ===== STATE MACHINE =====

class _EducationBuilder:
    """Holds the entry being built while one section's lines are walked."""

    def __init__(self):
        self.education: List[EducationEntry] = []
        self.qualifications: List[QualificationEntry] = []
        self.current: Optional[Entry] = None
        self.pending_institution = ""
        self.just_opened_qualification = False

    def flush(self) -> None:
        entry = self.current
        self.current = None
        if entry is None or not entry.degree:
            return
        if isinstance(entry, QualificationEntry):
            self.qualifications.append(entry)
        else:
            self.education.append(entry)

    def feed(self, line: str) -> None:
        opened_qualification = self.just_opened_qualification
        self.just_opened_qualification = False

        if is_qualification_line(line):
            self.flush()
            self.current = start_qualification_entry(line)
            self.just_opened_qualification = not self.current.institution
            logger.debug(f"QUALIFICATION: '{line}' -> {self.current.degree!r}")
            return

        if is_degree_line(line):
            self.flush()
            self.current = start_degree_entry(line)
            if not self.current.institution and self.pending_institution:
                self.current.institution = self.pending_institution
                self.pending_institution = ""
            logger.debug(f"DEGREE: '{line}' -> {self.current.degree!r}")
            return

        if opened_qualification and names_educational_body(line):
            self._attach_institution(line)
            return

        if is_institution_line(line):
            self._attach_institution(line)
            return

        gpa = GPA_RE.search(line)
        if gpa and self.current is not None:
            if not self.current.gpa:
                self.current.gpa = re.sub(r"\s+", "", gpa.group(1))
            return

        if is_date_only_line(line):
            if self.current is not None and not self.current.graduation_year:
                self.current.graduation_year = extract_year(line)
            return

        logger.debug(f"EDUCATION NOISE: '{line}' ({noise_reason(line) or 'unclassified'})")

    def _attach_institution(self, line: str) -> None:
        name, year = _institution_from_line(line)
        if not name:
            return
        if self.current is not None and not self.current.institution:
            self.current.institution = name
            if year and not self.current.graduation_year:
                self.current.graduation_year = year
            logger.debug(f"INSTITUTION: '{name}' -> {self.current.degree!r}")
        else:
            # Institution printed above its degree
            self.pending_institution = name
            logger.debug(f"INSTITUTION PENDING: '{name}'")


def derive_education_level(education: List[EducationEntry]) -> str:
    """
    Level of the FIRST degree only.

    Examples:
        [BSc ..., MSc ...] -> "Bachelors"
        [Higher National Diploma in Computing] -> "Diploma"
    """
    if not education:
        return ""
    degree = education[0].degree
    for level, keywords in EDUCATION_LEVELS:
        if contains_term(degree, keywords):
            return level
    return ""


# ===== FALLBACK =====

def _first_closed_range_year(lines: List[str]) -> str:
    for line in lines:
        rng = parse_date_range(line)
        if rng.explicit_range and not rng.open_ended and rng.end is not None:
            return str(rng.end.year)
    return ""


def _nearby_range_year(lines: List[str], idx: int) -> str:
    for line in lines[idx + 1:idx + 3]:
        rng = parse_date_range(line)
        if rng.explicit_range:
            return extract_year(line)
    return ""


def fallback_education(lines: List[str]) -> List[EducationEntry]:
    """
    Degree lines found anywhere in the document, with institution and year
    taken from neighbouring lines.
    """
    found: List[EducationEntry] = []
    for idx, line in enumerate(lines):
        if header_kind(line) is not None or is_qualification_line(line) or not is_degree_line(line):
            continue
        entry = start_degree_entry(line)
        if not entry.degree:
            continue

        if not entry.institution:
            neighbours = lines[idx + 1:idx + 3] + lines[max(idx - 1, 0):idx]
            for other in neighbours:
                if is_institution_line(other):
                    name, year = _institution_from_line(other)
                    entry.institution = name
                    entry.graduation_year = entry.graduation_year or year
                    break

        if not entry.graduation_year:
            entry.graduation_year = _nearby_range_year(lines, idx) or _first_closed_range_year(lines)

        logger.debug(f"Fallback education entry: {entry.degree!r} @ {entry.institution!r}")
        found.append(entry)
    return found


def parse_education(lines: List[str], sections: List[Section]) -> EducationResult:
    """
    Parse every Education section into degree entries and qualification entries.

    Examples:
        ["BSc in Computer Science", "University of Colombo",
         "MSc in Data Science", "University of Moratuwa"]
            -> 2 entries, institutions "University of Colombo" / "University of Moratuwa"
    """
    builder = _EducationBuilder()
    for section in sections_of(sections, SectionKind.EDUCATION):
        for line in section_lines(lines, section):
            builder.feed(line)
        builder.flush()
        builder.pending_institution = ""

    education = builder.education
    if not education:
        logger.debug("No degree in education sections, scanning whole document")
        education = fallback_education(lines)

    return EducationResult(education=education, qualifications=builder.qualifications)
