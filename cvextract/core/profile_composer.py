"""
CV text -> CandidateProfile.

extract() is the single entry point of the pipeline. It never raises: every
extractor runs behind a boundary that logs the failure and substitutes that
field's empty value, so one broken heuristic costs one field, not the profile.
"""

import logging
from datetime import date
from pathlib import Path
from typing import Any, Callable, List, Optional, Union

from cvextract.core.contact_extractor import extract_email, extract_phone
from cvextract.core.document_reader import DocumentError, read_document, read_document_bytes
from cvextract.core.education_parser import EducationResult, derive_education_level, parse_education
from cvextract.core.experience_parser import parse_experience
from cvextract.core.link_extractor import extract_links
from cvextract.core.location_resolver import Location, resolve_location
from cvextract.core.name_resolver import resolve_name
from cvextract.core.schemas import (
    CandidateProfile,
    EducationEntry,
    ExtractionResult,
    LinkSet,
    PersonalInfo,
    QualificationEntry,
    WorkExperienceEntry,
)
from cvextract.core.section_segmenter import segment
from cvextract.core.skills_matcher import match_skills
from cvextract.core.text_normalization import split_lines

logger = logging.getLogger(__name__)


EMPTY_TEXT_MESSAGE = "No text content found in CV"
SUCCESS_MESSAGE = "CV parsed successfully"


def _safe(label: str, func: Callable[..., Any], default: Any, *args, **kwargs) -> Any:
    try:
        return func(*args, **kwargs)
    except Exception:
        logger.warning(f"{label} extraction failed, using empty value", exc_info=True)
        return default


# ===== SANITIZING =====

def _clean_strings(values: List[Any]) -> List[str]:
    out: List[str] = []
    for v in values or []:
        if isinstance(v, str) and v.strip() and v.strip() not in out:
            out.append(v.strip())
    return out


def _clean_education(entries: List[Any], model: type) -> List[Any]:
    return [e for e in entries or [] if isinstance(e, model) and e.degree.strip()]


def _clean_work(entries: List[Any]) -> List[WorkExperienceEntry]:
    return [
        e for e in entries or []
        if isinstance(e, WorkExperienceEntry) and e.position.strip() and e.start_date.strip()
    ]


def _str_or_empty(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


# ===== PIPELINE =====

def _build_profile(text: str, today: Optional[date]) -> CandidateProfile:
    lines = split_lines(text)
    sections = _safe("section", segment, [], lines)

    first_name, last_name = _safe("name", resolve_name, ("", ""), lines, text)
    email = _safe("email", extract_email, "", text, lines)
    phone = _safe("phone", extract_phone, "", text)

    edu = _safe("education", parse_education, EducationResult([], []), lines, sections)
    education = _clean_education(edu.education, EducationEntry)
    qualifications = _clean_education(edu.qualifications, QualificationEntry)
    level = _safe("education level", derive_education_level, "", education)

    work = _clean_work(_safe("work experience", parse_experience, [], lines, sections, today))
    skills = _clean_strings(_safe("skills", match_skills, [], lines, sections))
    links = _safe("links", extract_links, LinkSet(), text)

    institutions = [e.institution for e in education + qualifications if e.institution]
    location = _safe("location", resolve_location, Location(), lines, text, institutions)

    profile = CandidateProfile(
        personal_info=PersonalInfo(
            first_name=_str_or_empty(first_name),
            last_name=_str_or_empty(last_name),
            email=_str_or_empty(email),
            phone=_str_or_empty(phone),
            address=location.address,
            city=location.city,
            postal_code=location.postal_code,
            country=location.country,
        ),
        education_level=level,
        education=education,
        qualifications=qualifications,
        work_experience=work,
        skills=skills,
        links=links if isinstance(links, LinkSet) else LinkSet(),
    )

    if education:
        top = education[0]
        profile.degree = top.degree
        profile.institution = top.institution
        profile.graduation_year = top.graduation_year
        profile.gpa = top.gpa

    return profile


def extract(text: str, today: Optional[date] = None) -> ExtractionResult:
    """
    Extract a CandidateProfile from CV text.

    Empty text is a successful, empty extraction. Any failure outside the
    per-field boundaries yields success=False with no data.
    """
    try:
        if not text.strip():
            return ExtractionResult(success=True, data=CandidateProfile(), message=EMPTY_TEXT_MESSAGE)
        profile = _build_profile(text, today)
    except Exception as exc:
        logger.exception("CV extraction failed")
        return ExtractionResult(success=False, data=None, message=f"Failed to parse CV: {exc}")

    logger.info(
        f"Extracted profile: {len(profile.education)} education, "
        f"{len(profile.work_experience)} work, {len(profile.skills)} skills"
    )
    return ExtractionResult(success=True, data=profile, message=SUCCESS_MESSAGE)


def extract_document(path: Union[str, Path], today: Optional[date] = None) -> ExtractionResult:
    try:
        text = read_document(path)
    except DocumentError as exc:
        return ExtractionResult(success=False, data=None, message=str(exc))
    return extract(text, today)


def extract_document_bytes(data: bytes, filename: str, today: Optional[date] = None) -> ExtractionResult:
    try:
        text = read_document_bytes(data, Path(filename or "").suffix)
    except DocumentError as exc:
        return ExtractionResult(success=False, data=None, message=str(exc))
    return extract(text, today)
