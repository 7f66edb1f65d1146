from pydantic import BaseModel, Field
from typing import List, Literal, Optional


EducationLevel = Literal["PhD", "Masters", "Bachelors", "Diploma", "Certificate", ""]


class PersonalInfo(BaseModel):
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    city: str = ""
    postal_code: str = ""
    country: str = ""


class EducationEntry(BaseModel):
    """Degree-level education entry (BSc, MSc, HND, ...)."""
    degree: str = ""  # required non-empty to be kept
    institution: str = ""
    graduation_year: str = ""  # YYYY or empty
    gpa: str = ""


class QualificationEntry(EducationEntry):
    """Pre-degree qualification (G.C.E. O/L, A/L, GCSE, ...). Kept apart from degrees."""


class WorkExperienceEntry(BaseModel):
    company: str = ""
    position: str = ""
    start_date: str = ""  # ISO YYYY-MM-DD or empty
    end_date: str = ""  # ISO YYYY-MM-DD, empty, or today's date for open-ended ranges
    description: str = ""
    current: bool = False  # end date came from "present"/"current"/...


class LinkSet(BaseModel):
    github_url: str = ""
    linkedin_url: str = ""
    portfolio_url: str = ""


class CandidateProfile(BaseModel):
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    education_level: EducationLevel = ""
    education: List[EducationEntry] = Field(default_factory=list)
    qualifications: List[QualificationEntry] = Field(default_factory=list)
    work_experience: List[WorkExperienceEntry] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    links: LinkSet = Field(default_factory=LinkSet)

    # Summary of the first education entry (flat student-record fields)
    degree: str = ""
    institution: str = ""
    graduation_year: str = ""
    gpa: str = ""


class ExtractionResult(BaseModel):
    success: bool
    data: Optional[CandidateProfile] = None
    message: str = ""


class ValidationReport(BaseModel):
    warnings: List[str] = Field(default_factory=list, description="Non-fatal completeness hints")


class ExtractResponse(ExtractionResult):
    warnings: List[str] = Field(default_factory=list)
