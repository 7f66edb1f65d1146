from cvextract.core.schemas import CandidateProfile, EducationEntry, PersonalInfo, WorkExperienceEntry
from cvextract.core.validator import validate


def test_empty_profile_reports_everything():
    assert validate(CandidateProfile()).warnings == [
        "Candidate name not found",
        "Email address not found",
        "Phone number not found",
        "No education entries found",
        "No work experience found",
        "No skills found",
    ]


def test_complete_profile_has_no_warnings():
    profile = CandidateProfile(
        personal_info=PersonalInfo(first_name="Jane", email="jane@gmail.com", phone="+94 77 123 4567"),
        education=[EducationEntry(degree="BSc in IT")],
        work_experience=[WorkExperienceEntry(position="Developer", start_date="2020-01-01")],
        skills=["Python"],
    )
    assert validate(profile).warnings == []


def test_last_name_alone_counts_as_name():
    profile = CandidateProfile(personal_info=PersonalInfo(last_name="Perera"))
    assert "Candidate name not found" not in validate(profile).warnings


def test_missing_profile():
    assert validate(None).warnings == ["No profile to validate"]
