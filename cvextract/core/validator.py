"""
Completeness checks for an extracted profile.

Warnings are advisory only; a profile with warnings is still a valid result.
"""

from cvextract.core.schemas import CandidateProfile, ValidationReport


def validate(profile: CandidateProfile) -> ValidationReport:
    report = ValidationReport()
    if profile is None:
        report.warnings.append("No profile to validate")
        return report

    info = profile.personal_info
    if not (info.first_name or info.last_name):
        report.warnings.append("Candidate name not found")
    if not info.email:
        report.warnings.append("Email address not found")
    if not info.phone:
        report.warnings.append("Phone number not found")
    if not profile.education:
        report.warnings.append("No education entries found")
    if not profile.work_experience:
        report.warnings.append("No work experience found")
    if not profile.skills:
        report.warnings.append("No skills found")
    return report
