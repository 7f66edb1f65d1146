from fastapi import APIRouter, File, HTTPException, UploadFile

from cvextract.core.profile_composer import extract_document_bytes
from cvextract.core.schemas import CandidateProfile, ExtractResponse, ValidationReport
from cvextract.core.validator import validate

router = APIRouter(tags=["extract"])


@router.post(
    "/extract",
    response_model=ExtractResponse,
    summary="Extract CV",
    description="Extract a structured candidate profile from a CV file (PDF, DOC, DOCX, TXT or MD).",
    responses={
        200: {
            "description": "Extraction finished (check `success`)",
            "content": {
                "application/json": {
                    "example": {
                        "success": True,
                        "message": "CV parsed successfully",
                        "data": {
                            "personal_info": {
                                "first_name": "Jane",
                                "last_name": "Perera",
                                "email": "jane.perera@gmail.com",
                                "phone": "+94 77 123 4567",
                                "address": "45 Galle Road, Colombo, Sri Lanka",
                                "city": "Colombo",
                                "postal_code": "",
                                "country": "Sri Lanka"
                            },
                            "education_level": "Bachelors",
                            "education": [
                                {
                                    "degree": "BSc (Hons) in Computer Science",
                                    "institution": "University of Colombo",
                                    "graduation_year": "2020",
                                    "gpa": "3.7"
                                }
                            ],
                            "skills": ["JavaScript", "React"]
                        },
                        "warnings": []
                    }
                }
            }
        },
        400: {"description": "Empty file uploaded"}
    }
)
async def extract_cv(
    file: UploadFile = File(..., description="CV file (PDF, DOC, DOCX, TXT or MD)")
):
    """
    Extract a candidate profile from an uploaded CV.

    Unsupported or unreadable documents come back with `success: false` and a
    message; completeness hints for a successful extraction are in `warnings`.
    """
    raw = await file.read()
    if not raw:
        raise HTTPException(status_code=400, detail="Empty file uploaded.")

    result = extract_document_bytes(raw, file.filename or "")
    warnings = validate(result.data).warnings if result.success else []
    return ExtractResponse(**result.model_dump(), warnings=warnings)


@router.post(
    "/validate",
    response_model=ValidationReport,
    summary="Validate Profile",
    description="Report missing fields of an already-extracted candidate profile.",
)
def validate_profile(profile: CandidateProfile):
    return validate(profile)
