# skillscan/api/upload_routes.py
from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import FileResponse
from sqlalchemy.orm import Session

from skillscan.core.config import settings
from skillscan.core.errors import ServiceError
from skillscan.db.session import get_db
from skillscan.schemas.applicant import ApplicantOut, UploadOut
from skillscan.services import applicants
from skillscan.storage.files import (
    PDF_CONTENT_TYPE,
    delete_resume,
    read_upload,
    resume_path,
    save_resume,
    validate_resume_type,
    validate_resume_upload,
)

router = APIRouter(tags=["Resumes"])


def _split_skills(raw: str) -> list[str]:
    return [s.strip() for s in (raw or "").split(",") if s.strip()]


@router.post("/upload-resume", response_model=UploadOut, status_code=201)
async def upload_resume(
    resume: UploadFile = File(...),
    name: str = Form(""),
    email: str = Form(""),
    phone: str = Form(""),
    skills: str = Form("", description="Comma separated skills extracted upstream"),
    db: Session = Depends(get_db),
):
    """Store the uploaded PDF and create its scan record."""
    validate_resume_type(resume.filename, resume.content_type)
    data = await read_upload(resume, settings.MAX_UPLOAD_MB * 1024 * 1024)
    validate_resume_upload(resume.filename, resume.content_type, len(data))
    filename = save_resume(data)

    try:
        applicant = applicants.create_applicant(
            db,
            resume=filename,
            name=name,
            email=email,
            phone=phone,
            skills=_split_skills(skills),
        )
    except ServiceError:
        # no scan record points at the file, so drop it
        delete_resume(filename)
        raise
    return UploadOut(message="Resume uploaded successfully", applicant=ApplicantOut.model_validate(applicant))


@router.get("/uploads/{filename}", summary="Download a stored resume")
def download_resume(filename: str):
    return FileResponse(resume_path(filename), media_type=PDF_CONTENT_TYPE, filename=filename)
