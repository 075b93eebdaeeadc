# skillscan/api/applicant_routes.py
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from skillscan.core.config import settings
from skillscan.db.session import get_db
from skillscan.nlp.matcher import compare
from skillscan.schemas.applicant import (
    ApplicantCreate,
    ApplicantEnvelope,
    ApplicantOut,
    HistoryPageOut,
    HistoryRecordOut,
)
from skillscan.schemas.common import MessageOut
from skillscan.schemas.match import ApplicantMatchOut
from skillscan.services import applicants, history, job_roles

router = APIRouter(prefix="/applicants", tags=["Applicants"])


@router.post("", response_model=ApplicantEnvelope, status_code=201)
def create_applicant(payload: ApplicantCreate, db: Session = Depends(get_db)):
    applicant = applicants.create_applicant(
        db,
        resume=payload.resume,
        name=payload.name,
        email=payload.email,
        phone=payload.phone,
        skills=payload.skills,
    )
    return ApplicantEnvelope(applicant=ApplicantOut.model_validate(applicant))


@router.get("", response_model=HistoryPageOut, summary="Scan history (newest first)")
def list_applicants(
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, alias="pageSize", ge=1, le=settings.MAX_PAGE_SIZE),
    search: Optional[str] = Query(None),
    job_role_id: Optional[int] = Query(None, alias="jobRoleId"),
    db: Session = Depends(get_db),
):
    result = history.list_applicants(
        db, page=page, page_size=page_size, search=search, job_role_id=job_role_id
    )
    records = [
        HistoryRecordOut(
            **ApplicantOut.model_validate(row.applicant).model_dump(),
            match_percentage=row.match_percentage,
        )
        for row in result.records
    ]
    return HistoryPageOut(records=records, total=result.total, page=result.page, page_size=result.page_size)


@router.get("/{applicant_id}", response_model=ApplicantEnvelope)
def get_applicant(applicant_id: int, db: Session = Depends(get_db)):
    applicant = applicants.get_applicant(db, applicant_id)
    return ApplicantEnvelope(applicant=ApplicantOut.model_validate(applicant))


@router.get("/{applicant_id}/match", response_model=ApplicantMatchOut)
def match_applicant(
    applicant_id: int,
    job_role_id: int = Query(..., alias="jobRoleId"),
    db: Session = Depends(get_db),
):
    """Matched and missing skills of one applicant against one job role."""
    applicant = applicants.get_applicant(db, applicant_id)
    role = job_roles.get_job_role(db, job_role_id)
    result = compare(applicant.skills, role.skills)
    return ApplicantMatchOut(
        applicant_id=applicant.id,
        job_role_id=role.id,
        job_role_name=role.name,
        matched=result.matched,
        missing=result.missing,
        match_percentage=result.match_percentage,
    )


@router.delete("/{applicant_id}", response_model=MessageOut)
def delete_applicant(applicant_id: int, db: Session = Depends(get_db)):
    applicants.delete_applicant(db, applicant_id)
    return MessageOut(message="Applicant deleted successfully")
