# skillscan/api/job_role_routes.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from skillscan.db.session import get_db
from skillscan.schemas.common import MessageOut
from skillscan.schemas.job_role import (
    JobRoleCreate,
    JobRoleEnvelope,
    JobRoleList,
    JobRoleOut,
    JobRoleUpdate,
)
from skillscan.services import job_roles

router = APIRouter(prefix="/job-roles", tags=["Job Roles"])


@router.get("", response_model=JobRoleList, summary="List all job roles")
def list_job_roles(db: Session = Depends(get_db)):
    rows = job_roles.list_job_roles(db)
    return JobRoleList(job_roles=[JobRoleOut.model_validate(r) for r in rows])


@router.get("/{job_role_id}", response_model=JobRoleEnvelope)
def get_job_role(job_role_id: int, db: Session = Depends(get_db)):
    role = job_roles.get_job_role(db, job_role_id)
    return JobRoleEnvelope(job_role=JobRoleOut.model_validate(role))


@router.post("", response_model=JobRoleEnvelope, status_code=201)
def create_job_role(payload: JobRoleCreate, db: Session = Depends(get_db)):
    role = job_roles.create_job_role(db, name=payload.name, skills=payload.skills)
    return JobRoleEnvelope(job_role=JobRoleOut.model_validate(role))


@router.patch("/{job_role_id}", response_model=JobRoleEnvelope)
def update_job_role(job_role_id: int, payload: JobRoleUpdate, db: Session = Depends(get_db)):
    role = job_roles.update_job_role(db, job_role_id, name=payload.name, skills=payload.skills)
    return JobRoleEnvelope(job_role=JobRoleOut.model_validate(role))


@router.delete("/{job_role_id}", response_model=MessageOut)
def delete_job_role(job_role_id: int, db: Session = Depends(get_db)):
    job_roles.delete_job_role(db, job_role_id)
    return MessageOut(message="Job role deleted successfully")
