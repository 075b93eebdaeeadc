# skillscan/services/job_roles.py
from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from skillscan.core.errors import NotFound, ValidationFailed
from skillscan.core.logging import get_logger
from skillscan.db.base import is_storable_id
from skillscan.db.session import storage_call
from skillscan.models.job_role import JobRole

logger = get_logger(__name__)


def _clean_name(name: Optional[str]) -> str:
    name = (name or "").strip()
    if not name:
        raise ValidationFailed("Job role name must not be empty", field="name")
    return name


def _clean_skills(skills: Optional[Sequence[str]]) -> list[str]:
    cleaned = [(s or "").strip() for s in (skills or [])]
    if not cleaned:
        raise ValidationFailed("Job role needs at least one skill", field="skills")
    if any(not s for s in cleaned):
        raise ValidationFailed("Job role skills must not be blank", field="skills")
    return cleaned


def create_job_role(db: Session, name: str, skills: Sequence[str]) -> JobRole:
    role = JobRole(name=_clean_name(name), skills=_clean_skills(skills))
    with storage_call(db, "create job role"):
        db.add(role)
        db.commit()
        db.refresh(role)
    logger.info("Job role created", job_role_id=role.id, skills=len(role.skills))
    return role


def get_job_role(db: Session, job_role_id: int) -> JobRole:
    if not is_storable_id(job_role_id):
        raise NotFound(f"Job role {job_role_id} not found")
    with storage_call(db, "read job role"):
        role = db.get(JobRole, job_role_id)
    if role is None:
        raise NotFound(f"Job role {job_role_id} not found")
    return role


def list_job_roles(db: Session) -> list[JobRole]:
    with storage_call(db, "list job roles"):
        return list(db.execute(select(JobRole).order_by(JobRole.name, JobRole.id)).scalars().all())


def update_job_role(
    db: Session,
    job_role_id: int,
    name: Optional[str] = None,
    skills: Optional[Sequence[str]] = None,
) -> JobRole:
    """Partial update; fields left as None keep their stored value."""
    role = get_job_role(db, job_role_id)
    # validate everything before touching the row
    new_name = _clean_name(name) if name is not None else None
    new_skills = _clean_skills(skills) if skills is not None else None

    with storage_call(db, "update job role"):
        if new_name is not None:
            role.name = new_name
        if new_skills is not None:
            role.skills = new_skills
        db.commit()
        db.refresh(role)
    logger.info("Job role updated", job_role_id=role.id)
    return role


def delete_job_role(db: Session, job_role_id: int) -> None:
    # applicants hold skills by value, nothing else to clean up
    role = get_job_role(db, job_role_id)
    with storage_call(db, "delete job role"):
        db.delete(role)
        db.commit()
    logger.info("Job role deleted", job_role_id=job_role_id)
