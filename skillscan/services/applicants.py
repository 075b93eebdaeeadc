# skillscan/services/applicants.py
from typing import Optional, Sequence

from sqlalchemy.orm import Session

from skillscan.core.errors import NotFound, ValidationFailed
from skillscan.core.logging import get_logger
from skillscan.db.base import is_storable_id
from skillscan.db.session import storage_call
from skillscan.models.applicant import Applicant

logger = get_logger(__name__)


def create_applicant(
    db: Session,
    resume: Optional[str],
    name: Optional[str] = "",
    email: Optional[str] = "",
    phone: Optional[str] = "",
    skills: Optional[Sequence[str]] = (),
) -> Applicant:
    """
    Store one scan record.

    Contact fields come from upstream extraction and may be empty; only the
    resume reference is required.
    """
    resume = (resume or "").strip()
    if not resume:
        raise ValidationFailed("Resume reference is required", field="resume")

    applicant = Applicant(
        name=name or "",
        email=email or "",
        phone=phone or "",
        skills=list(skills or []),
        resume=resume,
    )
    with storage_call(db, "create applicant"):
        db.add(applicant)
        db.commit()
        db.refresh(applicant)
    logger.info("Applicant created", applicant_id=applicant.id, resume=applicant.resume)
    return applicant


def get_applicant(db: Session, applicant_id: int) -> Applicant:
    if not is_storable_id(applicant_id):
        raise NotFound(f"Applicant {applicant_id} not found")
    with storage_call(db, "read applicant"):
        applicant = db.get(Applicant, applicant_id)
    if applicant is None:
        raise NotFound(f"Applicant {applicant_id} not found")
    return applicant


def delete_applicant(db: Session, applicant_id: int) -> None:
    applicant = get_applicant(db, applicant_id)
    with storage_call(db, "delete applicant"):
        db.delete(applicant)
        db.commit()
    logger.info("Applicant deleted", applicant_id=applicant_id)
