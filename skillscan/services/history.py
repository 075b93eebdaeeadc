"""Scan history: paginated, searchable listing of applicants.

Filtering, ordering and slicing are pushed down to SQL. The optional job role
match annotation is applied afterwards to the rows of the selected page only,
so it can never change which rows are returned.
"""

from dataclasses import dataclass, field
from typing import Optional

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from skillscan.core.errors import ValidationFailed
from skillscan.db.session import storage_call
from skillscan.models.applicant import Applicant
from skillscan.nlp.matcher import match_percentage
from skillscan.services.job_roles import get_job_role

_LIKE_ESCAPE = "\\"


@dataclass
class HistoryRow:
    applicant: Applicant
    match_percentage: Optional[float] = None


@dataclass
class HistoryPage:
    records: list[HistoryRow] = field(default_factory=list)
    total: int = 0
    page: int = 1
    page_size: int = 10


def _escape_like(term: str) -> str:
    return (
        term.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )


def _search_clause(search: Optional[str]):
    term = (search or "").strip()
    if not term:
        return None
    # both sides go through lower(); on SQLite that is str.lower, see db/session.py
    pattern = f"%{_escape_like(term.lower())}%"
    return or_(*(
        func.lower(col).like(pattern, escape=_LIKE_ESCAPE)
        for col in (Applicant.name, Applicant.email, Applicant.phone)
    ))


def list_applicants(
    db: Session,
    page: int = 1,
    page_size: int = 10,
    search: Optional[str] = None,
    job_role_id: Optional[int] = None,
) -> HistoryPage:
    """
    Return one page of scan records, newest first.

    ``total`` counts every record that passes the search filter, regardless
    of the page requested. A page past the end is empty, not an error.
    """
    if page < 1:
        raise ValidationFailed("page must be a positive integer", field="page")
    if page_size < 1:
        raise ValidationFailed("pageSize must be a positive integer", field="pageSize")

    # resolve the role first so an unknown id fails before any listing work
    required = get_job_role(db, job_role_id).skills if job_role_id is not None else None

    clause = _search_clause(search)
    count_q = select(func.count()).select_from(Applicant)
    rows_q = select(Applicant)
    if clause is not None:
        count_q = count_q.where(clause)
        rows_q = rows_q.where(clause)
    with storage_call(db, "count applicants"):
        total = db.execute(count_q).scalar_one()

    # offset and limit are bounded by total so they always fit a 64-bit integer
    offset = (page - 1) * page_size
    if offset >= total:
        return HistoryPage(records=[], total=total, page=page, page_size=page_size)
    rows_q = (
        rows_q.order_by(Applicant.created_at.desc(), Applicant.id.desc())
        .offset(offset)
        .limit(min(page_size, total - offset))
    )

    with storage_call(db, "list applicants"):
        applicants = db.execute(rows_q).scalars().all()

    records = [
        HistoryRow(
            applicant=a,
            match_percentage=match_percentage(a.skills, required) if required is not None else None,
        )
        for a in applicants
    ]
    return HistoryPage(records=records, total=total, page=page, page_size=page_size)
