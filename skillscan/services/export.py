# skillscan/services/export.py
from typing import Optional

import pandas as pd
from sqlalchemy.orm import Session

from skillscan.services.history import list_applicants

EXPORT_COLUMNS = ["id", "name", "email", "phone", "skills", "resume", "createdAt", "matchPercentage"]


def scan_history_frame(
    db: Session,
    job_role_id: Optional[int] = None,
    search: Optional[str] = None,
    page_size: int = 100,
) -> pd.DataFrame:
    """Walk every history page and flatten it into one frame, newest first."""
    rows = []
    page = 1
    while True:
        result = list_applicants(db, page=page, page_size=page_size, search=search, job_role_id=job_role_id)
        for r in result.records:
            a = r.applicant
            rows.append({
                "id": a.id,
                "name": a.name,
                "email": a.email,
                "phone": a.phone,
                "skills": ", ".join(a.skills),
                "resume": a.resume,
                "createdAt": a.created_at,
                "matchPercentage": r.match_percentage,
            })
        if page * page_size >= result.total:
            break
        page += 1

    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)
