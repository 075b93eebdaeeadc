# skillscan/db/seed.py
from sqlalchemy.orm import Session
from sqlalchemy import select
from skillscan.models.job_role import JobRole

SEED_ROWS = [
    ("Backend Engineer", ["Go", "SQL", "Docker"]),
    ("Frontend Developer", ["JavaScript", "TypeScript", "React", "CSS"]),
    ("Data Engineer", ["Python", "SQL", "Spark", "Airflow"]),
    ("DevOps Engineer", ["Docker", "Kubernetes", "Terraform", "CI/CD"]),
]

def seed_job_roles(db: Session) -> int:
    # if already seeded, skip
    existing = db.execute(select(JobRole)).scalars().first()
    if existing:
        return 0
    for name, skills in SEED_ROWS:
        db.add(JobRole(name=name, skills=list(skills)))
    db.commit()
    return len(SEED_ROWS)
