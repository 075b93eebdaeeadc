"""Tests for the scan history CSV export."""

from skillscan.services import applicants, job_roles
from skillscan.services.export import EXPORT_COLUMNS, scan_history_frame


def test_export_walks_every_page(db):
    role = job_roles.create_job_role(db, "Backend Engineer", ["Go", "SQL"])
    for i in range(5):
        applicants.create_applicant(db, resume=f"{i}.pdf", name=f"Person {i}", skills=["Go"] if i % 2 else [])

    df = scan_history_frame(db, job_role_id=role.id, page_size=2)

    assert list(df.columns) == EXPORT_COLUMNS
    assert len(df) == 5
    assert df["name"].tolist() == [f"Person {i}" for i in reversed(range(5))]
    assert df["matchPercentage"].tolist() == [0.0, 50.0, 0.0, 50.0, 0.0]


def test_export_respects_search(db):
    applicants.create_applicant(db, resume="a.pdf", name="Jane Doe", skills=["Go", "SQL"])
    applicants.create_applicant(db, resume="b.pdf", name="John Roe")

    df = scan_history_frame(db, search="jane")

    assert df["name"].tolist() == ["Jane Doe"]
    assert df["skills"].tolist() == ["Go, SQL"]
    assert df["matchPercentage"].isna().all()


def test_export_empty_history(db):
    df = scan_history_frame(db)
    assert df.empty
    assert list(df.columns) == EXPORT_COLUMNS
