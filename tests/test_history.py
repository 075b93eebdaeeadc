"""Tests for scan history listing: search, order, pagination, annotation."""

import math

import pytest
from hypothesis import given, strategies as st

from skillscan.core.errors import NotFound, ValidationFailed
from skillscan.services import applicants, job_roles
from skillscan.services.history import list_applicants
from skillscan.models.applicant import Applicant


def _seed(db, count):
    return [
        applicants.create_applicant(
            db, resume=f"cv{i}.pdf", name=f"Person {i}", email=f"p{i}@example.com", phone=f"555-{i:04d}"
        )
        for i in range(count)
    ]


def _ids(page):
    return [r.applicant.id for r in page.records]


class TestOrdering:

    def test_newest_first(self, db):
        created = _seed(db, 5)
        page = list_applicants(db, page=1, page_size=10)
        assert _ids(page) == [a.id for a in reversed(created)]
        assert page.total == 5

    def test_order_is_stable_across_calls(self, db):
        _seed(db, 7)
        first = _ids(list_applicants(db, page=1, page_size=7))
        assert _ids(list_applicants(db, page=1, page_size=7)) == first


class TestPagination:

    def test_slices_pages(self, db):
        created = list(reversed(_seed(db, 5)))
        assert _ids(list_applicants(db, page=1, page_size=2)) == [a.id for a in created[0:2]]
        assert _ids(list_applicants(db, page=2, page_size=2)) == [a.id for a in created[2:4]]
        assert _ids(list_applicants(db, page=3, page_size=2)) == [a.id for a in created[4:5]]

    def test_page_beyond_end_is_empty_with_total(self, db):
        _seed(db, 3)
        page = list_applicants(db, page=5, page_size=2)
        assert page.records == []
        assert page.total == 3

    def test_huge_page_is_empty_with_total(self, db):
        _seed(db, 3)
        page = list_applicants(db, page=10**19, page_size=10)
        assert page.records == []
        assert page.total == 3
        assert page.page == 10**19

    def test_huge_page_size_returns_everything(self, db):
        created = _seed(db, 3)
        page = list_applicants(db, page=1, page_size=10**19)
        assert _ids(page) == [a.id for a in reversed(created)]
        assert page.total == 3

    def test_empty_store(self, db):
        page = list_applicants(db, page=1, page_size=10)
        assert page.records == []
        assert page.total == 0

    @pytest.mark.parametrize("page,page_size", [(0, 10), (-1, 10), (1, 0), (1, -5)])
    def test_rejects_non_positive_arguments(self, db, page, page_size):
        with pytest.raises(ValidationFailed):
            list_applicants(db, page=page, page_size=page_size)

    @given(n=st.integers(min_value=0, max_value=12), page_size=st.integers(min_value=1, max_value=5))
    def test_all_pages_cover_every_record_once(self, db, n, page_size):
        db.query(Applicant).delete()
        db.commit()
        created = _seed(db, n)

        seen = []
        for page in range(1, math.ceil(n / page_size) + 1):
            result = list_applicants(db, page=page, page_size=page_size)
            assert result.total == n
            seen.extend(_ids(result))

        assert seen == [a.id for a in reversed(created)]
        assert len(set(seen)) == n


class TestSearch:

    def test_matches_name_case_insensitively(self, db):
        applicants.create_applicant(db, resume="a.pdf", name="Jane Doe")
        applicants.create_applicant(db, resume="b.pdf", name="John Smith")
        page = list_applicants(db, page=1, page_size=10, search="jane")
        assert [r.applicant.name for r in page.records] == ["Jane Doe"]
        assert page.total == 1

    def test_no_match(self, db):
        applicants.create_applicant(db, resume="a.pdf", name="Jane Doe")
        page = list_applicants(db, page=1, page_size=10, search="xyz")
        assert page.records == []
        assert page.total == 0

    @pytest.mark.parametrize("term", ["élodie", "ÉLODIE", "ünal"])
    def test_matches_non_ascii_names_case_insensitively(self, db, term):
        applicants.create_applicant(db, resume="a.pdf", name="ÉLODIE Ünal")
        applicants.create_applicant(db, resume="b.pdf", name="Elodie Unal")
        page = list_applicants(db, page=1, page_size=10, search=term)
        assert [r.applicant.name for r in page.records] == ["ÉLODIE Ünal"]
        assert page.total == 1

    def test_matches_email_and_phone(self, db):
        applicants.create_applicant(db, resume="a.pdf", name="A", email="alice@corp.io")
        applicants.create_applicant(db, resume="b.pdf", name="B", phone="+1 415 555 0199")
        applicants.create_applicant(db, resume="c.pdf", name="C")
        assert list_applicants(db, 1, 10, search="CORP.IO").total == 1
        assert list_applicants(db, 1, 10, search="555 01").total == 1

    def test_search_is_trimmed_and_blank_means_all(self, db):
        _seed(db, 3)
        assert list_applicants(db, 1, 10, search="   ").total == 3
        assert list_applicants(db, 1, 10, search="  person 1  ").total == 1

    def test_like_wildcards_are_literal(self, db):
        applicants.create_applicant(db, resume="a.pdf", name="100% Done")
        applicants.create_applicant(db, resume="b.pdf", name="Plain")
        applicants.create_applicant(db, resume="c.pdf", email="first_last@x.io")
        applicants.create_applicant(db, resume="d.pdf", email="firstXlast@x.io")
        assert list_applicants(db, 1, 10, search="%").total == 1
        assert list_applicants(db, 1, 10, search="_").total == 1
        assert list_applicants(db, 1, 10, search="t_l").total == 1

    def test_total_counts_filtered_set_before_paging(self, db):
        for i in range(5):
            applicants.create_applicant(db, resume=f"{i}.pdf", name=f"Jane {i}")
        applicants.create_applicant(db, resume="x.pdf", name="Bob")
        page = list_applicants(db, page=2, page_size=2, search="jane")
        assert page.total == 5
        assert len(page.records) == 2


class TestMatchAnnotation:

    def test_rows_annotated_with_match_percentage(self, db):
        role = job_roles.create_job_role(db, "Backend Engineer", ["Go", "SQL", "Docker"])
        applicants.create_applicant(db, resume="a.pdf", name="A", skills=["go", "Python", "docker"])
        applicants.create_applicant(db, resume="b.pdf", name="B", skills=["sql", "GO", " Docker "])
        page = list_applicants(db, page=1, page_size=10, job_role_id=role.id)
        assert [(r.applicant.name, r.match_percentage) for r in page.records] == [("B", 100.0), ("A", 66.7)]

    def test_annotation_does_not_change_selection(self, db):
        role = job_roles.create_job_role(db, "Backend", ["Go"])
        _seed(db, 6)
        plain = list_applicants(db, page=2, page_size=4, search="person")
        annotated = list_applicants(db, page=2, page_size=4, search="person", job_role_id=role.id)
        assert _ids(plain) == _ids(annotated)
        assert plain.total == annotated.total
        assert all(r.match_percentage is None for r in plain.records)
        assert all(r.match_percentage == 0.0 for r in annotated.records)

    def test_unknown_role(self, db):
        _seed(db, 1)
        with pytest.raises(NotFound):
            list_applicants(db, page=1, page_size=10, job_role_id=404)


class TestDeletion:

    def test_deleted_applicant_never_listed_again(self, db):
        created = _seed(db, 4)
        victim_id, victim_name = created[1].id, created[1].name
        applicants.delete_applicant(db, victim_id)

        with pytest.raises(NotFound):
            applicants.get_applicant(db, victim_id)
        for page_size in (1, 2, 10):
            for page in range(1, 5):
                assert victim_id not in _ids(list_applicants(db, page=page, page_size=page_size))
        assert list_applicants(db, 1, 10, search=victim_name).total == 0
