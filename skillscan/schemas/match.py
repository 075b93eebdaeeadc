# skillscan/schemas/match.py
from typing import List
from skillscan.schemas.common import CamelModel


class MatchRequest(CamelModel):
    applicant_skills: List[str] = []
    required_skills: List[str] = []


class MatchOut(CamelModel):
    matched: List[str]
    missing: List[str]
    match_percentage: float


class ApplicantMatchOut(MatchOut):
    applicant_id: int
    job_role_id: int
    job_role_name: str
