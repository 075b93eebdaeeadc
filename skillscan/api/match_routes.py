# skillscan/api/match_routes.py
from fastapi import APIRouter

from skillscan.nlp.matcher import compare
from skillscan.schemas.match import MatchOut, MatchRequest

router = APIRouter(prefix="/match", tags=["Matching"])


@router.post("", response_model=MatchOut, summary="Compare two skill lists")
def match_skills(payload: MatchRequest):
    result = compare(payload.applicant_skills, payload.required_skills)
    return MatchOut(
        matched=result.matched,
        missing=result.missing,
        match_percentage=result.match_percentage,
    )
