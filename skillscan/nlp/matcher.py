# skillscan/nlp/matcher.py
from dataclasses import dataclass, field
from typing import Sequence

from skillscan.core.errors import ValidationFailed
from skillscan.nlp.normalizer import normalize_skill


@dataclass(frozen=True)
class MatchResult:
    matched: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)
    match_percentage: float = 0.0


def compare(applicant_skills: Sequence[str], required_skills: Sequence[str]) -> MatchResult:
    """
    Partition required_skills into matched and missing against an applicant.

    Each required entry is checked on its own, so duplicates in the required
    list show up once per occurrence and stay aligned with the input order.
    Entries keep their original text; only the comparison is normalized.
    """
    if not required_skills:
        raise ValidationFailed("Required skills must not be empty", field="skills")

    have = {normalize_skill(s) for s in applicant_skills}

    matched, missing = [], []
    for skill in required_skills:
        (matched if normalize_skill(skill) in have else missing).append(skill)

    pct = round(100 * len(matched) / len(required_skills), 1)
    # rounding must not turn a partial match into 100 or 0
    if missing and pct == 100.0:
        pct = 99.9
    elif matched and pct == 0.0:
        pct = 0.1
    return MatchResult(matched=matched, missing=missing, match_percentage=pct)


def match_percentage(applicant_skills: Sequence[str], required_skills: Sequence[str]) -> float:
    return compare(applicant_skills, required_skills).match_percentage
