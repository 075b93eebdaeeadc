# skillscan/nlp/normalizer.py
from typing import Iterable


def normalize_skill(skill: str) -> str:
    """Canonical comparison form of a skill: trimmed and lower-cased."""
    return skill.strip().lower()


def normalize_skills(skills: Iterable[str]) -> list[str]:
    """Normalize each skill; order and duplicates are kept."""
    return [normalize_skill(s) for s in skills]
