# skillscan/schemas/job_role.py
from datetime import datetime
from typing import List, Optional
from skillscan.schemas.common import CamelModel


class JobRoleCreate(CamelModel):
    name: str = ""
    skills: List[str] = []


class JobRoleUpdate(CamelModel):
    name: Optional[str] = None
    skills: Optional[List[str]] = None


class JobRoleOut(CamelModel):
    id: int
    name: str
    skills: List[str]
    created_at: datetime
    updated_at: datetime


class JobRoleEnvelope(CamelModel):
    job_role: JobRoleOut


class JobRoleList(CamelModel):
    job_roles: List[JobRoleOut]
