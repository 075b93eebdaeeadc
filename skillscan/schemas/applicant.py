# skillscan/schemas/applicant.py
from datetime import datetime
from typing import List, Optional
from pydantic import Field
from skillscan.schemas.common import CamelModel


class ApplicantCreate(CamelModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    skills: List[str] = []
    resume: Optional[str] = Field(default=None, description="Stored resume filename")


class ApplicantOut(CamelModel):
    id: int
    name: str
    email: str
    phone: str
    skills: List[str]
    resume: str
    created_at: datetime
    updated_at: datetime


class ApplicantEnvelope(CamelModel):
    applicant: ApplicantOut


class UploadOut(CamelModel):
    message: str
    applicant: ApplicantOut


class HistoryRecordOut(ApplicantOut):
    # only set when the listing was asked to match against a job role
    match_percentage: Optional[float] = None


class HistoryPageOut(CamelModel):
    records: List[HistoryRecordOut]
    total: int
    page: int
    page_size: int
