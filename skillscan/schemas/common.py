# skillscan/schemas/common.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Wire models speak camelCase (createdAt, pageSize) but accept either."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageOut(CamelModel):
    message: str


class ErrorResponse(CamelModel):
    error: str
    message: str
    field: Optional[str] = None
    timestamp: datetime
