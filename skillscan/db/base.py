from sqlalchemy.orm import DeclarativeBase

class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""
    pass


# ids outside a signed 64-bit integer can never name a stored row
MAX_ROW_ID = 2**63 - 1


def is_storable_id(value: int) -> bool:
    return -MAX_ROW_ID - 1 <= value <= MAX_ROW_ID
