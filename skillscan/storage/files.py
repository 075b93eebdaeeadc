# skillscan/storage/files.py
from pathlib import Path
from typing import Optional
from uuid import uuid4

from skillscan.core.config import settings
from skillscan.core.errors import NotFound, ValidationFailed
from skillscan.core.logging import get_logger

logger = get_logger(__name__)

PDF_CONTENT_TYPE = "application/pdf"


def upload_dir() -> Path:
    path = Path(settings.UPLOAD_DIR)
    path.mkdir(parents=True, exist_ok=True)
    return path


def validate_resume_type(filename: Optional[str], content_type: Optional[str]) -> None:
    is_pdf = content_type == PDF_CONTENT_TYPE or (filename or "").lower().endswith(".pdf")
    if not is_pdf:
        raise ValidationFailed("You can only upload PDF documents", field="resume")


def validate_resume_upload(filename: Optional[str], content_type: Optional[str], size: int) -> None:
    """Only PDFs under MAX_UPLOAD_MB are accepted."""
    validate_resume_type(filename, content_type)
    if size == 0:
        raise ValidationFailed("Uploaded resume is empty", field="resume")
    if size >= settings.MAX_UPLOAD_MB * 1024 * 1024:
        raise ValidationFailed(f"File must be smaller than {settings.MAX_UPLOAD_MB}MB", field="resume")


def save_resume(data: bytes) -> str:
    """Write resume bytes under a fresh name and return that name."""
    filename = f"{uuid4().hex}.pdf"
    (upload_dir() / filename).write_bytes(data)
    logger.info("Resume stored", filename=filename, size=len(data))
    return filename


def resume_path(filename: str) -> Path:
    """Resolve a stored resume name, refusing anything outside the upload dir."""
    base = upload_dir().resolve()
    if not filename or Path(filename).name != filename:
        raise NotFound(f"Resume {filename!r} not found")
    path = (base / filename).resolve()
    if path.parent != base or not path.is_file():
        raise NotFound(f"Resume {filename!r} not found")
    return path


def delete_resume(filename: str) -> None:
    """Remove a stored resume; a name that is already gone is ignored."""
    (upload_dir() / Path(filename).name).unlink(missing_ok=True)
    logger.info("Resume removed", filename=filename)


async def read_upload(upload, limit_bytes: int, chunk_size: int = 1024 * 1024) -> bytes:
    """Read an UploadFile in chunks, refusing it once it reaches limit_bytes."""
    chunks, size = [], 0
    while chunk := await upload.read(chunk_size):
        size += len(chunk)
        if size >= limit_bytes:
            raise ValidationFailed(f"File must be smaller than {settings.MAX_UPLOAD_MB}MB", field="resume")
        chunks.append(chunk)
    return b"".join(chunks)
