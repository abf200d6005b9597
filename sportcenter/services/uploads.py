from pathlib import Path
from typing import Optional
import logging
import secrets
import shutil
import time

from fastapi import UploadFile

from sportcenter.errors import ValidationError

logger = logging.getLogger(__name__)

MAX_IMAGE_BYTES = 5 * 1024 * 1024


def _image_size(upload: UploadFile) -> int:
    upload.file.seek(0, 2)
    size = upload.file.tell()
    upload.file.seek(0)
    return size


def save_sport_image(upload: Optional[UploadFile], upload_dir: str) -> Optional[str]:
    """Store an uploaded sport image and return its file name."""
    if upload is None or not upload.filename:
        return None

    if not (upload.content_type or "").startswith("image/"):
        raise ValidationError(["Only image files are allowed"])
    if _image_size(upload) > MAX_IMAGE_BYTES:
        raise ValidationError(["Image must be 5 MB or smaller"])

    suffix = f"{int(time.time() * 1000)}-{secrets.randbelow(10**9)}"
    filename = f"sport-{suffix}{Path(upload.filename).suffix.lower()}"

    target_dir = Path(upload_dir)
    target_dir.mkdir(parents=True, exist_ok=True)
    with open(target_dir / filename, "wb") as buffer:
        shutil.copyfileobj(upload.file, buffer)

    logger.info(f"Stored sport image {filename}")
    return filename
