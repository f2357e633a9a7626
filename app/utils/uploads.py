"""
Storage of uploaded official signatures and pictures.
"""
import logging
import os
import re
import shutil
import time
from typing import Optional

from fastapi import UploadFile

from app.config import settings

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")

UPLOAD_URL_PREFIX = "/uploads"


def sanitize_filename(filename: str) -> str:
    """Strip directories and unsafe characters from a client filename."""
    name = os.path.basename((filename or "").replace("\\", "/"))
    base, ext = os.path.splitext(name)
    base = _UNSAFE_CHARS.sub("_", base).strip("._") or "file"
    ext = _UNSAFE_CHARS.sub("", ext)
    return f"{base}{ext}"


def build_stored_name(filename: str, timestamp_ms: Optional[int] = None) -> str:
    """``<epoch-ms>-<sanitized base><ext>``"""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    return f"{timestamp_ms}-{sanitize_filename(filename)}"


def save_upload(upload: Optional[UploadFile], kind: str) -> Optional[str]:
    """
    Persist an uploaded file and return the URL path it is served at.

    Args:
        upload: Incoming multipart file (None or empty filename is ignored)
        kind: ``"signatures"`` or ``"pictures"``

    Returns:
        Path such as ``/uploads/signatures/1700000000000-sig.png`` or None
    """
    if upload is None or not upload.filename:
        return None

    directory = os.path.join(settings.UPLOAD_DIR, kind)
    os.makedirs(directory, exist_ok=True)

    stored_name = build_stored_name(upload.filename)
    destination = os.path.join(directory, stored_name)
    with open(destination, "wb") as out:
        shutil.copyfileobj(upload.file, out)

    logger.info("Stored %s upload %s", kind, stored_name)
    return f"{UPLOAD_URL_PREFIX}/{kind}/{stored_name}"


def delete_upload(url_path: Optional[str]) -> None:
    """Remove a stored upload given the URL path ``save_upload`` returned."""
    if not url_path or not url_path.startswith(f"{UPLOAD_URL_PREFIX}/"):
        return
    relative = url_path[len(UPLOAD_URL_PREFIX) + 1:]
    kind, _, name = relative.partition("/")
    if not name or name != os.path.basename(name):
        return

    path = os.path.join(settings.UPLOAD_DIR, kind, name)
    try:
        os.remove(path)
        logger.info("Removed %s upload %s", kind, name)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning("Could not remove upload %s: %s", path, e)
