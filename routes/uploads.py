import logging
import os
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass

logger = logging.getLogger(__name__)


# Merging needs at least two documents
MIN_PDF_FILES = 2


class UploadValidationError(Exception):
    pass


@dataclass
class UploadedFile:
    path: str
    filename: str
    size: int


@contextmanager
def upload_scope(upload_folder):
    """Yield a list for the request's uploads and delete all of them on exit."""
    os.makedirs(upload_folder, exist_ok=True)
    uploads = []
    try:
        yield uploads
    finally:
        cleanup_uploads([u.path for u in uploads])


def receive_uploads(parts, uploads, upload_folder, max_files=10):
    """
    Save each multipart file part to its own temp file inside ``upload_folder``.

    Every created file is appended to ``uploads`` before it is written, so a
    failed write still leaves the path for cleanup.
    """
    parts = [p for p in parts if p and p.filename]

    if len(parts) < MIN_PDF_FILES:
        raise UploadValidationError("Please upload at least two PDF files.")
    if len(parts) > max_files:
        raise UploadValidationError(f"You can upload at most {max_files} PDF files.")

    for part in parts:
        with tempfile.NamedTemporaryFile(delete=False, dir=upload_folder, suffix=".pdf") as tmp:
            upload = UploadedFile(path=tmp.name, filename=part.filename, size=0)
            uploads.append(upload)
            part.save(tmp)
        upload.size = os.path.getsize(upload.path)
        logger.debug("Stored %s (%d bytes) at %s", upload.filename, upload.size, upload.path)

    return uploads


def cleanup_uploads(paths):
    """Remove every path; failures are logged and returned, never raised."""
    failed = []
    for path in paths:
        try:
            os.remove(path)
        except FileNotFoundError:
            continue
        except OSError as e:
            logger.warning("Failed to clean up file %s: %s", path, e)
            failed.append(path)
    return failed
