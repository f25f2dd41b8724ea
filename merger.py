import io
import logging
from typing import List

from pypdf import PdfReader, PdfWriter

logger = logging.getLogger(__name__)


class MergeError(Exception):
    """A merge step failed. ``stage`` is one of "load", "copy" or "save"."""

    def __init__(self, stage, file=None):
        self.stage = stage
        self.file = file
        if file:
            message = f"PDF merge failed at {stage} stage for {file}"
        else:
            message = f"PDF merge failed at {stage} stage"
        super().__init__(message)


def _load(path):
    with open(path, "rb") as f:
        data = f.read()
    reader = PdfReader(io.BytesIO(data))
    # Walk the page tree now so broken structure fails as a load error
    page_indices = range(len(reader.pages))
    return reader, page_indices


def merge_pdfs(file_paths: List[str]) -> bytes:
    """
    Concatenate the pages of every PDF in ``file_paths`` into one document.

    Files are processed in the given order and each file keeps its own page
    order. The first unreadable file aborts the whole merge.
    """
    writer = PdfWriter()

    for path in file_paths:
        try:
            reader, page_indices = _load(path)
        except Exception as e:
            raise MergeError("load", path) from e

        try:
            for i in page_indices:
                writer.add_page(reader.pages[i])
        except Exception as e:
            raise MergeError("copy", path) from e

        logger.debug("Appended %d page(s) from %s", len(page_indices), path)

    logger.info("Merged %d file(s) into %d page(s)", len(file_paths), len(writer.pages))

    output = io.BytesIO()
    try:
        writer.write(output)
    except Exception as e:
        raise MergeError("save") from e
    finally:
        writer.close()

    return output.getvalue()

