import os

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def _env_bool(name, default="false"):
    return os.environ.get(name, default).lower() in ("1", "true", "yes")


class Config:
    PORT = int(os.environ.get("PORT", 3000))
    DEBUG = _env_bool("FLASK_DEBUG")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Scratch space for uploads, emptied per request
    UPLOAD_FOLDER = os.environ.get("UPLOAD_FOLDER", os.path.join(BASE_DIR, "uploads"))

    PDF_FIELD_NAME = "pdfFiles"
    MAX_PDF_FILES = int(os.environ.get("MAX_PDF_FILES", 10))
    MERGED_FILENAME = os.environ.get("MERGED_FILENAME", "merged.pdf")

    MAX_CONTENT_LENGTH = int(os.environ.get("MAX_CONTENT_LENGTH", 100 * 1024 * 1024))

    CORS_ORIGINS = [
        origin.strip()
        for origin in os.environ.get("CORS_ORIGINS", "*").split(",")
        if origin.strip()
    ]
