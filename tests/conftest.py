"""
Pytest fixtures for the PDF merge service.
"""

import pytest

from app import create_app
from tests.pdf_samples import build_pdf


@pytest.fixture
def upload_dir(tmp_path):
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def app(upload_dir):
    app = create_app({"TESTING": True, "UPLOAD_FOLDER": str(upload_dir)})
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def pdf_a():
    """Three page document: widths 101, 102, 103."""
    return build_pdf([101, 102, 103])


@pytest.fixture
def pdf_b():
    """Two page document: widths 201, 202."""
    return build_pdf([201, 202])


@pytest.fixture
def pdf_c():
    return build_pdf([301])


@pytest.fixture
def write_pdf(tmp_path):
    """Write bytes to a file under tmp_path and return its path."""
    def _write(name, data):
        path = tmp_path / name
        path.write_bytes(data)
        return str(path)
    return _write
