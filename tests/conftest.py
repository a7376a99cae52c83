import pytest
from fastapi.testclient import TestClient

from resume_parser.main import app
from tests.helpers import SAMPLE_RESUME_ROWS, make_document_items


@pytest.fixture
def sample_resume_items():
    return make_document_items(SAMPLE_RESUME_ROWS)


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
