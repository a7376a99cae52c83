import asyncio

import httpx
import pytest

from resume_parser.config import settings
from resume_parser.constants import UNKNOWN_FONT_NAME
from resume_parser.parsers import parse_resume_from_document
from resume_parser.parsers.read_document import DocumentReadError
from resume_parser.parsers.unstructured_api import (
    UnstructuredElement,
    UnstructuredReader,
    convert_unstructured_to_text_items,
    parse_document_with_unstructured,
)

API_URL = "https://unstructured.test/general/v0/general"


def element(text, top, page_number=1, left=72.0, height=12.0):
    return {
        "type": "NarrativeText",
        "text": text,
        "metadata": {
            "filename": "resume.pdf",
            "page_number": page_number,
            "coordinates": {
                "points": [
                    [left, top],
                    [left, top + height],
                    [left + 200, top + height],
                    [left + 200, top],
                ],
                "system": "PixelSpace",
                "layout_width": 612,
                "layout_height": 792,
            },
        },
    }


RESUME_ELEMENTS = [
    element("John Doe", 80),
    element("john@x.com", 100),
    element("EXPERIENCE", 130),
    element("Engineer at Acme, 2020-2022", 160),
    element("   ", 180),
]


def make_reader(handler, api_key="test-key"):
    return UnstructuredReader(
        api_key=api_key, api_url=API_URL, transport=httpx.MockTransport(handler)
    )


def test_convert_uses_bounding_box_with_bottom_left_origin():
    elements = [
        UnstructuredElement.model_validate(
            {
                "type": "Title",
                "text": "EXPERIENCE",
                "metadata": {
                    "coordinates": {
                        "points": [[10, 20], [10, 40], [110, 40], [110, 20]],
                        "layout_height": 1000,
                    }
                },
            }
        )
    ]

    (item,) = convert_unstructured_to_text_items(elements)

    assert (item.x, item.y, item.width, item.height) == (10, 960, 100, 20)
    assert item.font_name == UNKNOWN_FONT_NAME


def test_convert_defaults_without_coordinates_and_drops_blank_elements():
    elements = [
        UnstructuredElement(type="NarrativeText", text="Jane Doe"),
        UnstructuredElement(type="NarrativeText", text="  "),
    ]

    items = convert_unstructured_to_text_items(elements)

    assert len(items) == 1
    assert (items[0].x, items[0].y, items[0].width, items[0].height) == (0, 0, 100, 12)


def test_reader_posts_file_and_parses_elements():
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=RESUME_ELEMENTS)

    items = asyncio.run(make_reader(handler).read(b"%PDF-1.7", "resume.pdf"))

    assert [item.text for item in items] == [
        "John Doe",
        "john@x.com",
        "EXPERIENCE",
        "Engineer at Acme, 2020-2022",
    ]
    assert all(item.has_eol for item in items)
    assert items[0].y > items[1].y

    (request,) = requests
    assert str(request.url) == API_URL
    assert request.headers["unstructured-api-key"] == "test-key"
    body = request.read()
    assert b'name="strategy"' in body
    assert b"hi_res" in body
    assert b'name="coordinates"' in body
    assert b'filename="resume.pdf"' in body


def test_unstructured_document_parses_into_resume():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=RESUME_ELEMENTS)

    resume = asyncio.run(
        parse_resume_from_document(b"%PDF-1.7", "resume.pdf", make_reader(handler))
    )

    assert resume.profile.name == "John Doe"
    assert resume.work_experiences[0].company == "Acme"


def test_error_status_raises_document_read_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="internal error")

    with pytest.raises(DocumentReadError, match="500"):
        asyncio.run(make_reader(handler).read(b"data", "resume.pdf"))


def test_transport_error_raises_document_read_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(DocumentReadError, match="connection refused"):
        asyncio.run(make_reader(handler).read(b"data", "resume.pdf"))


def test_unexpected_response_raises_document_read_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"detail": "not a list of elements"})

    with pytest.raises(DocumentReadError):
        asyncio.run(make_reader(handler).read(b"data", "resume.pdf"))


def test_missing_api_key_raises_document_read_error(monkeypatch):
    monkeypatch.setattr(settings, "unstructured_api_key", None)

    with pytest.raises(DocumentReadError, match="API key"):
        asyncio.run(parse_document_with_unstructured(b"data", "resume.pdf"))
