"""
Unstructured API integration.

The Unstructured API parses PDF, DOCX, DOC and other formats into typed
elements with optional bounding boxes; they are converted into text items so
the rest of the pipeline stays format agnostic.
"""
import logging
from itertools import groupby
from typing import Any, Dict, List, Optional

import httpx
from pydantic import BaseModel, Field, ValidationError

from resume_parser.config import settings
from resume_parser.constants import LETTER_HEIGHT_PT, UNKNOWN_FONT_NAME
from resume_parser.parsers.types import TextItem
from resume_parser.parsers.read_document import (
    DocumentReadError,
    mark_end_of_lines,
    remove_empty_space_items,
)

logger = logging.getLogger(__name__)

DEFAULT_ELEMENT_WIDTH = 100.0
DEFAULT_ELEMENT_HEIGHT = 12.0


class UnstructuredCoordinates(BaseModel):
    points: List[List[float]] = Field(default_factory=list)
    system: Optional[str] = None
    layout_width: Optional[float] = None
    layout_height: Optional[float] = None


class UnstructuredMetadata(BaseModel):
    filename: Optional[str] = None
    page_number: Optional[int] = None
    coordinates: Optional[UnstructuredCoordinates] = None


class UnstructuredElement(BaseModel):
    type: str = ""
    text: str = ""
    metadata: UnstructuredMetadata = Field(default_factory=UnstructuredMetadata)


def convert_unstructured_element(element: UnstructuredElement) -> TextItem:
    x, y = 0.0, 0.0
    width, height = DEFAULT_ELEMENT_WIDTH, DEFAULT_ELEMENT_HEIGHT

    coordinates = element.metadata.coordinates
    if coordinates and coordinates.points:
        xs = [point[0] for point in coordinates.points]
        ys = [point[1] for point in coordinates.points]
        x = min(xs)
        width = max(xs) - x
        height = max(ys) - min(ys)
        # Unstructured measures from the top-left corner
        page_height = coordinates.layout_height or LETTER_HEIGHT_PT
        y = page_height - max(ys)

    return TextItem(
        text=element.text,
        x=x,
        y=y,
        width=max(width, 0.0),
        height=max(height, 0.0),
        fontName=UNKNOWN_FONT_NAME,  # Unstructured reports no font information
    )


def convert_unstructured_to_text_items(
    elements: List[UnstructuredElement],
) -> List[TextItem]:
    """Convert elements to text items, dropping elements without text."""
    return [
        convert_unstructured_element(element)
        for element in elements
        if element.text and element.text.strip()
    ]


def group_elements_by_page(
    elements: List[UnstructuredElement],
) -> List[List[UnstructuredElement]]:
    # Elements arrive in reading order; consecutive runs share a page
    return [
        list(page_elements)
        for _, page_elements in groupby(
            elements, key=lambda element: element.metadata.page_number
        )
    ]


async def parse_document_with_unstructured(
    data: bytes,
    filename: str,
    api_key: Optional[str] = None,
    api_url: Optional[str] = None,
    strategy: Optional[str] = None,
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> List[UnstructuredElement]:
    api_key = api_key or settings.unstructured_api_key
    if not api_key:
        raise DocumentReadError(
            "Unstructured API key not configured. Please set UNSTRUCTURED_API_KEY."
        )

    files = {"files": (filename, data)}
    form: Dict[str, Any] = {
        "strategy": strategy or settings.unstructured_strategy,
        "coordinates": "true",
    }

    try:
        async with httpx.AsyncClient(
            timeout=timeout or settings.unstructured_timeout_seconds,
            transport=transport,
        ) as client:
            response = await client.post(
                api_url or settings.unstructured_api_url,
                headers={"unstructured-api-key": api_key, "accept": "application/json"},
                data=form,
                files=files,
            )
    except httpx.HTTPError as e:
        logger.error("Unstructured API request for %s failed: %s", filename, e)
        raise DocumentReadError(
            f"Failed to parse document with Unstructured API: {str(e)}"
        ) from e

    if response.status_code != 200:
        logger.error(
            "Unstructured API returned %s for %s: %s",
            response.status_code,
            filename,
            response.text,
        )
        raise DocumentReadError(
            f"Unstructured API request failed: {response.status_code} - {response.text}"
        )

    try:
        return [UnstructuredElement.model_validate(element) for element in response.json()]
    except (ValueError, TypeError, ValidationError) as e:
        logger.error("Unexpected Unstructured API response for %s: %s", filename, e)
        raise DocumentReadError(f"Unexpected Unstructured API response: {str(e)}") from e


class UnstructuredReader:
    """Reads any document type the Unstructured API understands."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        strategy: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.api_url = api_url
        self.strategy = strategy
        self.timeout = timeout
        self.transport = transport

    def supports(self, filename: str) -> bool:
        return bool(filename)

    async def read(self, data: bytes, filename: str) -> List[TextItem]:
        elements = await parse_document_with_unstructured(
            data,
            filename,
            api_key=self.api_key,
            api_url=self.api_url,
            strategy=self.strategy,
            timeout=self.timeout,
            transport=self.transport,
        )
        pages = [
            convert_unstructured_to_text_items(page_elements)
            for page_elements in group_elements_by_page(elements)
        ]
        text_items = remove_empty_space_items(mark_end_of_lines(pages))
        logger.debug(
            "Unstructured API returned %d elements for %s, kept %d text items",
            len(elements),
            filename,
            len(text_items),
        )
        return text_items
