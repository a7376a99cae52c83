import asyncio
import logging
import os
from typing import List, Optional, Protocol, Sequence

from resume_parser.parsers.types import TextItem
from resume_parser.parsers.group_text_items_into_lines import get_line_tolerance
from resume_parser.parsers.read_docx import read_docx_pages, read_text_pages
from resume_parser.parsers.read_pdf import read_pdf_pages

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".pdf", ".docx", ".txt")


class DocumentReadError(Exception):
    """The document could not be turned into text items."""


class UnsupportedDocumentError(DocumentReadError):
    """No reader handles this file type."""


class DocumentReader(Protocol):
    async def read(self, data: bytes, filename: str) -> List[TextItem]:
        ...

    def supports(self, filename: str) -> bool:
        ...


def get_file_extension(filename: str) -> str:
    return os.path.splitext(filename or "")[1].lower()


def mark_end_of_lines(pages: Sequence[Sequence[TextItem]]) -> List[TextItem]:
    """
    Flatten reader-ordered pages, setting ``has_eol`` on the last item of each
    visual line.

    An item ends its line when it is the last one on its page, or when the
    next item's baseline differs by more than the line tolerance. Items that
    already carry ``has_eol`` keep it.
    """
    marked_items: List[TextItem] = []
    for page_items in pages:
        if not page_items:
            continue
        tolerance = get_line_tolerance(list(page_items))
        for idx, item in enumerate(page_items):
            is_last_on_page = idx == len(page_items) - 1
            ends_line = is_last_on_page or abs(page_items[idx + 1].y - item.y) > tolerance
            if ends_line and not item.has_eol:
                item = item.model_copy(update={"has_eol": True})
            marked_items.append(item)
    return marked_items


def is_empty_space(item: TextItem) -> bool:
    return not item.has_eol and item.text.strip() == ""


def remove_empty_space_items(text_items: List[TextItem]) -> List[TextItem]:
    return [item for item in text_items if not is_empty_space(item)]


class StaticDocumentReader:
    """Hands back text items that were produced elsewhere."""

    def __init__(self, text_items: List[TextItem]):
        self.text_items = list(text_items)

    def supports(self, filename: str) -> bool:
        return True

    async def read(self, data: bytes, filename: str) -> List[TextItem]:
        return list(self.text_items)


class LocalDocumentReader:
    """
    Reads PDF, DOCX and plain text files in-process.

    PDFs keep their real layout (PyMuPDF). DOCX and text files carry no layout,
    so their paragraphs are placed top to bottom on synthetic letter pages.
    """

    def __init__(self, extensions: Optional[Sequence[str]] = None):
        self.extensions = tuple(extensions or SUPPORTED_EXTENSIONS)

    def supports(self, filename: str) -> bool:
        return get_file_extension(filename) in self.extensions

    def read_pages(self, data: bytes, filename: str) -> List[List[TextItem]]:
        extension = get_file_extension(filename)
        try:
            if extension == ".pdf":
                return read_pdf_pages(data)
            if extension == ".docx":
                return read_docx_pages(data)
            return read_text_pages(data)
        except ValueError as e:
            logger.error("Failed to read %s: %s", filename, e)
            raise DocumentReadError(f"Failed to read document: {e}") from e

    async def read(self, data: bytes, filename: str) -> List[TextItem]:
        if not self.supports(filename):
            raise UnsupportedDocumentError(
                f"Unsupported file type: '{get_file_extension(filename) or filename}'"
            )
        pages = await asyncio.to_thread(self.read_pages, data, filename)
        text_items = remove_empty_space_items(mark_end_of_lines(pages))
        logger.debug(
            "Read %d text items from %d pages of %s", len(text_items), len(pages), filename
        )
        return text_items
