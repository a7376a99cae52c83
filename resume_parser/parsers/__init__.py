import logging
from typing import List

from resume_parser.models import Resume  # Pydantic model for the final resume
from resume_parser.parsers.types import TextItem
from resume_parser.parsers.read_document import DocumentReader
from resume_parser.parsers.group_text_items_into_lines import group_text_items_into_lines
from resume_parser.parsers.group_lines_into_sections import group_lines_into_sections
from resume_parser.parsers.extract_resume_from_sections.main_extractor import (
    extract_resume_from_sections,
)

logger = logging.getLogger(__name__)


def parse_resume_from_text_items(text_items: List[TextItem]) -> Resume:
    # Step 1. Group text items into lines
    lines = group_text_items_into_lines(text_items)

    # Step 2. Group lines into sections
    sections = group_lines_into_sections(lines)

    logger.debug(
        "Grouped %d text items into %d lines and %d sections",
        len(text_items),
        len(lines),
        len(sections),
    )

    # Step 3. Extract resume from sections
    return extract_resume_from_sections(sections)


async def parse_resume_from_document(
    data: bytes, filename: str, reader: DocumentReader
) -> Resume:
    """
    Read a document with the given reader and parse the text items it yields.

    Reader failures propagate unchanged; a document without text parses to an
    empty resume.
    """
    text_items = await reader.read(data, filename)
    if not text_items:
        logger.info("No text found in %s", filename)
        return Resume()

    return parse_resume_from_text_items(text_items)
