import logging

from fastapi import HTTPException

from .config import settings
from resume_parser.parsers.read_document import DocumentReader, LocalDocumentReader
from resume_parser.parsers.unstructured_api import UnstructuredReader

logger = logging.getLogger(__name__)

DOCUMENT_READERS = ("auto", "unstructured", "local")


def get_document_reader() -> DocumentReader:
    reader_name = settings.document_reader.lower()
    if reader_name not in DOCUMENT_READERS:
        raise HTTPException(
            status_code=500,
            detail=f"Unknown DOCUMENT_READER '{settings.document_reader}' configured in .env file",
        )

    if reader_name == "unstructured" or (
        reader_name == "auto" and settings.unstructured_api_key
    ):
        return UnstructuredReader()
    return LocalDocumentReader()
