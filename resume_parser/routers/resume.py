import logging
from typing import List

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from resume_parser.config import settings
from resume_parser.dependencies import get_document_reader
from resume_parser.models import Resume, TextItem
from resume_parser.parsers import parse_resume_from_document, parse_resume_from_text_items
from resume_parser.parsers.read_document import (
    DocumentReader,
    DocumentReadError,
    UnsupportedDocumentError,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/parse-resume/", response_model=Resume)
async def parse_resume_endpoint(
    file: UploadFile = File(...),
    reader: DocumentReader = Depends(get_document_reader),
):
    """
    Upload a resume (PDF, DOCX or TXT with the local reader, anything the
    Unstructured API reads otherwise) and get the parsed structured data.
    """
    filename = file.filename or ""
    if not reader.supports(filename):
        raise HTTPException(
            status_code=400, detail=f"Unsupported file type: '{filename}'."
        )

    file_bytes = await file.read()
    if len(file_bytes) > settings.max_upload_size_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"File is larger than {settings.max_upload_size_bytes} bytes.",
        )

    try:
        return await parse_resume_from_document(file_bytes, filename, reader)
    except UnsupportedDocumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DocumentReadError as e:
        logger.warning("Could not read %s: %s", filename, e)
        raise HTTPException(status_code=502, detail=str(e))
    except Exception as e:
        logger.exception("Error processing file %s", filename)
        raise HTTPException(
            status_code=500,
            detail=f"An error occurred while parsing the resume: {str(e)}",
        )


@router.post("/parse-text-items/", response_model=Resume)
async def parse_text_items_endpoint(text_items: List[TextItem]):
    """
    Parse text items that were extracted elsewhere (a browser PDF reader, a
    previous Unstructured run).
    """
    try:
        return parse_resume_from_text_items(text_items)
    except Exception as e:
        logger.exception("Error parsing %d text items", len(text_items))
        raise HTTPException(
            status_code=500,
            detail=f"An error occurred while parsing the text items: {str(e)}",
        )
