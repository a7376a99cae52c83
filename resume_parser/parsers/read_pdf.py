import fitz  # PyMuPDF
from typing import List

from resume_parser.parsers.types import TextItem


def clean_font_name(font_name: str) -> str:
    # Embedded subsets carry a prefix like "ABCDEF+Calibri-Bold"
    if "+" in font_name:
        return font_name.split("+", 1)[1]
    return font_name


def read_pdf_pages(pdf_bytes: bytes) -> List[List[TextItem]]:
    """
    Read span-level text items from every page of a PDF.

    PyMuPDF measures ``y`` from the top of the page; items are converted to a
    bottom-left origin (``y`` is the bottom edge of the span) and each page is
    sorted top to bottom, then left to right.
    """
    try:
        doc = fitz.open(stream=pdf_bytes, filetype="pdf")
    except Exception as e:
        raise ValueError(f"Error opening PDF with PyMuPDF: {str(e)}") from e

    pages: List[List[TextItem]] = []
    try:
        for page in doc:
            page_height = page.rect.height
            blocks = page.get_text(
                "dict",
                flags=fitz.TEXTFLAGS_TEXT
                | fitz.TEXT_PRESERVE_LIGATURES
                | fitz.TEXT_PRESERVE_WHITESPACE,
            )["blocks"]

            current_page_items: List[TextItem] = []
            for block in blocks:
                if block["type"] != 0:  # Image block
                    continue
                for line_dict in block["lines"]:
                    for span_dict in line_dict["spans"]:
                        text = span_dict["text"].replace("\u00ad", "")  # Soft hyphens
                        if not text.strip():
                            continue

                        x0, y0, x1, y1 = span_dict["bbox"]
                        current_page_items.append(
                            TextItem(
                                text=text,
                                x=float(x0),
                                y=float(page_height - y1),
                                width=float(max(x1 - x0, 0)),
                                height=float(max(y1 - y0, 0)),
                                fontName=clean_font_name(span_dict["font"]),
                            )
                        )

            # Rounding y keeps spans of one visual line together before the x sort
            current_page_items.sort(key=lambda item: (-round(item.y), item.x))
            pages.append(current_page_items)
    except Exception as e:
        raise ValueError(f"Error extracting text with PyMuPDF: {str(e)}") from e
    finally:
        doc.close()

    return pages
