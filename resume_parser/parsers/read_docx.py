import io
from typing import List, Optional, Tuple

from docx import Document as DocxDocument
from docx.table import Table
from docx.text.paragraph import Paragraph

from resume_parser.constants import (
    DEFAULT_TEXT_HEIGHT,
    LETTER_HEIGHT_PT,
    LETTER_WIDTH_PT,
    PAGE_MARGIN_PT,
    UNKNOWN_FONT_NAME,
)
from resume_parser.parsers.types import TextItem

HEADING_TEXT_HEIGHT = 14.0
TITLE_TEXT_HEIGHT = 18.0
LINE_SPACING_RATIO = 1.4
AVERAGE_CHAR_WIDTH_RATIO = 0.5
TABLE_CELL_SEPARATOR = " | "

# (text, font name, text height) for one line of a layout-less document
LayoutLine = Tuple[str, str, float]


def lay_out_lines(layout_lines: List[LayoutLine]) -> List[List[TextItem]]:
    """
    Place lines top to bottom on letter-sized pages, one text item per line.

    Blank lines widen the gap to the next line, so entry boundaries written as
    empty paragraphs survive as vertical whitespace.
    """
    pages: List[List[TextItem]] = [[]]
    top = LETTER_HEIGHT_PT - PAGE_MARGIN_PT
    max_width = LETTER_WIDTH_PT - 2 * PAGE_MARGIN_PT
    y = top

    for text, font_name, height in layout_lines:
        text = text.strip()
        if not text:
            y -= DEFAULT_TEXT_HEIGHT
            continue
        y -= height * LINE_SPACING_RATIO
        if y < PAGE_MARGIN_PT:
            pages.append([])
            y = top - height * LINE_SPACING_RATIO
        pages[-1].append(
            TextItem(
                text=text,
                x=PAGE_MARGIN_PT,
                y=y,
                width=min(len(text) * height * AVERAGE_CHAR_WIDTH_RATIO, max_width),
                height=height,
                fontName=font_name,
                hasEOL=True,
            )
        )

    return [page for page in pages if page]


def get_paragraph_font(paragraph: Paragraph) -> Tuple[str, float]:
    style_name = paragraph.style.name if paragraph.style is not None else ""
    runs = [run for run in paragraph.runs if run.text.strip()]

    font_name: Optional[str] = next((run.font.name for run in runs if run.font.name), None)
    if not font_name and paragraph.style is not None:
        font_name = paragraph.style.font.name
    font_name = font_name or UNKNOWN_FONT_NAME

    height = DEFAULT_TEXT_HEIGHT
    if style_name == "Title":
        height = TITLE_TEXT_HEIGHT
    elif style_name.startswith("Heading"):
        height = HEADING_TEXT_HEIGHT
    run_sizes = [run.font.size.pt for run in runs if run.font.size is not None]
    if run_sizes:
        height = max(run_sizes)

    is_bold = style_name == "Title" or style_name.startswith("Heading")
    if runs and all(run.bold for run in runs):
        is_bold = True
    if is_bold and "bold" not in font_name.lower():
        font_name = f"{font_name}-Bold"

    return font_name, float(height)


def get_table_row_texts(table: Table) -> List[str]:
    row_texts = []
    for row in table.rows:
        cell_texts: List[str] = []
        for cell in row.cells:
            text = cell.text.strip()
            # Merged cells show up once per grid column
            if text and text not in cell_texts:
                cell_texts.append(text)
        row_texts.append(TABLE_CELL_SEPARATOR.join(cell_texts))
    return row_texts


def read_docx_pages(docx_bytes: bytes) -> List[List[TextItem]]:
    """
    Read a DOCX file: one text item per paragraph line and per table row.

    Bold runs and heading styles are encoded in the font name, and headings
    get a larger text height.
    """
    try:
        doc = DocxDocument(io.BytesIO(docx_bytes))
    except Exception as e:
        raise ValueError(f"Error processing DOCX: {str(e)}") from e

    layout_lines: List[LayoutLine] = []
    for block in doc.iter_inner_content():
        if isinstance(block, Table):
            for row_text in get_table_row_texts(block):
                layout_lines.append((row_text, UNKNOWN_FONT_NAME, DEFAULT_TEXT_HEIGHT))
            continue
        font_name, height = get_paragraph_font(block)
        # Soft line breaks inside a paragraph are separate visual lines
        for text in block.text.split("\n"):
            layout_lines.append((text, font_name, height))

    return lay_out_lines(layout_lines)


def read_text_pages(txt_bytes: bytes) -> List[List[TextItem]]:
    try:
        text = txt_bytes.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ValueError(
            f"Error decoding TXT file (ensure UTF-8 encoding): {str(e)}"
        ) from e

    return lay_out_lines(
        [(line, UNKNOWN_FONT_NAME, DEFAULT_TEXT_HEIGHT) for line in text.splitlines()]
    )
