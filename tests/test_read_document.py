import asyncio
import io

import fitz  # PyMuPDF
import pytest
from docx import Document

from resume_parser.parsers import parse_resume_from_document
from resume_parser.parsers.read_document import (
    DocumentReadError,
    LocalDocumentReader,
    UnsupportedDocumentError,
    mark_end_of_lines,
    remove_empty_space_items,
)
from resume_parser.parsers.read_docx import read_docx_pages
from resume_parser.parsers.read_pdf import read_pdf_pages
from tests.helpers import make_item


def build_pdf() -> bytes:
    doc = fitz.open()
    page = doc.new_page(width=612, height=792)
    rows = [
        ("Jane Doe", 18, "hebo"),
        ("jane@doe.dev | (555) 123-4567", 10, "helv"),
        ("EXPERIENCE", 12, "hebo"),
        ("Engineer at Acme | 2020 - 2022", 10, "helv"),
        ("- Built the billing service", 10, "helv"),
    ]
    baseline = 72
    for text, font_size, font_name in rows:
        page.insert_text((72, baseline), text, fontsize=font_size, fontname=font_name)
        baseline += 24
    data = doc.tobytes()
    doc.close()
    return data


def build_docx() -> bytes:
    document = Document()
    document.add_heading("Jane Doe", level=0)
    document.add_paragraph("jane@doe.dev | Austin, TX")
    document.add_heading("Experience", level=1)
    document.add_paragraph("Engineer at Acme | 2020 - 2022")
    document.add_paragraph("- Built the billing service")
    document.add_paragraph("")
    document.add_heading("Skills", level=1)
    table = document.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Python"
    table.rows[0].cells[1].text = "Docker"
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def test_mark_end_of_lines():
    pages = [
        [
            make_item("Acme", x=72, y=700),
            make_item("2020", x=400, y=700),
            make_item("Engineer", x=72, y=680),
        ],
        [make_item("Skills", x=72, y=680)],
    ]

    items = mark_end_of_lines(pages)

    assert [item.text for item in items] == ["Acme", "2020", "Engineer", "Skills"]
    assert [item.has_eol for item in items] == [False, True, True, True]


def test_page_boundary_always_ends_line():
    pages = [[make_item("Page one", y=100)], [make_item("Page two", y=100)]]

    assert [item.has_eol for item in mark_end_of_lines(pages)] == [True, True]


def test_remove_empty_space_items():
    items = [
        make_item(" ", x=100),
        make_item("Acme"),
        make_item("  ", has_eol=True),
    ]

    assert [item.text for item in remove_empty_space_items(items)] == ["Acme", "  "]


def test_local_reader_supported_types():
    reader = LocalDocumentReader()

    assert reader.supports("Resume.PDF")
    assert reader.supports("resume.docx")
    assert reader.supports("resume.txt")
    assert not reader.supports("resume.exe")
    assert not reader.supports("")


def test_local_reader_rejects_unsupported_type():
    with pytest.raises(UnsupportedDocumentError):
        asyncio.run(LocalDocumentReader().read(b"MZ", "resume.exe"))


def test_local_reader_reports_corrupt_files():
    with pytest.raises(DocumentReadError):
        asyncio.run(LocalDocumentReader().read(b"not a pdf", "resume.pdf"))
    with pytest.raises(DocumentReadError):
        asyncio.run(LocalDocumentReader().read(b"\xff\xfe\xfa", "resume.txt"))


def test_text_file_lines_are_laid_out_top_to_bottom():
    data = "Jane Roe\njane@roe.dev\n\nEXPERIENCE\n".encode("utf-8")

    items = asyncio.run(LocalDocumentReader().read(data, "resume.txt"))

    assert [item.text for item in items] == ["Jane Roe", "jane@roe.dev", "EXPERIENCE"]
    assert all(item.has_eol for item in items)
    line_step = items[0].y - items[1].y
    assert line_step > 0
    # The blank line widens the gap
    assert items[1].y - items[2].y > line_step


def test_read_pdf_pages():
    pages = read_pdf_pages(build_pdf())

    assert len(pages) == 1
    items = pages[0]
    assert [item.text for item in items] == [
        "Jane Doe",
        "jane@doe.dev | (555) 123-4567",
        "EXPERIENCE",
        "Engineer at Acme | 2020 - 2022",
        "- Built the billing service",
    ]
    assert "Bold" in items[0].font_name
    assert items[0].height > items[1].height
    # Bottom-left origin: the first line is the highest on the page
    assert items[0].y > items[1].y > items[4].y > 0


def test_parse_pdf_resume():
    resume = asyncio.run(
        parse_resume_from_document(build_pdf(), "resume.pdf", LocalDocumentReader())
    )

    assert resume.profile.name == "Jane Doe"
    assert resume.profile.email == "jane@doe.dev"
    assert resume.profile.phone == "(555) 123-4567"
    work_experience = resume.work_experiences[0]
    assert (work_experience.job_title, work_experience.company) == ("Engineer", "Acme")
    assert work_experience.date == "2020 - 2022"
    assert work_experience.descriptions == ["Built the billing service"]


def test_read_docx_pages():
    pages = read_docx_pages(build_docx())

    items = [item for page in pages for item in page]
    assert [item.text for item in items] == [
        "Jane Doe",
        "jane@doe.dev | Austin, TX",
        "Experience",
        "Engineer at Acme | 2020 - 2022",
        "- Built the billing service",
        "Skills",
        "Python | Docker",
    ]
    assert "Bold" in items[0].font_name
    assert items[2].height > items[1].height


def test_parse_docx_resume():
    resume = asyncio.run(
        parse_resume_from_document(build_docx(), "resume.docx", LocalDocumentReader())
    )

    assert resume.profile.name == "Jane Doe"
    assert resume.profile.location == "Austin, TX"
    assert resume.work_experiences[0].job_title == "Engineer"
    assert resume.work_experiences[0].company == "Acme"
    assert resume.skills.skills == ["Python", "Docker"]
