from resume_parser.parsers.group_lines_into_sections import (
    UNKNOWN_SECTION,
    group_lines_into_sections,
    has_section_title_keyword,
    is_section_heading,
    looks_like_body_text,
)
from resume_parser.parsers.group_text_items_into_lines import group_text_items_into_lines
from tests.helpers import (
    BOLD_FONT,
    SAMPLE_RESUME_ROWS,
    WORKED_EXAMPLE_ITEMS,
    get_texts,
    make_line,
    make_lines,
)


def test_worked_example_sections():
    lines = group_text_items_into_lines(WORKED_EXAMPLE_ITEMS)

    sections = group_lines_into_sections(lines)

    assert [section.label for section in sections] == [UNKNOWN_SECTION, "EXPERIENCE"]
    assert get_texts(sections[0].lines) == ["John Doe", "john@x.com"]
    assert sections[0].heading is None
    assert sections[1].heading.text == "EXPERIENCE"
    assert get_texts(sections[1].lines) == ["Engineer at Acme, 2020-2022"]


def test_sections_partition_lines_in_order():
    lines = make_lines(SAMPLE_RESUME_ROWS)

    sections = group_lines_into_sections(lines)

    assert [section.label for section in sections] == [
        UNKNOWN_SECTION,
        "SUMMARY",
        "EXPERIENCE",
        "EDUCATION",
        "PROJECTS",
        "SKILLS",
        "CERTIFICATIONS",
        "VOLUNTEERING",
    ]
    regrouped = [line for section in sections for line in section.all_lines]
    assert regrouped == lines


def test_regrouping_is_idempotent():
    lines = make_lines(SAMPLE_RESUME_ROWS)
    sections = group_lines_into_sections(lines)

    regrouped = group_lines_into_sections(
        [line for section in sections for line in section.all_lines]
    )

    assert regrouped == sections


def test_document_without_headings_is_one_unknown_section():
    lines = make_lines(["Jane Roe", "jane@roe.dev", "Built things at places"])

    sections = group_lines_into_sections(lines)

    assert len(sections) == 1
    assert sections[0].label == UNKNOWN_SECTION
    assert sections[0].lines == lines


def test_empty_input_yields_one_empty_unknown_section():
    sections = group_lines_into_sections([])

    assert len(sections) == 1
    assert sections[0].label == UNKNOWN_SECTION
    assert sections[0].heading is None
    assert sections[0].lines == []


def test_leading_heading_has_no_unknown_section():
    sections = group_lines_into_sections(make_lines(["EDUCATION", "Rice University"]))

    assert [section.label for section in sections] == ["EDUCATION"]
    assert get_texts(sections[0].lines) == ["Rice University"]


def test_section_title_keyword():
    assert has_section_title_keyword("Education:")
    assert has_section_title_keyword("Work Experience")
    assert has_section_title_keyword("SKILLS")
    assert not has_section_title_keyword("Skills: Python, Go")
    assert not has_section_title_keyword("Acme Corp")


def test_body_text_patterns():
    assert looks_like_body_text("Led a team of five.")
    assert looks_like_body_text("john@x.com")
    assert looks_like_body_text("Austin, TX")
    assert looks_like_body_text("Class of 2020")
    assert not looks_like_body_text("Volunteer Work")


def test_all_caps_line_is_heading_but_never_the_first_line():
    line = make_line("JOHN DOE")

    assert not is_section_heading(line, 0, 10.0)
    assert is_section_heading(line, 3, 10.0)


def test_larger_font_marks_heading():
    assert is_section_heading(make_line("Awards Received", height=14.0), 5, 10.0)
    assert not is_section_heading(make_line("Awards Received"), 5, 10.0)


def test_bold_mixed_case_entry_header_is_not_heading():
    assert not is_section_heading(make_line("Acme Corp", font_name=BOLD_FONT), 5, 10.0)
    assert is_section_heading(make_line("VOLUNTEER WORK", font_name=BOLD_FONT), 5, 10.0)


def test_long_or_sentence_lines_are_not_headings():
    assert not is_section_heading(make_line("EXPERIENCE WITH LARGE SCALE SYSTEMS"), 5, 10.0)
    assert not is_section_heading(make_line("Skills."), 5, 10.0)
