import logging
import re
from typing import List

from resume_parser.parsers.types import Lines, Line, Section, Sections, TextItem
from resume_parser.parsers.group_text_items_into_lines import get_typical_text_height
from resume_parser.parsers.extract_resume_from_sections.lib.common_features import (
    is_bold,
    has_letter,
    has_letter_and_is_all_upper_case,
    match_email_address,
    match_url,
)

logger = logging.getLogger(__name__)

UNKNOWN_SECTION = "unknown"

SECTION_TITLE_KEYWORDS = [
    "work and research experience",
    "professional experience",
    "work experience",
    "research experience",
    "relevant experience",
    "experience",
    "employment history",
    "work history",
    "education",
    "academic background",
    "projects",
    "personal projects",
    "portfolio",
    "publications",
    "technical skills",
    "skills",
    "competencies",
    "summary",
    "professional summary",
    "career objective",
    "objective",
    "profile",
    "about me",
    "certifications",
    "certificates",
    "licenses",
    "awards",
    "awards and honors",
    "honors",
    "languages",
    "interests",
    "references",
    "extracurricular activities",
    "volunteer experience",
    "leadership",
    "contact",
    "contact information",
]

HEADING_MAX_WORDS = 4
# Height above the typical text height that reads as a larger heading font
LARGER_FONT_RATIO = 1.15
MIN_ALL_CAPS_LETTERS = 4


def has_section_title_keyword(text: str) -> bool:
    """'EXPERIENCE', 'Education:', 'Work Experience' but not 'Skills: Python, Go'."""
    text_lower = text.strip().rstrip(":").strip().lower()
    for keyword in SECTION_TITLE_KEYWORDS:
        if text_lower == keyword:
            return True
        if text_lower.startswith(keyword) and len(text_lower) < len(keyword) + 6:
            return True
    return False


def is_short_line(text: str) -> bool:
    return 0 < len(text.split()) <= HEADING_MAX_WORDS


def looks_like_body_text(text: str) -> bool:
    """Sentence punctuation, contact details or numbers never appear in headings."""
    stripped = text.strip()
    if stripped.endswith((".", ",", ";", "!", "?")):
        return True
    if re.search(r"[.!?;]\s", stripped) or re.search(r",\s", stripped):
        return True
    if re.search(r"\d", stripped):
        return True
    probe = TextItem(text=stripped)
    return bool(match_email_address(probe) or match_url(probe))


def has_larger_font(line: Line, typical_text_height: float) -> bool:
    return line.height > typical_text_height * LARGER_FONT_RATIO


def has_distinct_font(line: Line, typical_text_height: float) -> bool:
    """
    Larger than body text, or bold ALL CAPS.

    Bold alone is not enough: bold mixed-case lines are usually entry headers
    such as a company name or a job title.
    """
    if has_larger_font(line, typical_text_height):
        return True
    return is_bold(line.to_text_item()) and is_all_caps_title(line)


def is_all_caps_title(line: Line) -> bool:
    item = line.to_text_item()
    letter_count = sum(1 for char in item.text if char.isalpha())
    return has_letter_and_is_all_upper_case(item) and letter_count >= MIN_ALL_CAPS_LETTERS


def is_section_heading(line: Line, line_number: int, typical_text_height: float) -> bool:
    text = line.text
    if not text or not has_letter(line.to_text_item()):
        return False
    if not is_short_line(text) or looks_like_body_text(text):
        return False

    # Rule 1: known section title, formatting aside
    if has_section_title_keyword(text):
        return True

    # The first line is the candidate's name far more often than a heading
    if line_number == 0:
        return False

    # Rule 2: larger (or bold capitalized) font, or ALL CAPS
    return has_distinct_font(line, typical_text_height) or is_all_caps_title(line)


def group_lines_into_sections(lines: Lines) -> Sections:
    """
    Partition lines into sections, each opened by a heading line.

    Lines before the first heading form the "unknown" section. Every input line
    ends up in exactly one section (as its heading or in its body), in order.
    """
    typical_text_height = get_typical_text_height(
        [item for line in lines for item in line.items]
    )

    sections: List[Section] = []
    current_label = UNKNOWN_SECTION
    current_heading = None
    current_lines: Lines = []

    for line_number, line in enumerate(lines):
        if not is_section_heading(line, line_number, typical_text_height):
            current_lines.append(line)
            continue

        if current_heading is not None or current_lines:
            sections.append(
                Section(label=current_label, heading=current_heading, lines=current_lines)
            )
        current_label = line.text
        current_heading = line
        current_lines = []

    sections.append(
        Section(label=current_label, heading=current_heading, lines=current_lines)
    )

    logger.debug(
        "Grouped %d lines into sections: %s",
        len(lines),
        [section.label for section in sections],
    )
    return sections
