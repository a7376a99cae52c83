import re
from typing import List, Optional, Tuple

from resume_parser.parsers.types import Lines, TextItem
from resume_parser.parsers.extract_resume_from_sections.lib.bullet_points import (
    get_first_bullet_point_line_idx,
)
from resume_parser.parsers.extract_resume_from_sections.lib.common_features import (
    DATE_RANGE_REGEX,
    SINGLE_DATE_REGEX,
)
from resume_parser.parsers.extract_resume_from_sections.lib.subsections import (
    is_subsection_header_line,
)
from resume_parser.utils import collapse_whitespace

MAX_ENTRY_HEADER_LINES = 3

CHUNK_SEPARATOR_REGEX = re.compile(r"\s*(?:\||•|·|\t|\s[-–—]\s)\s*")
# Commas split chunks too, except in front of a company suffix ("Acme, Inc.")
COMMA_SEPARATOR_REGEX = re.compile(
    r"\s*,(?!\s*(?:Inc|LLC|Ltd|Corp|Co)\b)\s*", re.IGNORECASE
)
EDGE_PUNCTUATION = " ,;:|-–—·•"

TITLE_AT_ORGANIZATION_REGEX = re.compile(
    r"^(?P<title>[^,|@]+?)\s+(?:at|@)\s+(?P<organization>.+)$", re.IGNORECASE
)


def strip_edge_punctuation(text: str) -> str:
    text = text.strip(EDGE_PUNCTUATION)
    # Unbalanced parentheses left over from splitting, but not "(555) 123-4567"
    if text.startswith("(") and ")" not in text:
        text = text[1:]
    if text.endswith(")") and "(" not in text:
        text = text[:-1]
    return text.strip(EDGE_PUNCTUATION)


def split_text_into_chunks(text: str, split_on_comma: bool = True) -> List[str]:
    """'Acme, Inc. | Austin, TX' -> ['Acme, Inc.', 'Austin', 'TX']"""
    parts = CHUNK_SEPARATOR_REGEX.split(text)
    if split_on_comma:
        parts = [piece for part in parts for piece in COMMA_SEPARATOR_REGEX.split(part)]
    chunks = [strip_edge_punctuation(part) for part in parts]
    return [chunk for chunk in chunks if chunk]


def remove_text(text: str, text_to_remove: str) -> str:
    if not text_to_remove:
        return text
    return collapse_whitespace(text.replace(text_to_remove, " "))


def get_line_chunks(
    lines: Lines, exclude_texts: Optional[List[str]] = None, split_on_comma: bool = True
) -> List[TextItem]:
    """
    Split the items of the given lines into separator-delimited chunks.

    Each chunk keeps the position and font of the item it came from, so item
    features (bold, height) still apply to it.
    """
    chunks: List[TextItem] = []
    for line in lines:
        for item in line.items:
            text = item.text
            for text_to_remove in exclude_texts or []:
                text = remove_text(text, text_to_remove)
            for chunk in split_text_into_chunks(text, split_on_comma):
                chunks.append(item.model_copy(update={"text": chunk}))
    return chunks


def find_entry_date(lines: Lines) -> str:
    """First date range in the lines, or else the first single date."""
    for date_regex in (DATE_RANGE_REGEX, SINGLE_DATE_REGEX):
        for line in lines:
            match = date_regex.search(line.text)
            if match:
                return match.group(0).strip()
    return ""


def match_title_at_organization(text: str) -> Optional[re.Match]:
    """'Engineer at Acme' and 'Engineer @ Acme'."""
    return TITLE_AT_ORGANIZATION_REGEX.match(text.strip())


def split_title_at_organization(lines: Lines, date: str) -> Tuple[str, str]:
    for line in lines:
        match = match_title_at_organization(remove_text(line.text, date))
        if not match:
            continue
        title = strip_edge_punctuation(match.group("title"))
        organization_chunks = split_text_into_chunks(match.group("organization"))
        if title and organization_chunks:
            return title, organization_chunks[0]
    return "", ""


def split_entry_lines(subsection_lines: Lines) -> Tuple[Lines, Lines]:
    """Split an entry into its header lines and its description lines."""
    bullet_idx = get_first_bullet_point_line_idx(subsection_lines)
    limit = min(
        MAX_ENTRY_HEADER_LINES,
        bullet_idx if bullet_idx is not None else len(subsection_lines),
    )
    header_end = 0
    while header_end < limit and is_subsection_header_line(subsection_lines[header_end]):
        header_end += 1
    return subsection_lines[:header_end], subsection_lines[header_end:]
