from typing import Callable, List, Optional

from resume_parser.models import Line
from resume_parser.parsers.types import Lines, Subsections
from resume_parser.parsers.extract_resume_from_sections.lib.bullet_points import (
    is_bullet_point,
)
from resume_parser.parsers.extract_resume_from_sections.lib.common_features import (
    has_letter,
    match_date_pattern,
)

# Type alias for the decision function
IsLineNewSubsectionFunc = Callable[[Line, Line], bool]

HEADER_MAX_WORDS = 6
DATED_HEADER_MAX_WORDS = 12
# A second dated header starts a new entry at most this many lines above it
LINES_BEFORE_DATE = 1


def create_is_line_new_subsection_by_line_gap(
    section_lines: Lines,
) -> IsLineNewSubsectionFunc:
    """
    Build a predicate telling whether the whitespace between two consecutive
    lines is clearly larger than the typical spacing of the section.
    """
    if len(section_lines) <= 1:
        return lambda current_line, prev_line: False

    # Whitespace between the bottom of a line and the top of the next one
    line_gaps: List[float] = []
    for prev_line, current_line in zip(section_lines, section_lines[1:]):
        gap = prev_line.y - (current_line.y + current_line.height)
        if gap > 2.0:  # Ignore very small gaps (likely within same text block)
            line_gaps.append(gap)

    if line_gaps:
        line_gaps.sort()
        typical_line_gap = line_gaps[len(line_gaps) // 2]  # Median gap
    else:
        heights = [line.height for line in section_lines]
        typical_line_gap = sum(heights) / len(heights)

    subsection_line_gap_threshold = max(typical_line_gap * 1.6, typical_line_gap + 6.0)
    min_threshold = 8.0  # Minimum sensible gap to declare a new subsection
    actual_threshold = max(subsection_line_gap_threshold, min_threshold)

    def check_gap(current_line: Line, prev_line: Line) -> bool:
        # Negative across a page break, which never splits by itself
        gap = prev_line.y - (current_line.y + current_line.height)
        return gap > actual_threshold

    return check_gap


def is_subsection_header_line(line: Line) -> bool:
    """
    A line that can belong to an entry header (title, organization, date,
    location) as opposed to a description line.
    """
    text = line.text
    if not text or is_bullet_point(text):
        return False
    if not has_letter(line.to_text_item()) and not match_date_pattern(
        line.to_text_item()
    ):
        return False
    if text.endswith((".", "!", "?")) or text[0].islower():
        return False
    word_count = len(text.split())
    if match_date_pattern(line.to_text_item()):
        return word_count <= DATED_HEADER_MAX_WORDS
    return word_count <= HEADER_MAX_WORDS


def is_dated_header_line(line: Line) -> bool:
    return is_subsection_header_line(line) and bool(
        match_date_pattern(line.to_text_item())
    )


def _last_dated_header_idx(lines: Lines, start: int, end: int) -> Optional[int]:
    for i in range(end, start - 1, -1):
        if is_dated_header_line(lines[i]):
            return i
    return None


def get_subsection_start_indices(lines: Lines) -> List[int]:
    """
    Indices of the lines that open a new entry within a section.

    An entry opens on a clearly larger vertical gap, on a header line that
    follows description lines, or on a second dated header line in one entry.
    """
    if not lines:
        return []

    check_gap = create_is_line_new_subsection_by_line_gap(lines)
    starts = [0]
    has_body = not is_subsection_header_line(lines[0])
    last_dated_idx = 0 if is_dated_header_line(lines[0]) else None

    for i in range(1, len(lines)):
        line = lines[i]
        is_header = is_subsection_header_line(line)
        is_dated = is_header and is_dated_header_line(line)

        new_start: Optional[int] = None
        if check_gap(line, lines[i - 1]):
            new_start = i
        elif is_header and has_body:
            new_start = i
        elif is_dated and last_dated_idx is not None:
            new_start = max(last_dated_idx + 1, i - LINES_BEFORE_DATE)

        if new_start is None:
            if not is_header:
                has_body = True
            if is_dated:
                last_dated_idx = i
            continue

        starts.append(new_start)
        has_body = any(
            not is_subsection_header_line(entry_line)
            for entry_line in lines[new_start : i + 1]
        )
        last_dated_idx = _last_dated_header_idx(lines, new_start, i)

    return starts


def divide_section_into_subsections(lines: Lines) -> Subsections:
    """Split a section's lines into entries (one job, one school, one project)."""
    lines = [line for line in lines if line.text]
    if not lines:
        return []

    starts = get_subsection_start_indices(lines)
    ends = starts[1:] + [len(lines)]
    return [lines[start:end] for start, end in zip(starts, ends)]
