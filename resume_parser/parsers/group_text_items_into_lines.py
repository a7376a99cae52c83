from typing import Dict, List

from resume_parser.constants import DEFAULT_TEXT_HEIGHT, Y_TOLERANCE_RATIO
from resume_parser.parsers.types import TextItem, Line, Lines


def get_typical_text_height(text_items: List[TextItem]) -> float:
    """
    Most common height among non-blank items, used as the document's body text size.
    """
    height_to_count: Dict[float, int] = {}
    common_height = 0.0
    height_max_count = 0

    for item in text_items:
        if not item.text.strip() or item.height <= 0:
            continue
        height = round(item.height, 2)  # Round to avoid float precision issues
        height_to_count[height] = height_to_count.get(height, 0) + 1
        if height_to_count[height] > height_max_count:
            common_height = height
            height_max_count = height_to_count[height]

    return common_height if height_max_count else DEFAULT_TEXT_HEIGHT


def get_line_tolerance(text_items: List[TextItem]) -> float:
    return get_typical_text_height(text_items) * Y_TOLERANCE_RATIO


def _finalize_line(line_items: List[TextItem]) -> Line:
    # Reading order, never input order; blank items carry no text
    visible_items = [item for item in line_items if item.text.strip()]
    return Line(items=sorted(visible_items, key=lambda item: item.x))


def group_text_items_into_lines(text_items: List[TextItem]) -> Lines:
    """
    Group reader-ordered text items into visual lines.

    A new line starts when an item's baseline drifts from the current line's
    baseline by more than the line tolerance, or when the previous item ended
    its line (``has_eol``). Lines left without visible text are dropped.
    """
    if not text_items:
        return []

    y_tolerance = get_line_tolerance(text_items)

    lines: Lines = []
    current_line_items: List[TextItem] = [text_items[0]]
    line_baseline = text_items[0].y

    for prev_item, item in zip(text_items, text_items[1:]):
        if prev_item.has_eol or abs(item.y - line_baseline) > y_tolerance:
            lines.append(_finalize_line(current_line_items))
            current_line_items = [item]
            line_baseline = item.y
        else:
            current_line_items.append(item)

    lines.append(_finalize_line(current_line_items))

    return [line for line in lines if line.items]
