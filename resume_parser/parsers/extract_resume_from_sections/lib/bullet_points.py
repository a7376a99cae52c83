import re
from typing import List, Optional

from resume_parser.parsers.types import Lines

BULLET_POINTS_CHARS = [
    "•",
    "\uf0b7",
    "‣",
    "⁃",
    "◦",
    "▪",
    "▫",
    "∙",
    "⋅",
    "➢",
    "❖",
    "\uf0d8",
    "●",
    "○",
    "■",
    "►",
    "*",
    "-",
]
# A hyphen only counts as a bullet when followed by whitespace ("well-known" is not a list)
HYPHEN_BULLET_REGEX = r"^\s*[-–]\s+"
OTHER_BULLETS_REGEX_PART = "|".join(
    re.escape(b) for b in BULLET_POINTS_CHARS if b != "-"
)
BULLET_REGEX = re.compile(
    rf"(?:{HYPHEN_BULLET_REGEX}|^\s*(?:{OTHER_BULLETS_REGEX_PART})\s*)"
)
# Average characters per line below which unbulleted lines read as a list
LIST_LINE_MAX_AVERAGE_LENGTH = 100


def is_bullet_point(text: str) -> bool:
    return BULLET_REGEX.match(text) is not None


def strip_bullet_point(text: str) -> str:
    match = BULLET_REGEX.match(text)
    return text[match.end() :].strip() if match else text.strip()


def get_first_bullet_point_line_idx(lines: Lines) -> Optional[int]:
    for i, line in enumerate(lines):
        if is_bullet_point(line.text):
            return i
    return None


def get_bullet_points_from_lines(lines: Lines) -> List[str]:
    """
    Turn description lines into one string per bullet point.

    Lines without a bullet that follow a bullet are treated as its wrapped
    continuation. Without any bullet, short lines are kept one per item and a
    paragraph is kept as a single item.
    """
    line_texts = [line.text for line in lines if line.text]
    if not line_texts:
        return []

    if get_first_bullet_point_line_idx(lines) is None:
        avg_line_len = sum(len(text) for text in line_texts) / len(line_texts)
        if len(line_texts) > 1 and avg_line_len < LIST_LINE_MAX_AVERAGE_LENGTH:
            return line_texts
        return [" ".join(line_texts)]

    descriptions: List[str] = []
    for text in line_texts:
        if is_bullet_point(text):
            descriptions.append(strip_bullet_point(text))
        elif descriptions and descriptions[-1]:
            descriptions[-1] = f"{descriptions[-1]} {text}"
        else:  # Text before the first bullet
            descriptions.append(text)
    return [description for description in descriptions if description]
