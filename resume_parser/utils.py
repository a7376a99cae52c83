import re
from typing import Iterable, List, TypeVar

T = TypeVar("T")

_WHITESPACE_RUN = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    """
    Collapse every run of whitespace into a single space and trim the ends.
    """
    return _WHITESPACE_RUN.sub(" ", text).strip()


def dedupe_preserving_order(values: Iterable[T]) -> List[T]:
    seen = set()
    unique_values = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        unique_values.append(value)
    return unique_values
