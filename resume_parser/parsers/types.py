import re
from typing import Callable, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel

from resume_parser.models import Line, Section, TextItem

Lines = List[Line]
Sections = List[Section]
# Entries of one section (a job, a school, a project), each a run of lines
Subsections = List[Lines]

SectionCategory = str
SectionsByCategory = Dict[SectionCategory, Sections]


class TextScore(BaseModel):
    """Accumulated feature score of one candidate text."""

    text: str
    score: int
    match: bool


TextScores = List[TextScore]

# Feature sets: (predicate, score) pairs, or (matcher, score, True) when only
# the matched part of the text should become a candidate
ItemPredicate = Callable[[TextItem], bool]
ItemMatcher = Callable[[TextItem], Optional[re.Match]]

FeatureSetItem = Union[
    Tuple[ItemPredicate, int],
    Tuple[ItemMatcher, int, bool],
]
FeatureSets = List[FeatureSetItem]
