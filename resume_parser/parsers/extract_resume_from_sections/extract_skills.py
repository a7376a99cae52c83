import re
from typing import List, Tuple

from resume_parser.models import ResumeSkills
from resume_parser.parsers.types import SectionsByCategory
from resume_parser.parsers.extract_resume_from_sections.lib.section_categories import (
    SKILLS,
    get_category_lines,
)
from resume_parser.parsers.extract_resume_from_sections.lib.bullet_points import (
    get_bullet_points_from_lines,
    strip_bullet_point,
)
from resume_parser.parsers.extract_resume_from_sections.lib.entry_headers import (
    strip_edge_punctuation,
)
from resume_parser.utils import dedupe_preserving_order

SKILL_SEPARATOR_REGEX = re.compile(r"\s*(?:,|;|\||•|·|\s/\s)\s*")
# "Languages: Python, Go" -> the label before the colon is not a skill
SKILL_LABEL_REGEX = re.compile(r"^[^:,;|]{1,40}:\s*")
SKILL_MAX_WORDS = 5


def split_skills(text: str) -> List[str]:
    text = SKILL_LABEL_REGEX.sub("", strip_bullet_point(text))
    skills = []
    for part in SKILL_SEPARATOR_REGEX.split(text):
        skill = strip_edge_punctuation(part).rstrip(".")
        if skill and len(skill.split()) <= SKILL_MAX_WORDS:
            skills.append(skill)
    return skills


def extract_skills(
    sections_by_category: SectionsByCategory,
) -> Tuple[ResumeSkills, None]:  # No scores for skills
    skill_lines = get_category_lines(sections_by_category, SKILLS)

    descriptions = get_bullet_points_from_lines(skill_lines)
    skills = dedupe_preserving_order(
        skill for description in descriptions for skill in split_skills(description)
    )

    return ResumeSkills(skills=skills, descriptions=descriptions), None
