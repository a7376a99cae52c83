from typing import Dict, List, Tuple

from resume_parser.parsers.types import Lines, Sections, SectionCategory, SectionsByCategory
from resume_parser.parsers.group_lines_into_sections import UNKNOWN_SECTION

PROFILE = "profile"
EXPERIENCE = "experience"
EDUCATION = "education"
SKILLS = "skills"
SUMMARY = "summary"
PROJECTS = "projects"
CERTIFICATIONS = "certifications"
OTHER = "other"

# Checked in this order, the first category with a matching keyword wins
SECTION_CATEGORY_KEYWORDS: List[Tuple[SectionCategory, List[str]]] = [
    (
        PROFILE,
        ["profile", "contact", "personal information", "personal details", "about me"],
    ),
    (
        EXPERIENCE,
        ["experience", "employment", "work history", "career history", "internship"],
    ),
    (
        EDUCATION,
        ["education", "academic background", "academic history", "qualification"],
    ),
    (
        SKILLS,
        ["skill", "technologies", "competencies", "expertise", "proficiencies"],
    ),
    (SUMMARY, ["summary", "objective", "about"]),
    (PROJECTS, ["project", "portfolio"]),
    (CERTIFICATIONS, ["certification", "certificate", "license", "licence"]),
]


def get_section_category(label: str) -> SectionCategory:
    if label == UNKNOWN_SECTION:
        return PROFILE
    label_lower = label.lower()
    for category, keywords in SECTION_CATEGORY_KEYWORDS:
        if any(keyword in label_lower for keyword in keywords):
            return category
    return OTHER


def group_sections_by_category(sections: Sections) -> SectionsByCategory:
    sections_by_category: Dict[SectionCategory, Sections] = {}
    for section in sections:
        sections_by_category.setdefault(get_section_category(section.label), []).append(
            section
        )
    return sections_by_category


def get_category_lines(
    sections_by_category: SectionsByCategory, category: SectionCategory
) -> Lines:
    """Body lines of every section of a category, in document order."""
    return [
        line
        for section in sections_by_category.get(category, [])
        for line in section.lines
    ]
