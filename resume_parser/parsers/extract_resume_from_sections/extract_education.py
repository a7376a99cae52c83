import re
from typing import Dict, List, Tuple

from resume_parser.models import ResumeEducation
from resume_parser.parsers.types import FeatureSets, SectionsByCategory, TextScores
from resume_parser.parsers.extract_resume_from_sections.lib.section_categories import (
    EDUCATION,
    get_category_lines,
)
from resume_parser.parsers.extract_resume_from_sections.lib.subsections import (
    divide_section_into_subsections,
)
from resume_parser.parsers.extract_resume_from_sections.lib.entry_headers import (
    find_entry_date,
    get_line_chunks,
    split_entry_lines,
)
from resume_parser.parsers.extract_resume_from_sections.lib.common_features import (
    has_degree_keyword,
    has_school_keyword,
    is_likely_organization_name,
    is_likely_tech_stack,
    match_date_pattern,
    match_gpa,
)
from resume_parser.parsers.extract_resume_from_sections.lib.feature_scoring_system import (
    get_text_with_highest_feature_score,
)
from resume_parser.parsers.extract_resume_from_sections.lib.bullet_points import (
    get_bullet_points_from_lines,
)


def has_major_or_minor(item) -> bool:
    return bool(re.search(r"\b(?:major|minor|concentration)\b", item.text, re.IGNORECASE))


# --- Feature Sets for Education Fields ---
SCHOOL_FEATURE_SETS: FeatureSets = [
    (has_school_keyword, 5),
    (is_likely_organization_name, 1),  # "MIT" has no school keyword
    (has_degree_keyword, -4),
    (is_likely_tech_stack, -4),
    (match_date_pattern, -4, False),  # School is not a date
    (lambda item: match_gpa(item) is not None, -4),
]
DEGREE_FEATURE_SETS: FeatureSets = [
    (has_degree_keyword, 5),
    (has_major_or_minor, 2),
    (has_school_keyword, -2),
    (is_likely_tech_stack, -4),
    (match_date_pattern, -4, False),  # Degree is not a date
]


def find_gpa(lines) -> str:
    for line in lines:
        gpa = match_gpa(line.to_text_item())
        if gpa:
            return gpa
    return ""


def extract_education(
    sections_by_category: SectionsByCategory,
) -> Tuple[List[ResumeEducation], List[Dict[str, TextScores]]]:
    educations_data: List[ResumeEducation] = []
    educations_scores_debug: List[Dict[str, TextScores]] = []

    education_lines = get_category_lines(sections_by_category, EDUCATION)

    for subsection_lines in divide_section_into_subsections(education_lines):
        header_lines, description_lines = split_entry_lines(subsection_lines)

        # Graduation dates sit anywhere in short entries ("Expected May 2026")
        date = find_entry_date(header_lines) or find_entry_date(subsection_lines)
        gpa = find_gpa(subsection_lines)

        header_chunks = get_line_chunks(header_lines, exclude_texts=[date])
        school, school_scores = get_text_with_highest_feature_score(
            header_chunks, SCHOOL_FEATURE_SETS
        )
        degree, degree_scores = get_text_with_highest_feature_score(
            header_chunks, DEGREE_FEATURE_SETS
        )

        # Keep description lines that say more than the fields already extracted
        core_details = {detail for detail in [school, degree, date] if detail}
        descriptions = [
            description
            for description in get_bullet_points_from_lines(description_lines)
            if description not in core_details
        ]

        if school or degree or date or gpa or descriptions:
            educations_data.append(
                ResumeEducation(
                    school=school or None,
                    degree=degree or None,
                    date=date or None,
                    gpa=gpa or None,
                    descriptions=descriptions,
                )
            )
            educations_scores_debug.append(
                {"school": school_scores, "degree": degree_scores}
            )

    return educations_data, educations_scores_debug
