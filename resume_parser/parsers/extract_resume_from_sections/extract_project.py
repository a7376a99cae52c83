from typing import Dict, List, Tuple

from resume_parser.models import ResumeProject
from resume_parser.parsers.types import FeatureSets, SectionsByCategory, TextItem, TextScores
from resume_parser.parsers.extract_resume_from_sections.lib.section_categories import (
    PROJECTS,
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
    is_bold,
    is_likely_tech_stack,
    match_date_pattern,
    match_url,
)
from resume_parser.parsers.extract_resume_from_sections.lib.feature_scoring_system import (
    get_text_with_highest_feature_score,
)
from resume_parser.parsers.extract_resume_from_sections.lib.bullet_points import (
    get_bullet_points_from_lines,
)

TOOLS_PREFIXES = ("tools:", "technologies:", "tech stack:", "built with:")


def is_project_title_candidate(item: TextItem) -> bool:
    text = item.text.strip()
    if len(text.split()) > 7 or text.endswith((".", ":")):
        return False
    if text.lower().startswith(TOOLS_PREFIXES):
        return False
    return True


PROJECT_TITLE_FS: FeatureSets = [
    (is_bold, 3),
    (is_project_title_candidate, 2),
    (
        lambda item: item.text[0].isupper()
        and len(item.text.split()) <= 5
        and len(item.text) > 3,
        1,
    ),
    (is_likely_tech_stack, -5),
    (match_date_pattern, -4, False),
    (match_url, -3, False),
]


def extract_project(
    sections_by_category: SectionsByCategory,
) -> Tuple[List[ResumeProject], List[Dict[str, TextScores]]]:
    projects_data: List[ResumeProject] = []
    projects_scores_debug_list: List[Dict[str, TextScores]] = []

    project_lines = get_category_lines(sections_by_category, PROJECTS)

    for subsection_lines in divide_section_into_subsections(project_lines):
        header_lines, description_lines = split_entry_lines(subsection_lines)
        date = find_entry_date(header_lines)

        project_name, project_name_scores = get_text_with_highest_feature_score(
            get_line_chunks(header_lines, exclude_texts=[date]),
            PROJECT_TITLE_FS,
            return_empty_string_if_highest_score_is_not_positive=False,
        )

        # A "Tools: ..." header line is a detail, not part of the title
        descriptions = [
            line.text
            for line in header_lines
            if line.text.lower().startswith(TOOLS_PREFIXES)
        ] + get_bullet_points_from_lines(description_lines)

        if project_name or descriptions:
            projects_data.append(
                ResumeProject(
                    project=project_name or None,
                    date=date or None,
                    descriptions=descriptions,
                )
            )
            projects_scores_debug_list.append({"project_scores": project_name_scores})

    return projects_data, projects_scores_debug_list
