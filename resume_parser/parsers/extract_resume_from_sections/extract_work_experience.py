from typing import Dict, List, Tuple

from resume_parser.models import ResumeWorkExperience
from resume_parser.parsers.types import FeatureSets, SectionsByCategory, TextScores
from resume_parser.parsers.extract_resume_from_sections.lib.section_categories import (
    EXPERIENCE,
    get_category_lines,
)
from resume_parser.parsers.extract_resume_from_sections.lib.subsections import (
    divide_section_into_subsections,
)
from resume_parser.parsers.extract_resume_from_sections.lib.entry_headers import (
    find_entry_date,
    get_line_chunks,
    split_entry_lines,
    split_title_at_organization,
)
from resume_parser.parsers.extract_resume_from_sections.lib.common_features import (
    get_has_text,
    has_company_suffix,
    has_job_title,
    is_bold,
    is_likely_organization_name,
    is_likely_tech_stack,
    match_date_pattern,
)
from resume_parser.parsers.extract_resume_from_sections.lib.feature_scoring_system import (
    get_text_with_highest_feature_score,
)
from resume_parser.parsers.extract_resume_from_sections.lib.bullet_points import (
    get_bullet_points_from_lines,
)

JOB_TITLE_FS: FeatureSets = [
    (has_job_title, 5),
    (is_bold, 2),  # Job titles are often bold
    (lambda item: item.text[0].isupper() and len(item.text.split()) <= 4, 1),
    (has_company_suffix, -4),  # Job title is not a company name
    (match_date_pattern, -5, False),  # Job title is not a date
    (is_likely_tech_stack, -4),
]
COMPANY_FS: FeatureSets = [
    (is_likely_organization_name, 4),
    (has_company_suffix, 5),  # Strong indicator like "Inc."
    (is_bold, 1),
    (has_job_title, -5),  # Company is not a job title
    (match_date_pattern, -5, False),
    (is_likely_tech_stack, -4),
]


def extract_work_experience(
    sections_by_category: SectionsByCategory,
) -> Tuple[List[ResumeWorkExperience], List[Dict[str, TextScores]]]:
    work_experiences_data: List[ResumeWorkExperience] = []
    work_scores_debug_list: List[Dict[str, TextScores]] = []

    work_lines = get_category_lines(sections_by_category, EXPERIENCE)

    for subsection_lines in divide_section_into_subsections(work_lines):
        header_lines, description_lines = split_entry_lines(subsection_lines)
        date = find_entry_date(header_lines)

        job_title_scores: TextScores = []
        company_scores: TextScores = []
        # "Engineer at Acme" states both fields outright
        job_title, company = split_title_at_organization(header_lines, date)

        if not job_title:
            header_chunks = get_line_chunks(header_lines, exclude_texts=[date])
            job_title, job_title_scores = get_text_with_highest_feature_score(
                header_chunks, JOB_TITLE_FS
            )
            company_feature_sets: FeatureSets = [
                *COMPANY_FS,
                (get_has_text(job_title), -10),
            ]
            company, company_scores = get_text_with_highest_feature_score(
                header_chunks, company_feature_sets
            )

        descriptions = get_bullet_points_from_lines(description_lines)

        if job_title or company or date or descriptions:
            work_experiences_data.append(
                ResumeWorkExperience(
                    company=company or None,
                    job_title=job_title or None,
                    date=date or None,
                    descriptions=descriptions,
                )
            )
            work_scores_debug_list.append(
                {
                    "job_title_scores": job_title_scores,
                    "company_scores": company_scores,
                }
            )

    return work_experiences_data, work_scores_debug_list
