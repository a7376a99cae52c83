import logging
from typing import Dict

from resume_parser.parsers.types import Sections
from resume_parser.models import Resume, ResumeCustom  # Pydantic models
from resume_parser.parsers.group_lines_into_sections import UNKNOWN_SECTION
from resume_parser.parsers.extract_resume_from_sections.extract_profile import extract_profile
from resume_parser.parsers.extract_resume_from_sections.extract_education import extract_education
from resume_parser.parsers.extract_resume_from_sections.extract_work_experience import (
    extract_work_experience,
)
from resume_parser.parsers.extract_resume_from_sections.extract_project import extract_project
from resume_parser.parsers.extract_resume_from_sections.extract_skills import extract_skills
from resume_parser.parsers.extract_resume_from_sections.extract_certifications import (
    extract_certifications,
)
from resume_parser.parsers.extract_resume_from_sections.lib.section_categories import (
    OTHER,
    group_sections_by_category,
)

logger = logging.getLogger(__name__)


def extract_custom_sections(sections: Sections) -> Dict[str, ResumeCustom]:
    """Sections that fit no category, kept line by line under their label."""
    custom: Dict[str, ResumeCustom] = {}
    for section in group_sections_by_category(sections).get(OTHER, []):
        bucket = custom.setdefault(section.label, ResumeCustom())
        bucket.descriptions.extend(line.text for line in section.lines)

    # Without a single heading nothing below the contact block is categorized
    if len(sections) == 1 and sections[0].label == UNKNOWN_SECTION and sections[0].lines:
        custom[UNKNOWN_SECTION] = ResumeCustom(
            descriptions=[line.text for line in sections[0].lines]
        )
    return custom


def extract_resume_from_sections(sections: Sections) -> Resume:
    sections_by_category = group_sections_by_category(sections)

    profile_data, profile_scores = extract_profile(sections_by_category, sections)
    educations_data, educations_scores = extract_education(sections_by_category)
    work_experiences_data, work_experiences_scores = extract_work_experience(
        sections_by_category
    )
    projects_data, projects_scores = extract_project(sections_by_category)
    skills_data, _ = extract_skills(sections_by_category)  # Skills extractor returns no scores
    certifications_data = extract_certifications(sections_by_category)

    logger.debug(
        "Feature scores: %s",
        {
            "profile": profile_scores,
            "educations": educations_scores,
            "workExperiences": work_experiences_scores,
            "projects": projects_scores,
        },
    )

    return Resume(
        profile=profile_data,
        educations=educations_data,
        work_experiences=work_experiences_data,
        projects=projects_data,
        skills=skills_data,
        certifications=certifications_data,
        custom=extract_custom_sections(sections),
    )
