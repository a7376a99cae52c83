from typing import List

from resume_parser.models import ResumeCertification
from resume_parser.parsers.types import SectionsByCategory, TextItem
from resume_parser.parsers.extract_resume_from_sections.lib.section_categories import (
    CERTIFICATIONS,
    get_category_lines,
)
from resume_parser.parsers.extract_resume_from_sections.lib.bullet_points import (
    get_bullet_points_from_lines,
)
from resume_parser.parsers.extract_resume_from_sections.lib.common_features import (
    match_date_pattern,
)
from resume_parser.parsers.extract_resume_from_sections.lib.entry_headers import (
    remove_text,
    split_text_into_chunks,
)


def extract_certifications(
    sections_by_category: SectionsByCategory,
) -> List[ResumeCertification]:
    """One certification per bullet or line: 'AWS Solutions Architect | Amazon | 2023'."""
    certifications: List[ResumeCertification] = []
    certification_lines = get_category_lines(sections_by_category, CERTIFICATIONS)

    for description in get_bullet_points_from_lines(certification_lines):
        date_match = match_date_pattern(TextItem(text=description))
        date = date_match.group(0).strip() if date_match else ""
        chunks = split_text_into_chunks(remove_text(description, date), split_on_comma=False)
        if not chunks and not date:
            continue
        certifications.append(
            ResumeCertification(
                name=chunks[0] if chunks else None,
                issuer=chunks[1] if len(chunks) > 1 else None,
                date=date or None,
            )
        )

    return certifications
