# resume_parser/parsers/extract_resume_from_sections/extract_profile.py
import re
from typing import Dict, List, Optional, Tuple

from resume_parser.models import ResumeProfile
from resume_parser.parsers.types import (
    FeatureSets,
    Lines,
    Sections,
    SectionsByCategory,
    TextItem,
    TextScores,
)
from resume_parser.parsers.group_lines_into_sections import has_section_title_keyword
from resume_parser.parsers.extract_resume_from_sections.lib.common_features import (
    get_has_text,
    has_degree_keyword,
    has_job_title,
    has_number,
    has_school_keyword,
    has_year,
    is_bold,
    is_likely_tech_stack,
    match_email_address,
    match_github_profile_url,
    match_linkedin_profile_url,
    match_phone_number,
    match_url,
)
from resume_parser.parsers.extract_resume_from_sections.lib.entry_headers import (
    get_line_chunks,
)
from resume_parser.parsers.extract_resume_from_sections.lib.feature_scoring_system import (
    get_text_with_highest_feature_score,
)
from resume_parser.parsers.extract_resume_from_sections.lib.section_categories import (
    PROFILE,
    SUMMARY,
    get_category_lines,
)
from resume_parser.utils import dedupe_preserving_order

# Contact details sit in the first lines of a resume, whatever the headings say
CONTACT_SEARCH_LINE_COUNT = 8

LOCATION_REGEX = re.compile(
    r"\b[A-Z][a-zA-Z.'-]*(?:\s[A-Z][a-zA-Z.'-]*)*,\s*"
    r"(?:[A-Z]{2}\b|[A-Z][a-zA-Z]+(?:\s[A-Z][a-zA-Z]+)*)"
)


# --- Profile Feature Definitions ---
def match_name_heuristic(item: TextItem) -> Optional[re.Match]:
    text = item.text.strip()
    words = text.split()
    # Usually 2-4 words, first letter of each capitalized
    if 1 < len(words) <= 4 and all(word[0].isupper() for word in words):
        return re.fullmatch(r"[A-Za-z][A-Za-z\s.'-]*", text)
    # Single very prominent name (all caps or bold)
    if len(words) == 1 and len(text) > 3 and (is_bold(item) or text.isupper()):
        return re.fullmatch(r"[A-Za-z'-]+", text)
    return None


def match_location_heuristic(item: TextItem) -> Optional[re.Match]:
    """'Hattiesburg, MS' or 'Berlin, Germany'."""
    if has_degree_keyword(item) or has_school_keyword(item):
        return None
    if has_year(item) or match_email_address(item) or match_url(item):
        return None
    return LOCATION_REGEX.search(item.text)


def is_profile_summary_candidate(item: TextItem) -> bool:
    text = item.text.strip()
    if len(text.split()) < 5:
        return False
    return not (
        match_name_heuristic(item)
        or match_email_address(item)
        or match_phone_number(item)
        or match_location_heuristic(item)
        or match_url(item)
        or has_degree_keyword(item)
        or has_school_keyword(item)
    )


def is_section_title(item: TextItem) -> bool:
    return has_section_title_keyword(item.text)


# Feature Sets
NAME_FS: FeatureSets = [
    (match_name_heuristic, 5, True),
    (is_bold, 2),
    (has_job_title, -5),  # "Software Engineer" looks like a name too
    (is_section_title, -5),
    (has_school_keyword, -5),
    (has_degree_keyword, -5),
    (match_email_address, -5, False),
    (match_url, -5, False),
    (has_number, -5),
]
EMAIL_FS: FeatureSets = [(match_email_address, 5, True)]
PHONE_FS: FeatureSets = [(match_phone_number, 5, True)]
SUMMARY_FS: FeatureSets = [
    (is_profile_summary_candidate, 3),
    (has_degree_keyword, -5),
    (has_school_keyword, -5),
    (is_likely_tech_stack, -4),
    (has_year, -3),
]


def get_location_feature_sets(name: str) -> FeatureSets:
    return [(match_location_heuristic, 4, True), (get_has_text(name), -10)]


def get_text_with_fallback(
    primary_items: List[TextItem],
    fallback_items: List[TextItem],
    feature_sets: FeatureSets,
) -> Tuple[str, TextScores]:
    text, scores = get_text_with_highest_feature_score(primary_items, feature_sets)
    if not text and fallback_items:
        text, scores = get_text_with_highest_feature_score(fallback_items, feature_sets)
    return text, scores


def collect_links(text_items: List[TextItem]) -> List[str]:
    """Every URL in the items, LinkedIn first, then GitHub, then the rest."""
    links = dedupe_preserving_order(
        match.group(0).rstrip("/.,")
        for match in (match_url(item) for item in text_items)
        if match
    )

    def link_priority(link: str) -> int:
        probe = TextItem(text=link)
        if match_linkedin_profile_url(probe):
            return 0
        if match_github_profile_url(probe):
            return 1
        return 2

    return sorted(links, key=link_priority)


def extract_profile(
    sections_by_category: SectionsByCategory, sections: Sections
) -> Tuple[ResumeProfile, Dict[str, TextScores]]:
    profile_lines = get_category_lines(sections_by_category, PROFILE)
    document_lines: Lines = [line for section in sections for line in section.all_lines]
    top_lines = document_lines[:CONTACT_SEARCH_LINE_COUNT]

    profile_items = get_line_chunks(profile_lines, split_on_comma=False)
    # Lines near the top outside the profile section, searched when the profile misses a field
    profile_line_ids = {id(line) for line in profile_lines}
    fallback_items = get_line_chunks(
        [line for line in top_lines if id(line) not in profile_line_ids],
        split_on_comma=False,
    )
    # The name is one of the first lines of the profile, or of the document without one
    leading_items = get_line_chunks(
        (profile_lines or top_lines)[:CONTACT_SEARCH_LINE_COUNT], split_on_comma=False
    )

    name, name_scores = get_text_with_highest_feature_score(leading_items, NAME_FS)
    email, email_scores = get_text_with_fallback(profile_items, fallback_items, EMAIL_FS)
    phone, phone_scores = get_text_with_fallback(profile_items, fallback_items, PHONE_FS)
    location, location_scores = get_text_with_fallback(
        profile_items, fallback_items, get_location_feature_sets(name)
    )
    links = collect_links(profile_items) or collect_links(fallback_items)

    summary_lines = get_category_lines(sections_by_category, SUMMARY)
    summary = " ".join(line.text for line in summary_lines).strip()
    if not summary:
        summary, _ = get_text_with_highest_feature_score(
            leading_items,
            SUMMARY_FS,
            return_concatenated_string_for_texts_with_same_highest_score=True,
        )

    profile_data = ResumeProfile(
        name=name or None,
        email=email or None,
        phone=phone or None,
        location=location or None,
        summary=summary or None,
        links=links,
    )
    profile_scores_debug = {
        "name": name_scores,
        "email": email_scores,
        "phone": phone_scores,
        "location": location_scores,
    }
    return profile_data, profile_scores_debug
