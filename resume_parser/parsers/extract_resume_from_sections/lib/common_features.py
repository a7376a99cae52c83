# resume_parser/parsers/extract_resume_from_sections/lib/common_features.py
import re
from typing import Callable, Optional

from resume_parser.parsers.types import TextItem


def is_text_item_bold(font_name: str) -> bool:
    font_name_lower = font_name.lower()
    # Common bold indicators in font names
    return (
        "bold" in font_name_lower
        or "black" in font_name_lower
        or "heavy" in font_name_lower
        or "demi" in font_name_lower
    )


def is_bold(item: TextItem) -> bool:
    return is_text_item_bold(item.font_name)


def has_letter(item: TextItem) -> bool:
    return bool(re.search(r"[a-zA-Z]", item.text))


def has_number(item: TextItem) -> bool:
    return bool(re.search(r"\d", item.text))


def get_has_text(
    text_to_find: Optional[str], case_sensitive: bool = False
) -> Callable[[TextItem], bool]:
    if not isinstance(text_to_find, str) or not text_to_find.strip():
        return lambda item: False

    if case_sensitive:
        return lambda item: text_to_find in item.text
    return lambda item: text_to_find.lower() in item.text.lower()


def has_letter_and_is_all_upper_case(item: TextItem) -> bool:
    text_stripped = item.text.strip()
    if not text_stripped or not has_letter(item):
        return False
    # "GPA: 4.0" counts, only alphabetic characters are checked
    alpha_chars = "".join(filter(str.isalpha, text_stripped))
    if not alpha_chars:
        return False
    return alpha_chars.isupper() and len(text_stripped) > 1


TECH_KEYWORDS = [
    "react",
    "node",
    "python",
    "java",
    "aws",
    "azure",
    "sql",
    "mongo",
    "docker",
    "api",
    "c#",
    ".net",
    "swift",
    "kotlin",
    "angular",
    "spring",
    "django",
    "flask",
    "express",
    "javascript",
    "typescript",
    "html",
    "css",
    "ruby",
    "php",
    "kubernetes",
    "terraform",
    "pandas",
    "numpy",
    "sklearn",
    "tensorflow",
    "pytorch",
    "three.js",
]


def is_likely_tech_stack(item: TextItem) -> bool:
    text = item.text.lower()
    found_count = sum(
        1
        for tech in TECH_KEYWORDS
        if re.search(r"(?<!\w)" + re.escape(tech) + r"(?!\w)", text)
    )

    if (
        text.count(",") >= 1 or text.count("/") >= 1 or text.count("|") >= 1
    ) and found_count >= 1:
        return True
    return found_count >= 2


# --- Dates ---
MONTH_PATTERN = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|June?|July?"
    r"|Aug(?:ust)?|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)\.?"
)
SEASON_PATTERN = r"(?:Spring|Summer|Fall|Autumn|Winter)"
YEAR_PATTERN = r"(?:19|20)\d{2}"
DATE_TOKEN_PATTERN = (
    rf"(?:(?:{MONTH_PATTERN}|{SEASON_PATTERN}),?\s+(?:\d{{1,2}},?\s+)?{YEAR_PATTERN}"
    rf"|\d{{1,2}}[/-]{YEAR_PATTERN}"
    rf"|{YEAR_PATTERN})"
)
OPEN_ENDED_DATE_PATTERN = r"(?:Present|Current|Now|Today|Ongoing)"
DATE_RANGE_SEPARATOR_PATTERN = r"\s*(?:-|–|—|~|\bto\b|\buntil\b|\bthrough\b)\s*"

DATE_RANGE_REGEX = re.compile(
    rf"\b{DATE_TOKEN_PATTERN}{DATE_RANGE_SEPARATOR_PATTERN}"
    rf"(?:{DATE_TOKEN_PATTERN}|{OPEN_ENDED_DATE_PATTERN})\b",
    re.IGNORECASE,
)
SINGLE_DATE_REGEX = re.compile(
    rf"\b(?:(?:Expected|Anticipated)\s+)?{DATE_TOKEN_PATTERN}\b", re.IGNORECASE
)


def has_year(item: TextItem) -> bool:
    return bool(re.search(rf"\b{YEAR_PATTERN}\b", item.text))


def match_date_range_pattern(item: TextItem) -> Optional[re.Match]:
    """'Jan 2020 - Present', '2018 – 2022', 'Summer 2021 to Fall 2021'."""
    return DATE_RANGE_REGEX.search(item.text)


def match_date_pattern(item: TextItem) -> Optional[re.Match]:
    """A date range when there is one, otherwise the first single date."""
    return match_date_range_pattern(item) or SINGLE_DATE_REGEX.search(item.text)


# --- Contact details ---
EMAIL_REGEX = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
PHONE_CANDIDATE_REGEX = re.compile(r"(?<![\w@])\+?\(?\d[\d\s().-]{5,}\d\)?(?![\w@])")
MIN_PHONE_DIGITS = 7
MAX_PHONE_DIGITS = 15


def match_email_address(item: TextItem) -> Optional[re.Match]:
    return EMAIL_REGEX.search(item.text)


def match_phone_number(item: TextItem) -> Optional[re.Match]:
    for match in PHONE_CANDIDATE_REGEX.finditer(item.text):
        candidate = match.group(0)
        digit_count = len(re.sub(r"\D", "", candidate))
        if not MIN_PHONE_DIGITS <= digit_count <= MAX_PHONE_DIGITS:
            continue
        # "2018 - 2022" has eight digits too
        if DATE_RANGE_REGEX.search(candidate):
            continue
        return match
    return None


LINKEDIN_URL_REGEX = re.compile(
    r"(?:https?://)?(?:[\w-]+\.)?linkedin\.com/(?:in|pub)/[\w%/.-]*[\w%/-]",
    re.IGNORECASE,
)
GITHUB_URL_REGEX = re.compile(
    r"(?:https?://)?(?:www\.)?github\.com/[\w%/.-]*[\w%/-]|[\w-]+\.github\.io(?:/[\w%/.-]*)?",
    re.IGNORECASE,
)
OTHER_URL_REGEX = re.compile(
    r"(?:https?://|www\.)[^\s|,;]+[^\s|,;.)]"
    r"|\b[\w-]+(?:\.[\w-]+)*\.(?:com|org|net|io|dev|me|ai|co|app|edu|info|tech)\b(?:/[^\s|,;]*[^\s|,;.)])?",
    re.IGNORECASE,
)


def match_linkedin_profile_url(item: TextItem) -> Optional[re.Match]:
    return LINKEDIN_URL_REGEX.search(item.text)


def match_github_profile_url(item: TextItem) -> Optional[re.Match]:
    return GITHUB_URL_REGEX.search(item.text)


def match_other_url(item: TextItem) -> Optional[re.Match]:
    if match_email_address(item):
        return None
    return OTHER_URL_REGEX.search(item.text)


def match_url(item: TextItem) -> Optional[re.Match]:
    return (
        match_linkedin_profile_url(item)
        or match_github_profile_url(item)
        or match_other_url(item)
    )


# --- Education ---
SCHOOLS = [
    "College",
    "University",
    "Institute",
    "School",
    "Academy",
    "Polytechnic",
]
SCHOOL_REGEX = re.compile(r"\b(?:" + "|".join(SCHOOLS) + r")\b", re.IGNORECASE)

DEGREE_WORDS = [
    "Bachelor",
    "Master",
    "Doctor of",
    "Doctorate",
    "PhD",
    "Ph.D",
    "Associate of",
    "Associate Degree",
    "Diploma",
    "Degree in",
    "Major in",
    "Minor in",
]
DEGREE_ABBREVIATIONS = [
    "B.S.",
    "M.S.",
    "B.Sc.",
    "M.Sc.",
    "BSc",
    "MSc",
    "B.A.",
    "M.A.",
    "M.B.A.",
    "MBA",
    "B.Eng.",
    "M.Eng.",
    "BEng",
    "MEng",
    "B.Tech",
    "M.Tech",
    "BTech",
    "MTech",
    "B.E.",
    "M.E.",
]
DEGREE_WORDS_REGEX = re.compile(
    r"\b(?:"
    + "|".join(re.escape(word) for word in DEGREE_WORDS)
    + r")(?:'?s)?(?!\w)",
    re.IGNORECASE,
)
DEGREE_ABBREVIATIONS_REGEX = re.compile(
    r"(?<![A-Za-z.])(?:"
    + "|".join(
        re.escape(abbreviation)
        for degree in DEGREE_ABBREVIATIONS
        for abbreviation in {degree, degree.rstrip(".")}
    )
    + r")(?![A-Za-z])"
)
# Bare "BS"/"MS" only count when followed by "in"/"of"; "Hattiesburg, MS" is a state
SHORT_DEGREE_REGEX = re.compile(r"(?<![A-Za-z])(?:BS|MS|BA|MA)(?=\s+(?:in|of)\b)")


def has_school_keyword(item: TextItem) -> bool:
    return bool(SCHOOL_REGEX.search(item.text))


def has_degree_keyword(item: TextItem) -> bool:
    text = item.text
    return bool(
        DEGREE_WORDS_REGEX.search(text)
        or DEGREE_ABBREVIATIONS_REGEX.search(text)
        or SHORT_DEGREE_REGEX.search(text)
    )


GPA_REGEXES = [
    re.compile(r"\bGPA\b[:\s]*([0-4]\.\d{1,2})", re.IGNORECASE),
    re.compile(r"\b([0-4]\.\d{1,2})\s*(?:/|out\s+of)\s*[45]\.0{1,2}\b", re.IGNORECASE),
    re.compile(r"\b([0-4]\.\d{1,2})\s+GPA\b", re.IGNORECASE),
]


def match_gpa(item: TextItem) -> Optional[str]:
    """Numeric GPA value, only when the text says GPA or shows a 4.0/5.0 scale."""
    for gpa_regex in GPA_REGEXES:
        match = gpa_regex.search(item.text)
        if match:
            return match.group(1)
    return None


# --- Work ---
JOB_TITLES_KEYWORDS = [
    "Engineer",
    "Intern",
    "Developer",
    "Analyst",
    "Assistant",
    "Manager",
    "Lead",
    "Specialist",
    "Coordinator",
    "Consultant",
    "Architect",
    "Designer",
    "Researcher",
    "Scientist",
    "Representative",
    "President",
    "Director",
    "Officer",
    "Head",
    "Supervisor",
    "Administrator",
    "Associate",
    "Programmer",
    "Technician",
    "Teacher",
    "Instructor",
    "Founder",
]
JOB_TITLE_REGEX = re.compile(
    r"\b(?:" + "|".join(JOB_TITLES_KEYWORDS) + r")s?\b", re.IGNORECASE
)


def has_job_title(item: TextItem) -> bool:
    if not JOB_TITLE_REGEX.search(item.text):
        return False
    # Not a full sentence, a stack or a date
    return (
        len(item.text.split()) <= 6
        and not is_likely_tech_stack(item)
        and not match_date_range_pattern(item)
    )


def has_company_suffix(item: TextItem) -> bool:
    return bool(
        re.search(
            r"\b(Inc\.?|LLC|Ltd\.?|Corp\.?|Corporation|Company|Co\.|Group|Solutions|Technologies|Labs?|GmbH|PLC)(?!\w)",
            item.text,
            re.IGNORECASE,
        )
    )


def is_likely_organization_name(item: TextItem) -> bool:
    text = item.text.strip()
    if not text or not has_letter(item) or "@" in text:
        return False
    if len(text.split()) > 6:
        return False
    if has_job_title(item) or match_date_pattern(item) or is_likely_tech_stack(item):
        return False
    return text[0].isupper() or text[0].isdigit() or has_company_suffix(item)
