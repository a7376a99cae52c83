import pytest

from resume_parser.models import TextItem
from resume_parser.parsers.extract_resume_from_sections.lib.common_features import (
    has_company_suffix,
    has_degree_keyword,
    has_job_title,
    has_school_keyword,
    is_bold,
    is_likely_tech_stack,
    match_date_pattern,
    match_email_address,
    match_github_profile_url,
    match_gpa,
    match_linkedin_profile_url,
    match_other_url,
    match_phone_number,
)


def item(text: str, font_name: str = "") -> TextItem:
    return TextItem(text=text, fontName=font_name)


def test_email_address():
    assert match_email_address(item("Email: jane.doe+cv@mail.example.org")).group(0) == (
        "jane.doe+cv@mail.example.org"
    )
    assert match_email_address(item("jane at example dot com")) is None


@pytest.mark.parametrize(
    "text, expected",
    [
        ("+1 (555) 123-4567", "+1 (555) 123-4567"),
        ("Phone: 555.123.4567", "555.123.4567"),
        ("+44 20 7946 0958", "+44 20 7946 0958"),
    ],
)
def test_phone_number(text, expected):
    assert match_phone_number(item(text)).group(0) == expected


@pytest.mark.parametrize(
    "text",
    ["2018 - 2022", "Room 12345", "1234567890123456789", "jane@123456789.com"],
)
def test_not_a_phone_number(text):
    assert match_phone_number(item(text)) is None


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Acme | Jan 2020 - Present", "Jan 2020 - Present"),
        ("Summer 2021 to Fall 2021", "Summer 2021 to Fall 2021"),
        ("2018 – 2022", "2018 – 2022"),
        ("09/2019 - 06/2021", "09/2019 - 06/2021"),
        ("Expected May 2026", "Expected May 2026"),
        ("Graduated 2019", "2019"),
    ],
)
def test_date_pattern(text, expected):
    assert match_date_pattern(item(text)).group(0) == expected


def test_no_date_pattern():
    assert match_date_pattern(item("Managed 1500 accounts")) is None


def test_gpa():
    assert match_gpa(item("GPA: 3.85")) == "3.85"
    assert match_gpa(item("3.6/4.0")) == "3.6"
    assert match_gpa(item("Version 2.1 release")) is None


def test_degree_keywords():
    assert has_degree_keyword(item("B.S. in Computer Science"))
    assert has_degree_keyword(item("Master's in Economics"))
    assert has_degree_keyword(item("MS in Data Science"))
    assert not has_degree_keyword(item("Hattiesburg, MS"))
    assert not has_degree_keyword(item("Masterpiece Studios"))


def test_school_keyword():
    assert has_school_keyword(item("Rice University"))
    assert not has_school_keyword(item("Acme Corp"))


def test_profile_urls():
    assert match_linkedin_profile_url(item("https://www.linkedin.com/in/jane-doe/")).group(
        0
    ) == "https://www.linkedin.com/in/jane-doe/"
    assert match_github_profile_url(item("github.com/janedoe")).group(0) == "github.com/janedoe"
    assert match_other_url(item("janedoe.dev")).group(0) == "janedoe.dev"
    assert match_other_url(item("jane@doe.dev")) is None


def test_job_title():
    assert has_job_title(item("Software Engineer"))
    assert has_job_title(item("Marketing Intern"))
    assert not has_job_title(item("Acme Corp"))
    assert not has_job_title(
        item("Worked closely with the lead engineer on the billing platform rewrite")
    )


def test_company_suffix_and_tech_stack():
    assert has_company_suffix(item("Initech LLC"))
    assert has_company_suffix(item("Acme, Inc."))
    assert not has_company_suffix(item("Incubator Program"))
    assert is_likely_tech_stack(item("Python, Django, PostgreSQL"))
    assert not is_likely_tech_stack(item("Led a team of five"))


def test_bold_font_names():
    assert is_bold(item("Jane", font_name="Calibri-Bold"))
    assert is_bold(item("Jane", font_name="Arial Black"))
    assert not is_bold(item("Jane", font_name="Calibri"))
