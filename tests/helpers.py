from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from resume_parser.models import Line, Section, TextItem

BODY_FONT = "Helvetica"
BOLD_FONT = "Helvetica-Bold"
LINE_SPACING = 14.0

# A row is a text, a (text, item options) pair, or None for an empty line
Row = Union[None, str, Tuple[str, Dict[str, Any]]]


def make_item(
    text: str,
    x: float = 72.0,
    y: float = 700.0,
    width: Optional[float] = None,
    height: float = 10.0,
    font_name: str = BODY_FONT,
    has_eol: bool = False,
) -> TextItem:
    return TextItem(
        text=text,
        x=x,
        y=y,
        width=len(text) * 5.0 if width is None else width,
        height=height,
        fontName=font_name,
        hasEOL=has_eol,
    )


def make_line(text: str, y: float = 700.0, **options) -> Line:
    return Line(items=[make_item(text, y=y, has_eol=True, **options)])


def make_document_items(
    rows: Sequence[Row], start_y: float = 750.0, line_spacing: float = LINE_SPACING
) -> List[TextItem]:
    """One end-of-line item per row, top to bottom."""
    items: List[TextItem] = []
    y = start_y
    for row in rows:
        if row is not None:
            text, options = (row, {}) if isinstance(row, str) else row
            items.append(make_item(text, y=y, has_eol=True, **options))
        y -= line_spacing
    return items


def make_lines(rows: Sequence[Row], start_y: float = 750.0) -> List[Line]:
    return [Line(items=[item]) for item in make_document_items(rows, start_y=start_y)]


def make_section(label: str, rows: Sequence[Row], start_y: float = 750.0) -> Section:
    return Section(
        label=label,
        heading=make_line(label, y=start_y + LINE_SPACING),
        lines=make_lines(rows, start_y=start_y),
    )


def get_texts(lines: Sequence[Line]) -> List[str]:
    return [line.text for line in lines]


WORKED_EXAMPLE_ITEMS = [
    make_item("John Doe", y=700),
    make_item("john@x.com", y=680, has_eol=True),
    make_item("EXPERIENCE", y=650, has_eol=True),
    make_item("Engineer at Acme, 2020-2022", y=620, has_eol=True),
]

SAMPLE_RESUME_ROWS: List[Row] = [
    ("Jane Smith", {"height": 18.0, "font_name": BOLD_FONT}),
    "jane.smith@example.com | (555) 123-4567 | Austin, TX | linkedin.com/in/janesmith",
    "SUMMARY",
    "Backend engineer with eight years of experience building data platforms.",
    "EXPERIENCE",
    "Senior Software Engineer | Globex Corp | Jan 2020 - Present",
    "• Led migration of billing services to Kubernetes",
    "• Cut API latency by 40%",
    None,
    "Software Engineer at Initech, Jun 2016 - Dec 2019",
    "• Built internal reporting tools",
    "EDUCATION",
    "University of Texas at Austin",
    "Bachelor of Science in Computer Science | 2012 - 2016",
    "GPA: 3.8/4.0",
    "PROJECTS",
    "Resume Parser | 2023",
    "• Parses PDF resumes into JSON",
    "SKILLS",
    "Languages: Python, Go, SQL",
    "Tools: Docker; Kubernetes",
    "CERTIFICATIONS",
    "AWS Certified Solutions Architect | Amazon | 2022",
    "VOLUNTEERING",
    "Mentor at Code Club",
]
