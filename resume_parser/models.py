from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from resume_parser.utils import collapse_whitespace


class ResumeProfile(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    summary: Optional[str] = None
    links: List[str] = []

    def is_empty(self) -> bool:
        return not any(
            [self.name, self.email, self.phone, self.location, self.summary]
        ) and not self.links


class ResumeWorkExperience(BaseModel):
    company: Optional[str] = None
    job_title: Optional[str] = Field(alias="jobTitle", default=None)
    date: Optional[str] = None
    descriptions: List[str] = []

    class Config:
        populate_by_name = True


class ResumeEducation(BaseModel):
    school: Optional[str] = None
    degree: Optional[str] = None
    date: Optional[str] = None
    gpa: Optional[str] = None
    descriptions: List[str] = []


class ResumeProject(BaseModel):
    project: Optional[str] = None
    date: Optional[str] = None
    descriptions: List[str] = []


class ResumeCertification(BaseModel):
    name: Optional[str] = None
    issuer: Optional[str] = None
    date: Optional[str] = None


class ResumeSkills(BaseModel):
    skills: List[str] = []
    descriptions: List[str] = []


class ResumeCustom(BaseModel):
    descriptions: List[str] = []


class Resume(BaseModel):
    profile: ResumeProfile = Field(default_factory=ResumeProfile)
    work_experiences: List[ResumeWorkExperience] = Field(
        alias="workExperiences", default_factory=list
    )
    educations: List[ResumeEducation] = Field(default_factory=list)
    projects: List[ResumeProject] = Field(default_factory=list)
    skills: ResumeSkills = Field(default_factory=ResumeSkills)
    certifications: List[ResumeCertification] = Field(default_factory=list)
    # Sections no extractor recognizes, kept verbatim under their heading text
    custom: Dict[str, ResumeCustom] = Field(default_factory=dict)

    class Config:
        populate_by_name = True  # Allows using work_experiences and job_title

    def is_empty(self) -> bool:
        return (
            self.profile.is_empty()
            and not self.work_experiences
            and not self.educations
            and not self.projects
            and not self.skills.skills
            and not self.skills.descriptions
            and not self.certifications
            and not self.custom
        )


# For internal parser types
class TextItem(BaseModel):
    """
    A positioned run of text as produced by a document reader.

    Coordinates use a bottom-left origin: a larger ``y`` is higher on the page.
    """

    text: str
    x: float = 0.0
    y: float = 0.0
    width: float = Field(default=0.0, ge=0)
    height: float = Field(default=0.0, ge=0)
    font_name: str = Field(alias="fontName", default="")
    has_eol: bool = Field(alias="hasEOL", default=False)

    class Config:
        populate_by_name = True
        frozen = True


class Line(BaseModel):
    """
    Text items sharing one visual row, ordered left to right.
    """

    items: List[TextItem] = Field(default_factory=list)

    class Config:
        frozen = True

    @property
    def text(self) -> str:
        return collapse_whitespace(" ".join(item.text for item in self.items))

    @property
    def x(self) -> float:
        return min((item.x for item in self.items), default=0.0)

    @property
    def y(self) -> float:
        return min((item.y for item in self.items), default=0.0)

    @property
    def width(self) -> float:
        if not self.items:
            return 0.0
        return max(item.x + item.width for item in self.items) - self.x

    @property
    def height(self) -> float:
        if not self.items:
            return 0.0
        return max(item.y + item.height for item in self.items) - self.y

    @property
    def font_name(self) -> str:
        """Font carrying the most characters on the line."""
        char_count_by_font: Dict[str, int] = {}
        for item in self.items:
            char_count_by_font[item.font_name] = char_count_by_font.get(
                item.font_name, 0
            ) + len(item.text.strip())
        if not char_count_by_font:
            return ""
        return max(char_count_by_font, key=char_count_by_font.get)

    def to_text_item(self) -> TextItem:
        """Collapse the line into a single text item so item features apply to it."""
        return TextItem(
            text=self.text,
            x=self.x,
            y=self.y,
            width=self.width,
            height=self.height,
            fontName=self.font_name,
            hasEOL=True,
        )


class Section(BaseModel):
    label: str
    heading: Optional[Line] = None
    lines: List[Line] = Field(default_factory=list)

    class Config:
        frozen = True

    @property
    def all_lines(self) -> List[Line]:
        """Heading line (when present) followed by the body lines."""
        return ([self.heading] if self.heading is not None else []) + list(self.lines)
