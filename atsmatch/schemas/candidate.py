from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from atsmatch.normalize.utils import parse_date

DEFAULT_SECTION_ORDER: tuple[str, ...] = (
    "personal_info",
    "objective",
    "experience",
    "education",
    "skills",
    "projects",
    "certificates",
)


class PersonalInfo(BaseModel):
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    city: str = ""
    job_title: str | None = None
    linkedin: str | None = None
    github: str | None = None
    website: str | None = None


class WorkExperience(BaseModel):
    job_title: str = ""
    company: str = ""
    location: str = ""
    start_date: str | None = None
    end_date: str | None = None
    is_current: bool = False
    description: str = ""

    @field_validator("start_date", "end_date")
    @classmethod
    def _validate_date(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        if parse_date(value) is None:
            raise ValueError(f"unrecognised date '{value}', expected YYYY, YYYY-MM or YYYY-MM-DD")
        return value.strip()


class Education(BaseModel):
    degree: str = ""
    field: str = ""
    university: str = ""
    location: str = ""
    start_date: str | None = None
    graduation_date: str | None = None
    details: str | None = None


class TechnicalSkills(BaseModel):
    frontend: list[str] = Field(default_factory=list)
    backend: list[str] = Field(default_factory=list)
    database: list[str] = Field(default_factory=list)
    tools: list[str] = Field(default_factory=list)

    def all_skills(self) -> list[str]:
        return [*self.frontend, *self.backend, *self.database, *self.tools]


class Certificate(BaseModel):
    name: str
    issuer: str = ""
    date: str = ""


class Project(BaseModel):
    name: str
    description: str = ""
    technologies: str = ""
    link: str | None = None


class CandidateProfile(BaseModel):
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    objective: str = ""
    experience: list[WorkExperience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    technical_skills: TechnicalSkills | None = None
    certificates: list[Certificate] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    communication: str | None = None
    leadership: str | None = None
    section_order: list[str] = Field(default_factory=lambda: list(DEFAULT_SECTION_ORDER))

    def all_skills(self) -> list[str]:
        technical = self.technical_skills.all_skills() if self.technical_skills else []
        return [*self.skills, *technical]
