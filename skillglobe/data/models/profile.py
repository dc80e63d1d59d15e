"""
Profile data models for SkillGlobe.

A user can own several profiles ("Data Engineer", "Frontend Developer"),
each with its own skills, experience and job preferences.
"""

from datetime import date
from typing import Optional

from pydantic import Field, field_validator

from skillglobe.utils.constants import (
    CompanySize,
    JobType,
    ProfileCategory,
    SkillLevel,
    WorkType,
)

from .base import EmbeddedModel


class Skill(EmbeddedModel):
    """Represents a single skill held by a profile."""

    name: str
    level: SkillLevel
    years_experience: float = 0
    last_used: Optional[date] = None  # When last used professionally
    certifications: list[str] = Field(default_factory=list)
    projects: list[str] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def strip_skill_name(cls, v: str) -> str:
        """Trim surrounding whitespace, keeping the display casing."""
        return v.strip()


class Experience(EmbeddedModel):
    """Represents a single work experience entry."""

    id: Optional[str] = None
    title: str
    company: str = ""
    duration: str = ""  # Free text, e.g. "2 years 6 months"
    start_date: Optional[date] = None
    end_date: Optional[date] = None  # None indicates current position
    description: str = ""
    skills: list[str] = Field(default_factory=list)
    achievements: list[str] = Field(default_factory=list)
    verified: bool = False


class Achievement(EmbeddedModel):
    """A notable achievement listed on a profile."""

    id: Optional[str] = None
    title: str
    description: str = ""
    achieved_on: Optional[date] = Field(default=None, alias="date")
    category: str = ""
    verified: bool = False


class Certification(EmbeddedModel):
    """Represents a professional certification."""

    id: Optional[str] = None
    name: str
    issuer: str = ""
    issue_date: Optional[date] = None
    expiry_date: Optional[date] = None
    credential_id: Optional[str] = None
    verification_url: Optional[str] = None
    verified: bool = False

    @property
    def is_valid(self) -> bool:
        """Check if certification is still valid."""
        if not self.expiry_date:
            return True
        return self.expiry_date >= date.today()


class JobPreferences(EmbeddedModel):
    """What kind of job a profile is looking for."""

    salary_range: tuple[float, float] = (0, 0)
    work_type: list[WorkType] = Field(default_factory=list)
    job_types: list[JobType] = Field(default_factory=list)
    industries: list[str] = Field(default_factory=list)
    company_size: list[CompanySize] = Field(default_factory=list)
    locations: list[str] = Field(default_factory=list)
    travel_willingness: int = Field(default=0, ge=0, le=100)  # percent
    availability_date: Optional[date] = None

    @field_validator("salary_range")
    @classmethod
    def validate_salary_range(cls, v: tuple[float, float]) -> tuple[float, float]:
        """Validate salary amounts are non-negative."""
        if v[0] < 0 or v[1] < 0:
            raise ValueError("Salary amount must be non-negative")
        return v


class Profile(EmbeddedModel):
    """
    A specialized career profile owned by a user.

    Only active profiles take part in matching.
    """

    id: str
    user_id: str = ""
    name: str
    description: str = ""
    category: ProfileCategory = ProfileCategory.CUSTOM
    sub_categories: list[str] = Field(default_factory=list)

    # Skills organized by relevance
    primary_skills: list[Skill] = Field(default_factory=list)
    secondary_skills: list[Skill] = Field(default_factory=list)
    learning_skills: list[Skill] = Field(default_factory=list)  # Not used for matching

    # Experience tailored to profile
    relevant_experience: list[Experience] = Field(default_factory=list)
    achievements: list[Achievement] = Field(default_factory=list)
    certifications: list[Certification] = Field(default_factory=list)

    job_preferences: JobPreferences = Field(default_factory=JobPreferences)

    matching_weight: float = 1.0  # Profile priority for matching
    is_active: bool = True

    @property
    def current_skills(self) -> list[Skill]:
        """Skills the profile can offer today (primary, then secondary)."""
        return [*self.primary_skills, *self.secondary_skills]
