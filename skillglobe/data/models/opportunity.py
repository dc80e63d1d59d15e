"""
Job opportunity data models for SkillGlobe.

Defines the schema for opportunities, including skill requirements,
experience expectations and the weights used to score profiles.
"""

from datetime import date
from typing import Optional

from pydantic import Field, field_validator

from skillglobe.utils.constants import (
    DEFAULT_OPPORTUNITY_WEIGHTS,
    CompanySize,
    JobType,
    SeniorityLevel,
    SkillLevel,
    Urgency,
    WorkType,
)

from .base import EmbeddedModel


class RequiredSkill(EmbeddedModel):
    """A required (must-have) or preferred (nice-to-have) skill."""

    name: str
    level: SkillLevel
    required: bool = True  # False = nice to have
    weight: float = Field(default=1.0, ge=0, le=1)  # Importance, display only unless weighting is enabled

    @field_validator("name")
    @classmethod
    def strip_skill_name(cls, v: str) -> str:
        """Trim surrounding whitespace, keeping the display casing."""
        return v.strip()


class Opportunity(EmbeddedModel):
    """
    A job opportunity profiles are matched against.

    skill_weight + experience_weight + preferences_weight should sum
    to 1.0; the engine warns when they do not but scores anyway.
    """

    id: str
    title: str
    company: str = ""
    location: str = ""
    work_type: WorkType = WorkType.ONSITE
    job_type: JobType = JobType.FULL_TIME
    industry: str = ""
    company_size: CompanySize = CompanySize.MEDIUM
    salary_range: tuple[float, float] = (0, 0)
    description: str = ""

    # Requirements
    required_skills: list[RequiredSkill] = Field(default_factory=list)
    preferred_skills: list[RequiredSkill] = Field(default_factory=list)
    years_experience_required: float = Field(default=0, ge=0)
    seniority_level: SeniorityLevel = SeniorityLevel.MID
    education_required: Optional[str] = None
    certifications: list[str] = Field(default_factory=list)

    # Additional criteria
    urgency: Urgency = Urgency.MEDIUM
    posted_date: Optional[date] = None
    application_deadline: Optional[date] = None

    # Scoring weights
    skill_weight: float = Field(default=DEFAULT_OPPORTUNITY_WEIGHTS["skill_weight"], ge=0, le=1)
    experience_weight: float = Field(default=DEFAULT_OPPORTUNITY_WEIGHTS["experience_weight"], ge=0, le=1)
    preferences_weight: float = Field(default=DEFAULT_OPPORTUNITY_WEIGHTS["preferences_weight"], ge=0, le=1)

    @field_validator("certifications", mode="before")
    @classmethod
    def default_certifications(cls, v: Optional[list[str]]) -> list[str]:
        """Treat an explicit null certification list as empty."""
        return v or []

    @property
    def total_weight(self) -> float:
        """Calculate sum of the three scoring weights."""
        return self.skill_weight + self.experience_weight + self.preferences_weight

    @property
    def all_skills(self) -> list[RequiredSkill]:
        """Required skills followed by preferred skills."""
        return [*self.required_skills, *self.preferred_skills]
