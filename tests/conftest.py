"""
Shared test fixtures for the SkillGlobe test suite.

Sets environment variables before any skillglobe imports so settings are
built for testing, then provides factory fixtures for profiles,
opportunities and skills.
"""

import os

# === Set environment BEFORE any skillglobe imports ===
os.environ.setdefault("APP_ENVIRONMENT", "testing")
os.environ.setdefault("LOG_FILE_OUTPUT", "false")
os.environ.setdefault("LOG_CONSOLE_OUTPUT", "false")

from typing import Any, Optional

import pytest

from skillglobe.core.matching import ProfileMatchingEngine
from skillglobe.data.models import (
    Certification,
    Experience,
    JobPreferences,
    Opportunity,
    Profile,
    RequiredSkill,
    Skill,
)
from skillglobe.utils.constants import (
    CompanySize,
    SeniorityLevel,
    SkillLevel,
    WorkType,
)


# ---------------------------------------------------------------------------
# Factory fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_skill():
    """Factory that returns a callable to build profile Skills."""

    def _factory(name: str, level: SkillLevel = SkillLevel.PROFICIENT, **kwargs) -> Skill:
        return Skill(name=name, level=level, **kwargs)

    return _factory


@pytest.fixture
def make_required_skill():
    """Factory that returns a callable to build opportunity RequiredSkills."""

    def _factory(
        name: str,
        level: SkillLevel = SkillLevel.PROFICIENT,
        required: bool = True,
        weight: float = 1.0,
    ) -> RequiredSkill:
        return RequiredSkill(name=name, level=level, required=required, weight=weight)

    return _factory


@pytest.fixture
def make_experience():
    """Factory that returns a callable to build Experience entries."""

    def _factory(title: str = "Full Stack Developer", duration: str = "2 years", **kwargs) -> Experience:
        return Experience(title=title, company=kwargs.pop("company", "TechCorp"), duration=duration, **kwargs)

    return _factory


@pytest.fixture
def make_profile(make_skill, make_experience):
    """
    Factory that returns a callable to build Profiles.

    The defaults fully match the default opportunity from make_opportunity.
    """

    def _factory(
        id: str = "profile-1",
        name: str = "Full Stack Developer",
        primary_skills: Optional[list[Skill]] = None,
        secondary_skills: Optional[list[Skill]] = None,
        learning_skills: Optional[list[Skill]] = None,
        relevant_experience: Optional[list[Experience]] = None,
        certifications: Optional[list[Certification]] = None,
        salary_range: tuple[float, float] = (150000, 190000),
        work_type: Optional[list[WorkType]] = None,
        industries: Optional[list[str]] = None,
        company_size: Optional[list[CompanySize]] = None,
        locations: Optional[list[str]] = None,
        is_active: bool = True,
        **kwargs: Any,
    ) -> Profile:
        if primary_skills is None:
            primary_skills = [
                make_skill("React", SkillLevel.EXPERT),
                make_skill("Node.js", SkillLevel.ADVANCED),
            ]
        if secondary_skills is None:
            secondary_skills = [make_skill("AWS", SkillLevel.PROFICIENT)]
        if relevant_experience is None:
            relevant_experience = [
                make_experience("Senior Full Stack Developer", "3 years"),
                make_experience("Full Stack Developer", "2 years 6 months"),
            ]
        if work_type is None:
            work_type = [WorkType.HYBRID, WorkType.REMOTE]
        if industries is None:
            industries = ["Technology"]
        if company_size is None:
            company_size = [CompanySize.LARGE]
        if locations is None:
            locations = ["Mumbai, India"]

        return Profile(
            id=id,
            user_id="user-123",
            name=name,
            primary_skills=primary_skills,
            secondary_skills=secondary_skills,
            learning_skills=learning_skills or [],
            relevant_experience=relevant_experience,
            certifications=certifications or [],
            job_preferences=JobPreferences(
                salary_range=salary_range,
                work_type=work_type,
                industries=industries,
                company_size=company_size,
                locations=locations,
            ),
            is_active=is_active,
            **kwargs,
        )

    return _factory


@pytest.fixture
def make_opportunity(make_required_skill):
    """Factory that returns a callable to build Opportunities."""

    def _factory(
        id: str = "job-1",
        title: str = "Senior Full Stack Developer",
        required_skills: Optional[list[RequiredSkill]] = None,
        preferred_skills: Optional[list[RequiredSkill]] = None,
        years_experience_required: float = 5,
        seniority_level: SeniorityLevel = SeniorityLevel.SENIOR,
        salary_range: tuple[float, float] = (140000, 180000),
        work_type: WorkType = WorkType.HYBRID,
        location: str = "Mumbai",
        industry: str = "Technology",
        company_size: CompanySize = CompanySize.LARGE,
        certifications: Optional[list[str]] = None,
        skill_weight: float = 0.5,
        experience_weight: float = 0.3,
        preferences_weight: float = 0.2,
        **kwargs: Any,
    ) -> Opportunity:
        if required_skills is None:
            required_skills = [
                make_required_skill("React", SkillLevel.ADVANCED),
                make_required_skill("Node.js", SkillLevel.ADVANCED),
            ]
        if preferred_skills is None:
            preferred_skills = [
                make_required_skill("AWS", SkillLevel.INTERMEDIATE, required=False, weight=0.5),
            ]

        return Opportunity(
            id=id,
            title=title,
            company=kwargs.pop("company", "TechCorp Solutions"),
            location=location,
            work_type=work_type,
            industry=industry,
            company_size=company_size,
            salary_range=salary_range,
            required_skills=required_skills,
            preferred_skills=preferred_skills,
            years_experience_required=years_experience_required,
            seniority_level=seniority_level,
            certifications=certifications or [],
            skill_weight=skill_weight,
            experience_weight=experience_weight,
            preferences_weight=preferences_weight,
            **kwargs,
        )

    return _factory


# ---------------------------------------------------------------------------
# Matching engine fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def matching_engine():
    """ProfileMatchingEngine with default scoring and no audit entries."""
    return ProfileMatchingEngine(
        use_skill_weights=False,
        strict_duration_parsing=False,
        audit_matches=False,
    )


@pytest.fixture
def log_messages():
    """Collect loguru messages at WARNING and above during a test."""
    from loguru import logger

    messages: list[str] = []
    handler_id = logger.add(messages.append, level="WARNING", format="{message}")
    yield messages
    logger.remove(handler_id)
