"""
Pydantic data models for SkillGlobe.

This module provides all data models used by the matching engine:
profiles and opportunities as inputs, match analyses as outputs.
"""

# Base models
from .base import EmbeddedModel

# Profile models
from .profile import (
    Achievement,
    Certification,
    Experience,
    JobPreferences,
    Profile,
    Skill,
)

# Opportunity models
from .opportunity import (
    Opportunity,
    RequiredSkill,
)

# Match models
from .match import (
    ExperienceMatchAnalysis,
    GapAnalysis,
    MatchedSkill,
    MatchingResult,
    MatchReasoning,
    OpportunityMatch,
    PreferenceMatchAnalysis,
    ProfileMatch,
    SkillMatchAnalysis,
)

__all__ = [
    # Base
    "EmbeddedModel",
    # Profile
    "Achievement",
    "Certification",
    "Experience",
    "JobPreferences",
    "Profile",
    "Skill",
    # Opportunity
    "Opportunity",
    "RequiredSkill",
    # Match
    "ExperienceMatchAnalysis",
    "GapAnalysis",
    "MatchedSkill",
    "MatchingResult",
    "MatchReasoning",
    "OpportunityMatch",
    "PreferenceMatchAnalysis",
    "ProfileMatch",
    "SkillMatchAnalysis",
]
