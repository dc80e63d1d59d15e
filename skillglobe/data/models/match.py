"""
Match and scoring data models for SkillGlobe.

Defines the per-profile score breakdown, gap analysis, reasoning and the
overall result of matching an opportunity against a user's profiles.
"""

from typing import Optional

from pydantic import Field

from skillglobe.utils.constants import (
    MatchQuality,
    MatchScoreLevel,
    SeniorityMatch,
    TimeToQualify,
)

from .base import EmbeddedModel
from .opportunity import Opportunity
from .profile import Profile


class MatchedSkill(EmbeddedModel):
    """Match result for a single opportunity skill found on the profile."""

    skill: str
    required: bool
    user_level: int  # 1-5
    required_level: int  # 1-5
    match_quality: MatchQuality


class SkillMatchAnalysis(EmbeddedModel):
    """Skill coverage of a profile against an opportunity."""

    matched_skills: list[MatchedSkill] = Field(default_factory=list)
    missing_critical_skills: list[str] = Field(default_factory=list)
    missing_preferred_skills: list[str] = Field(default_factory=list)
    overqualified_skills: list[str] = Field(default_factory=list)
    skill_match_percentage: int = 0  # 0-100

    @property
    def matched_skill_names(self) -> list[str]:
        """Names of the matched skills in opportunity order."""
        return [m.skill for m in self.matched_skills]


class ExperienceMatchAnalysis(EmbeddedModel):
    """Experience fit of a profile against an opportunity."""

    years_experience_match: int = 0  # 0-100
    role_relevance_score: int = 0  # 0-100
    industry_alignment: int = 0  # 0-100
    seniority_match: SeniorityMatch = SeniorityMatch.MATCH


class PreferenceMatchAnalysis(EmbeddedModel):
    """How well the opportunity fits what the profile is looking for."""

    salary_alignment: int = 0  # 0-100
    location_match: bool = False
    work_type_match: bool = False
    industry_preference_match: int = 0  # 0 or 100
    company_size_match: bool = False


class GapAnalysis(EmbeddedModel):
    """What the profile is missing and how long closing the gap takes."""

    skill_gaps: list[str] = Field(default_factory=list)
    experience_gaps: list[str] = Field(default_factory=list)
    certification_gaps: list[str] = Field(default_factory=list)
    time_to_qualify: TimeToQualify = TimeToQualify.IMMEDIATELY
    improvement_suggestions: list[str] = Field(default_factory=list)

    @property
    def has_gaps(self) -> bool:
        """True when any gap bucket is non-empty."""
        return bool(self.skill_gaps or self.experience_gaps or self.certification_gaps)


class MatchReasoning(EmbeddedModel):
    """Human-readable explanation of the best match."""

    why_good_match: list[str] = Field(default_factory=list)
    potential_concerns: list[str] = Field(default_factory=list)
    improvement_areas: list[str] = Field(default_factory=list)
    overall_assessment: str = ""


class ProfileMatch(EmbeddedModel):
    """Score breakdown for one profile."""

    profile_id: str
    profile_name: str
    match_score: int  # 0-100
    skill_match: SkillMatchAnalysis
    experience_match: ExperienceMatchAnalysis
    preference_match: PreferenceMatchAnalysis
    gap_analysis: GapAnalysis

    @property
    def score_level(self) -> MatchScoreLevel:
        """Categorical level of the match score."""
        return MatchScoreLevel.from_score(self.match_score)


class MatchingResult(EmbeddedModel):
    """
    Result of matching one opportunity against a user's profiles.

    profile_matches is sorted by match_score, highest first, and
    best_matching_profile is the profile behind profile_matches[0].
    """

    opportunity_id: str
    best_matching_profile: Profile
    match_score: int  # 0-100
    profile_matches: list[ProfileMatch] = Field(default_factory=list)
    reasoning: MatchReasoning

    @property
    def best_match(self) -> ProfileMatch:
        """The top-ranked profile match."""
        return self.profile_matches[0]


class OpportunityMatch(EmbeddedModel):
    """One row of an opportunities feed ranked by best profile score."""

    opportunity: Opportunity
    result: Optional[MatchingResult] = None
    best_match_score: int = 0
    error: Optional[str] = None  # Why no result could be computed
