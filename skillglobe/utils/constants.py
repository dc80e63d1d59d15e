"""
Application-wide constants for SkillGlobe Matcher.

This module contains all constant values used throughout the application.
Modify these values to customize behavior without changing code logic.
"""

from enum import Enum, IntEnum
from typing import Final


# =============================================================================
# Skill & Seniority Scales
# =============================================================================


class SkillLevel(IntEnum):
    """Ordinal proficiency scale for a skill (1-5)."""

    BEGINNER = 1
    INTERMEDIATE = 2
    PROFICIENT = 3
    ADVANCED = 4
    EXPERT = 5


class SeniorityLevel(str, Enum):
    """Seniority of a role or of a profile, lowest first."""

    JUNIOR = "junior"
    MID = "mid"
    SENIOR = "senior"
    LEAD = "lead"
    PRINCIPAL = "principal"

    @classmethod
    def ordinal(cls, level: "SeniorityLevel | str") -> int:
        """Position of a level on the junior..principal scale."""
        return list(cls).index(cls(level))

    @classmethod
    def from_years(cls, years: float) -> "SeniorityLevel":
        """Infer seniority from total years of experience."""
        for threshold, level in SENIORITY_YEAR_BUCKETS:
            if years < threshold:
                return level
        return cls.PRINCIPAL


# Upper bounds (exclusive) in years for each inferred seniority
SENIORITY_YEAR_BUCKETS: Final[tuple[tuple[float, SeniorityLevel], ...]] = (
    (2, SeniorityLevel.JUNIOR),
    (5, SeniorityLevel.MID),
    (8, SeniorityLevel.SENIOR),
    (12, SeniorityLevel.LEAD),
)


class WorkType(str, Enum):
    """Where the work happens."""

    REMOTE = "remote"
    HYBRID = "hybrid"
    ONSITE = "onsite"


class JobType(str, Enum):
    """Employment arrangement of an opportunity."""

    FULL_TIME = "full_time"
    PART_TIME = "part_time"
    CONTRACT = "contract"


class CompanySize(str, Enum):
    """Company size buckets used by opportunities and preferences."""

    STARTUP = "startup"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    ENTERPRISE = "enterprise"


class Urgency(str, Enum):
    """Hiring urgency of an opportunity."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ProfileCategory(str, Enum):
    """Primary career path of a profile."""

    DATA_ENGINEER = "data_engineer"
    DATA_ANALYST = "data_analyst"
    DATA_SCIENTIST = "data_scientist"
    FULL_STACK_DEVELOPER = "full_stack_developer"
    FRONTEND_DEVELOPER = "frontend_developer"
    BACKEND_DEVELOPER = "backend_developer"
    DEVOPS_ENGINEER = "devops_engineer"
    ML_ENGINEER = "ml_engineer"
    PRODUCT_MANAGER = "product_manager"
    BUSINESS_ANALYST = "business_analyst"
    CUSTOM = "custom"


# =============================================================================
# Match Result Enums
# =============================================================================


class MatchQuality(str, Enum):
    """How well a profile's skill level covers the required level."""

    PERFECT = "perfect"
    GOOD = "good"
    ADEQUATE = "adequate"
    BELOW = "below"

    @classmethod
    def from_level_difference(cls, diff: int) -> "MatchQuality":
        """Map profile level minus required level to a quality tier."""
        if diff >= 0:
            return cls.PERFECT
        elif diff >= -1:
            return cls.GOOD
        elif diff >= -2:
            return cls.ADEQUATE
        return cls.BELOW


class SeniorityMatch(str, Enum):
    """Inferred profile seniority relative to the opportunity."""

    UNDER = "under"
    MATCH = "match"
    OVER = "over"


# =============================================================================
# Scoring Constants
# =============================================================================

# Levels above the requirement at which a skill counts as overqualified
OVERQUALIFIED_LEVEL_GAP: Final[int] = 2

# Points per relevant role title, capped at 100
ROLE_RELEVANCE_POINTS: Final[int] = 25

# Industry alignment when experience does / does not line up
INDUSTRY_ALIGNED_SCORE: Final[int] = 100
INDUSTRY_BASELINE_SCORE: Final[int] = 50

# Salary alignment loses one point per this many currency units of distance
SALARY_DECAY_DIVISOR: Final[float] = 10000.0

# Fixed weights folding preference checks into a 0-100 score
PREFERENCE_SCORE_WEIGHTS: Final[dict[str, float]] = {
    "salary": 0.40,
    "work_type": 0.25,
    "location": 0.20,
    "industry": 0.10,
    "company_size": 0.05,
}

# Typical opportunity-level weights when a posting does not specify its own
DEFAULT_OPPORTUNITY_WEIGHTS: Final[dict[str, float]] = {
    "skill_weight": 0.4,
    "experience_weight": 0.3,
    "preferences_weight": 0.3,
}

# Score thresholds (0-100 scale)
SCORE_THRESHOLDS: Final[dict[str, float]] = {
    "excellent": 85,
    "good": 70,
    "moderate": 50,
}

# Reasoning thresholds
STRONG_SKILL_MATCH_THRESHOLD: Final[int] = 80
EXPERIENCE_MET_THRESHOLD: Final[int] = 100
EXPERIENCE_CONCERN_THRESHOLD: Final[int] = 80

# Skill gap count above which qualifying takes longer
MANY_SKILL_GAPS: Final[int] = 2


class TimeToQualify(str, Enum):
    """Coarse estimate of how long closing the gaps takes."""

    IMMEDIATELY = "Immediately"
    THREE_TO_SIX_MONTHS = "3-6 months"
    SIX_TO_TWELVE_MONTHS = "6-12 months"
    ONE_TO_TWO_YEARS = "1-2 years"


class MatchScoreLevel(Enum):
    """Categorical levels for match scores."""

    EXCELLENT = "excellent"
    GOOD = "good"
    MODERATE = "moderate"
    LOW = "low"

    @classmethod
    def from_score(cls, score: float) -> "MatchScoreLevel":
        """Convert a numeric 0-100 score to a level."""
        if score >= SCORE_THRESHOLDS["excellent"]:
            return cls.EXCELLENT
        elif score >= SCORE_THRESHOLDS["good"]:
            return cls.GOOD
        elif score >= SCORE_THRESHOLDS["moderate"]:
            return cls.MODERATE
        return cls.LOW


# One-line assessment shown for each score level
OVERALL_ASSESSMENTS: Final[dict[MatchScoreLevel, str]] = {
    MatchScoreLevel.EXCELLENT: "Excellent match - strong candidate for this role",
    MatchScoreLevel.GOOD: "Good match - worth pursuing with some preparation",
    MatchScoreLevel.MODERATE: "Moderate match - may require significant skill development",
    MatchScoreLevel.LOW: "Low match - consider other opportunities or extensive preparation",
}


class AuditAction(str, Enum):
    """Types of actions that can be audited."""

    PROFILE_MATCHED = "profile_matched"
    OPPORTUNITIES_RANKED = "opportunities_ranked"
    MATCH_FAILED = "match_failed"
