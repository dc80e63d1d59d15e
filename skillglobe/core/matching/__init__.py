"""Profile-opportunity matching engine module."""

from .duration import MalformedDurationError, parse_duration_to_years
from .matching_engine import (
    EmptyCandidateSetError,
    ProfileMatchingEngine,
    calculate_preference_score,
    find_best_profile_match,
    get_matching_engine,
    normalize_skill_name,
)
from .reasoning import ReasoningRule, generate_match_reasoning

__all__ = [
    "EmptyCandidateSetError",
    "MalformedDurationError",
    "ProfileMatchingEngine",
    "ReasoningRule",
    "calculate_preference_score",
    "find_best_profile_match",
    "generate_match_reasoning",
    "get_matching_engine",
    "normalize_skill_name",
    "parse_duration_to_years",
]
