"""
Natural-language reasoning for a profile match.

Each list of the reasoning is produced by an ordered table of rules; a
rule contributes its message when its predicate holds for the match.
Thresholds live in skillglobe.utils.constants.
"""

from dataclasses import dataclass
from typing import Callable

from skillglobe.data.models import MatchReasoning, Opportunity, Profile, ProfileMatch
from skillglobe.utils.constants import (
    EXPERIENCE_CONCERN_THRESHOLD,
    EXPERIENCE_MET_THRESHOLD,
    OVERALL_ASSESSMENTS,
    STRONG_SKILL_MATCH_THRESHOLD,
    MatchScoreLevel,
)


@dataclass(frozen=True)
class ReasoningRule:
    """A predicate over a profile match and the message it yields."""

    name: str
    predicate: Callable[[ProfileMatch], bool]
    message: Callable[[ProfileMatch], str]

    def apply(self, match: ProfileMatch) -> list[str]:
        """Return the rule's message as a one-item list if it fires."""
        if self.predicate(match):
            return [self.message(match)]
        return []


STRENGTH_RULES: tuple[ReasoningRule, ...] = (
    ReasoningRule(
        name="strong_skill_alignment",
        predicate=lambda m: m.skill_match.skill_match_percentage >= STRONG_SKILL_MATCH_THRESHOLD,
        message=lambda m: f"Strong skill alignment ({m.skill_match.skill_match_percentage}% match)",
    ),
    ReasoningRule(
        name="meets_experience",
        predicate=lambda m: m.experience_match.years_experience_match >= EXPERIENCE_MET_THRESHOLD,
        message=lambda m: "Meets experience requirements",
    ),
    ReasoningRule(
        name="work_preferences_align",
        predicate=lambda m: m.preference_match.work_type_match and m.preference_match.location_match,
        message=lambda m: "Work preferences align perfectly",
    ),
    ReasoningRule(
        name="advanced_expertise",
        predicate=lambda m: bool(m.skill_match.overqualified_skills),
        message=lambda m: f"Brings advanced expertise in {', '.join(m.skill_match.overqualified_skills)}",
    ),
)

CONCERN_RULES: tuple[ReasoningRule, ...] = (
    ReasoningRule(
        name="missing_critical_skills",
        predicate=lambda m: bool(m.skill_match.missing_critical_skills),
        message=lambda m: f"Missing critical skills: {', '.join(m.skill_match.missing_critical_skills)}",
    ),
    ReasoningRule(
        name="needs_more_experience",
        predicate=lambda m: m.experience_match.years_experience_match < EXPERIENCE_CONCERN_THRESHOLD,
        message=lambda m: "May need more experience for this role",
    ),
    ReasoningRule(
        name="salary_misaligned",
        predicate=lambda m: m.preference_match.salary_alignment == 0,
        message=lambda m: "Salary expectations may not align",
    ),
)

IMPROVEMENT_RULES: tuple[ReasoningRule, ...] = (
    ReasoningRule(
        name="skill_gaps",
        predicate=lambda m: bool(m.gap_analysis.skill_gaps),
        message=lambda m: f"Develop skills in: {', '.join(m.gap_analysis.skill_gaps)}",
    ),
    ReasoningRule(
        name="certification_gaps",
        predicate=lambda m: bool(m.gap_analysis.certification_gaps),
        message=lambda m: f"Consider getting: {', '.join(m.gap_analysis.certification_gaps)}",
    ),
)


def _apply_rules(rules: tuple[ReasoningRule, ...], match: ProfileMatch) -> list[str]:
    messages: list[str] = []
    for rule in rules:
        messages.extend(rule.apply(match))
    return messages


def overall_assessment(match_score: float) -> str:
    """One-line verdict for a 0-100 match score."""
    return OVERALL_ASSESSMENTS[MatchScoreLevel.from_score(match_score)]


def generate_match_reasoning(
    opportunity: Opportunity,
    profile: Profile,
    match: ProfileMatch,
) -> MatchReasoning:
    """
    Explain why a profile does or does not fit an opportunity.

    Args:
        opportunity: The opportunity that was matched
        profile: The profile behind the match
        match: The computed profile match

    Returns:
        MatchReasoning with strengths, concerns, improvement areas and verdict
    """
    return MatchReasoning(
        why_good_match=_apply_rules(STRENGTH_RULES, match),
        potential_concerns=_apply_rules(CONCERN_RULES, match),
        improvement_areas=_apply_rules(IMPROVEMENT_RULES, match),
        overall_assessment=overall_assessment(match.match_score),
    )
