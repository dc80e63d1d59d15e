"""
Profile-to-opportunity matching engine.

Scores every active profile of a user against an opportunity using
skill, experience and preference sub-scores, ranks the profiles, and
explains the best one with a gap analysis and templated reasoning.
"""

import math
from typing import Optional

from skillglobe.core.matching.duration import parse_duration_to_years
from skillglobe.core.matching.reasoning import generate_match_reasoning
from skillglobe.data.models import (
    ExperienceMatchAnalysis,
    GapAnalysis,
    MatchedSkill,
    MatchingResult,
    MatchReasoning,
    Opportunity,
    OpportunityMatch,
    PreferenceMatchAnalysis,
    Profile,
    ProfileMatch,
    RequiredSkill,
    Skill,
    SkillMatchAnalysis,
)
from skillglobe.utils.config import get_settings
from skillglobe.utils.constants import (
    INDUSTRY_ALIGNED_SCORE,
    INDUSTRY_BASELINE_SCORE,
    MANY_SKILL_GAPS,
    OVERQUALIFIED_LEVEL_GAP,
    PREFERENCE_SCORE_WEIGHTS,
    ROLE_RELEVANCE_POINTS,
    SALARY_DECAY_DIVISOR,
    AuditAction,
    MatchQuality,
    SeniorityLevel,
    SeniorityMatch,
    TimeToQualify,
    WorkType,
)
from skillglobe.utils.logger import audit_log, get_logger

logger = get_logger(__name__)


class EmptyCandidateSetError(ValueError):
    """Raised when no active profile is left to match."""

    def __init__(self, opportunity_id: str):
        self.opportunity_id = opportunity_id
        super().__init__(f"No active profiles available for matching opportunity {opportunity_id}")


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return math.floor(value + 0.5)


def normalize_skill_name(name: str) -> str:
    """Comparison key for skill identity."""
    return name.strip().lower()


def find_profile_skill(skills: list[Skill], name: str) -> Optional[Skill]:
    """First skill whose normalized name equals the given one."""
    key = normalize_skill_name(name)
    for skill in skills:
        if normalize_skill_name(skill.name) == key:
            return skill
    return None


def get_skill_match_quality(user_level: int, required_level: int) -> MatchQuality:
    """Quality tier of a profile skill level against the required level."""
    return MatchQuality.from_level_difference(user_level - required_level)


def is_role_relevant(profile_role: str, opportunity_role: str) -> bool:
    """True if any word of one title contains, or is contained in, a word of the other."""
    profile_keywords = profile_role.lower().split()
    opportunity_keywords = opportunity_role.lower().split()

    return any(
        keyword in opp_keyword or opp_keyword in keyword
        for keyword in profile_keywords
        for opp_keyword in opportunity_keywords
    )


def infer_seniority_level(total_years: float) -> SeniorityLevel:
    """Seniority implied by total years of experience."""
    return SeniorityLevel.from_years(total_years)


def compare_seniority_levels(
    profile_level: SeniorityLevel | str,
    required_level: SeniorityLevel | str,
) -> SeniorityMatch:
    """Compare two seniority levels by their position on the scale."""
    profile_index = SeniorityLevel.ordinal(profile_level)
    required_index = SeniorityLevel.ordinal(required_level)

    if profile_index < required_index:
        return SeniorityMatch.UNDER
    if profile_index > required_index:
        return SeniorityMatch.OVER
    return SeniorityMatch.MATCH


def calculate_preference_score(preferences: PreferenceMatchAnalysis) -> int:
    """
    Fold the preference checks into one 0-100 score.

    Salary and industry are already 0-100 and scale by their weight;
    the boolean checks contribute their full weight when true.
    """
    score = 0.0
    score += preferences.salary_alignment * PREFERENCE_SCORE_WEIGHTS["salary"]
    if preferences.work_type_match:
        score += 100 * PREFERENCE_SCORE_WEIGHTS["work_type"]
    if preferences.location_match:
        score += 100 * PREFERENCE_SCORE_WEIGHTS["location"]
    score += preferences.industry_preference_match * PREFERENCE_SCORE_WEIGHTS["industry"]
    if preferences.company_size_match:
        score += 100 * PREFERENCE_SCORE_WEIGHTS["company_size"]
    return round_half_up(score)


def estimate_time_to_qualify(
    skill_gaps: list[str],
    experience_gaps: list[str],
    certification_gaps: list[str],
) -> TimeToQualify:
    """Coarse estimate driven by which gap buckets are non-empty."""
    if experience_gaps:
        return TimeToQualify.ONE_TO_TWO_YEARS
    if len(skill_gaps) > MANY_SKILL_GAPS:
        return TimeToQualify.SIX_TO_TWELVE_MONTHS
    if skill_gaps or certification_gaps:
        return TimeToQualify.THREE_TO_SIX_MONTHS
    return TimeToQualify.IMMEDIATELY


def _same_text(a: str, b: str) -> bool:
    return a.lower() == b.lower()


# -----------------------------------------------------------------------------
# Engine
# -----------------------------------------------------------------------------


class ProfileMatchingEngine:
    """
    Engine for picking the best of a user's profiles for an opportunity.

    Uses a multi-factor approach weighted per opportunity:
    - Skills: required skills found on the profile
    - Experience: parsed years against the requirement
    - Preferences: salary, work type, location, industry, company size

    The engine holds configuration only; every call is a pure function
    of its inputs.
    """

    def __init__(
        self,
        use_skill_weights: Optional[bool] = None,
        strict_duration_parsing: Optional[bool] = None,
        audit_matches: Optional[bool] = None,
    ):
        """
        Initialize the matching engine.

        Args:
            use_skill_weights: Weight required skills by RequiredSkill.weight
            strict_duration_parsing: Raise on unparseable experience durations
            audit_matches: Write an audit entry for each best-profile decision

        Unset arguments fall back to the MATCHING_* settings.
        """
        settings = get_settings().matching
        self.use_skill_weights = (
            settings.use_skill_weights if use_skill_weights is None else use_skill_weights
        )
        self.strict_duration_parsing = (
            settings.strict_duration_parsing
            if strict_duration_parsing is None
            else strict_duration_parsing
        )
        self.audit_matches = settings.audit_matches if audit_matches is None else audit_matches
        self.weight_sum_tolerance = settings.weight_sum_tolerance

    def find_best_profile_match(
        self,
        opportunity: Opportunity,
        profiles: list[Profile],
    ) -> MatchingResult:
        """
        Find the best matching profile for an opportunity.

        Args:
            opportunity: The opportunity to match against
            profiles: Candidate profiles; inactive ones are skipped

        Returns:
            MatchingResult with every active profile ranked, highest first

        Raises:
            EmptyCandidateSetError: If no profile is active
        """
        active_profiles = [p for p in profiles if p.is_active]
        if not active_profiles:
            raise EmptyCandidateSetError(opportunity.id)

        self._check_weights(opportunity)

        scored = [
            (profile, self.calculate_profile_match(opportunity, profile))
            for profile in active_profiles
        ]
        # sorted() is stable, so ties keep input order
        scored = sorted(scored, key=lambda pair: pair[1].match_score, reverse=True)

        best_profile, best_match = scored[0]
        reasoning = self.generate_match_reasoning(opportunity, best_profile, best_match)

        logger.debug(
            f"Opportunity {opportunity.id}: best profile {best_profile.id} "
            f"scored {best_match.match_score} of {len(scored)} active profile(s)"
        )
        if self.audit_matches:
            audit_log(
                AuditAction.PROFILE_MATCHED.value,
                {
                    "opportunity_id": opportunity.id,
                    "profile_id": best_profile.id,
                    "match_score": best_match.match_score,
                    "profiles_considered": len(scored),
                },
            )

        return MatchingResult(
            opportunity_id=opportunity.id,
            best_matching_profile=best_profile,
            match_score=best_match.match_score,
            profile_matches=[match for _, match in scored],
            reasoning=reasoning,
        )

    def calculate_profile_match(
        self,
        opportunity: Opportunity,
        profile: Profile,
    ) -> ProfileMatch:
        """Calculate the weighted match of one profile."""
        skill_match = self.analyze_skill_match(opportunity, profile)
        experience_match = self.analyze_experience_match(opportunity, profile)
        preference_match = self.analyze_preference_match(opportunity, profile)
        gap_analysis = self.analyze_gaps(opportunity, profile)

        overall_score = (
            skill_match.skill_match_percentage * opportunity.skill_weight
            + experience_match.years_experience_match * opportunity.experience_weight
            + calculate_preference_score(preference_match) * opportunity.preferences_weight
        )

        return ProfileMatch(
            profile_id=profile.id,
            profile_name=profile.name,
            match_score=round_half_up(overall_score),
            skill_match=skill_match,
            experience_match=experience_match,
            preference_match=preference_match,
            gap_analysis=gap_analysis,
        )

    def analyze_skill_match(
        self,
        opportunity: Opportunity,
        profile: Profile,
    ) -> SkillMatchAnalysis:
        """Compare opportunity skills with the profile's primary and secondary skills."""
        profile_skills = profile.current_skills

        analysis = SkillMatchAnalysis()
        matched_required: list[RequiredSkill] = []

        for req_skill in opportunity.all_skills:
            profile_skill = find_profile_skill(profile_skills, req_skill.name)

            if profile_skill is None:
                if req_skill.required:
                    analysis.missing_critical_skills.append(req_skill.name)
                else:
                    analysis.missing_preferred_skills.append(req_skill.name)
                continue

            analysis.matched_skills.append(
                MatchedSkill(
                    skill=req_skill.name,
                    required=req_skill.required,
                    user_level=profile_skill.level,
                    required_level=req_skill.level,
                    match_quality=get_skill_match_quality(profile_skill.level, req_skill.level),
                )
            )
            if req_skill.required:
                matched_required.append(req_skill)

            if profile_skill.level >= req_skill.level + OVERQUALIFIED_LEVEL_GAP:
                analysis.overqualified_skills.append(req_skill.name)

        analysis.skill_match_percentage = self._skill_match_percentage(
            opportunity.required_skills, matched_required
        )
        return analysis

    def _skill_match_percentage(
        self,
        required_skills: list[RequiredSkill],
        matched_required: list[RequiredSkill],
    ) -> int:
        """Share of required skills the profile covers, 0-100."""
        if not required_skills:
            return 100

        if self.use_skill_weights:
            total_weight = sum(s.weight for s in required_skills)
            if total_weight > 0:
                matched_weight = sum(s.weight for s in matched_required)
                return round_half_up(100 * matched_weight / total_weight)

        return round_half_up(100 * len(matched_required) / len(required_skills))

    def total_experience_years(self, profile: Profile) -> float:
        """Sum of parsed durations over the profile's relevant experience."""
        return sum(
            parse_duration_to_years(exp.duration, strict=self.strict_duration_parsing)
            for exp in profile.relevant_experience
        )

    def analyze_experience_match(
        self,
        opportunity: Opportunity,
        profile: Profile,
    ) -> ExperienceMatchAnalysis:
        """Compare the profile's experience with the opportunity's expectations."""
        total_years = self.total_experience_years(profile)
        required_years = opportunity.years_experience_required

        if required_years <= 0:
            years_experience_match = 100
        else:
            years_experience_match = min(100, round_half_up(100 * total_years / required_years))

        relevant_roles = [
            exp for exp in profile.relevant_experience
            if is_role_relevant(exp.title, opportunity.title)
        ]
        role_relevance_score = min(100, len(relevant_roles) * ROLE_RELEVANCE_POINTS)

        has_industry_experience = bool(profile.relevant_experience) and any(
            _same_text(industry, opportunity.industry)
            for industry in profile.job_preferences.industries
        )
        industry_alignment = (
            INDUSTRY_ALIGNED_SCORE if has_industry_experience else INDUSTRY_BASELINE_SCORE
        )

        profile_seniority = infer_seniority_level(total_years)
        seniority_match = compare_seniority_levels(profile_seniority, opportunity.seniority_level)

        return ExperienceMatchAnalysis(
            years_experience_match=years_experience_match,
            role_relevance_score=role_relevance_score,
            industry_alignment=industry_alignment,
            seniority_match=seniority_match,
        )

    def analyze_preference_match(
        self,
        opportunity: Opportunity,
        profile: Profile,
    ) -> PreferenceMatchAnalysis:
        """Check the opportunity against the profile's job preferences."""
        prefs = profile.job_preferences

        user_min_salary, user_max_salary = prefs.salary_range
        job_min_salary, job_max_salary = opportunity.salary_range

        has_overlap = user_min_salary <= job_max_salary and user_max_salary >= job_min_salary
        if has_overlap:
            salary_alignment = 100
        else:
            distance = abs(user_min_salary - job_max_salary)
            salary_alignment = round_half_up(max(0.0, 100 - distance / SALARY_DECAY_DIVISOR))

        work_type_match = opportunity.work_type in prefs.work_type
        location_match = (
            opportunity.work_type == WorkType.REMOTE
            or any(opportunity.location.lower() in loc.lower() for loc in prefs.locations)
            or "Remote" in prefs.locations
        )

        industry_preference_match = 100 if any(
            _same_text(industry, opportunity.industry) for industry in prefs.industries
        ) else 0

        company_size_match = opportunity.company_size in prefs.company_size

        return PreferenceMatchAnalysis(
            salary_alignment=salary_alignment,
            location_match=location_match,
            work_type_match=work_type_match,
            industry_preference_match=industry_preference_match,
            company_size_match=company_size_match,
        )

    def analyze_gaps(
        self,
        opportunity: Opportunity,
        profile: Profile,
    ) -> GapAnalysis:
        """List missing skills, experience and certifications with suggestions."""
        skill_gaps: list[str] = []
        experience_gaps: list[str] = []
        certification_gaps: list[str] = []
        improvement_suggestions: list[str] = []
        profile_skills = profile.current_skills

        for req_skill in opportunity.required_skills:
            if find_profile_skill(profile_skills, req_skill.name) is None:
                skill_gaps.append(req_skill.name)
                improvement_suggestions.append(f"Learn {req_skill.name} to meet requirements")

        total_years = self.total_experience_years(profile)
        if total_years < opportunity.years_experience_required:
            gap = opportunity.years_experience_required - total_years
            experience_gaps.append(f"Need {gap:.1f} more years of experience")

        for req_cert in opportunity.certifications:
            has_cert = any(
                req_cert.lower() in cert.name.lower() for cert in profile.certifications
            )
            if not has_cert:
                certification_gaps.append(req_cert)
                improvement_suggestions.append(f"Get {req_cert} certification")

        return GapAnalysis(
            skill_gaps=skill_gaps,
            experience_gaps=experience_gaps,
            certification_gaps=certification_gaps,
            time_to_qualify=estimate_time_to_qualify(skill_gaps, experience_gaps, certification_gaps),
            improvement_suggestions=improvement_suggestions,
        )

    def generate_match_reasoning(
        self,
        opportunity: Opportunity,
        profile: Profile,
        match: ProfileMatch,
    ) -> MatchReasoning:
        """Generate human-readable reasoning for a profile match."""
        return generate_match_reasoning(opportunity, profile, match)

    def rank_opportunities(
        self,
        opportunities: list[Opportunity],
        profiles: list[Profile],
        min_score: Optional[float] = None,
    ) -> list[OpportunityMatch]:
        """
        Rank opportunities by the score of their best-matching profile.

        Opportunities that cannot be matched stay in the feed with a
        zero score and the reason.

        Args:
            opportunities: Opportunities to rank
            profiles: The user's profiles
            min_score: Optional minimum best-match score to keep

        Returns:
            Sorted list with highest scores first
        """
        rows = []
        for opportunity in opportunities:
            try:
                result = self.find_best_profile_match(opportunity, profiles)
            except EmptyCandidateSetError as e:
                logger.warning(f"Error calculating match for opportunity {opportunity.id}: {e}")
                if self.audit_matches:
                    audit_log(
                        AuditAction.MATCH_FAILED.value,
                        {"opportunity_id": opportunity.id, "reason": str(e)},
                        audit_type="FAILURE",
                    )
                rows.append(OpportunityMatch(opportunity=opportunity, error=str(e)))
                continue

            rows.append(
                OpportunityMatch(
                    opportunity=opportunity,
                    result=result,
                    best_match_score=result.match_score,
                )
            )

        rows = sorted(rows, key=lambda row: row.best_match_score, reverse=True)
        if min_score is not None:
            rows = [row for row in rows if row.best_match_score >= min_score]

        if self.audit_matches:
            audit_log(
                AuditAction.OPPORTUNITIES_RANKED.value,
                {"opportunities": len(opportunities), "ranked": len(rows)},
            )
        return rows

    def _check_weights(self, opportunity: Opportunity) -> None:
        """Warn when the opportunity's scoring weights do not sum to 1.0."""
        total = opportunity.total_weight
        if abs(total - 1.0) > self.weight_sum_tolerance:
            logger.warning(
                f"Scoring weights of opportunity {opportunity.id} sum to {total:.2f}, "
                "expected 1.0; scores may fall outside 0-100"
            )


# Default instance
_matching_engine: Optional[ProfileMatchingEngine] = None


def get_matching_engine() -> ProfileMatchingEngine:
    """Get the default matching engine instance."""
    global _matching_engine
    if _matching_engine is None:
        _matching_engine = ProfileMatchingEngine()
    return _matching_engine


def find_best_profile_match(
    opportunity: Opportunity,
    profiles: list[Profile],
) -> MatchingResult:
    """Match an opportunity against profiles with the default engine."""
    return get_matching_engine().find_best_profile_match(opportunity, profiles)
