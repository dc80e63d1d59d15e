"""
Tests for Pydantic data models in skillglobe.data.models.
"""

from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from skillglobe.data.models import (
    Achievement,
    Certification,
    GapAnalysis,
    JobPreferences,
    Opportunity,
    Profile,
    ProfileMatch,
    RequiredSkill,
    Skill,
)
from skillglobe.utils.constants import MatchScoreLevel, SkillLevel, WorkType


# ═══════════════════════════════════════════════════════════════════════════
#  profile.py
# ═══════════════════════════════════════════════════════════════════════════


class TestSkill:
    def test_name_is_stripped(self):
        assert Skill(name="  React ", level=SkillLevel.EXPERT).name == "React"

    def test_level_stored_as_int(self):
        skill = Skill(name="React", level=SkillLevel.ADVANCED)
        assert skill.level == 4

    def test_level_out_of_range(self):
        with pytest.raises(ValidationError):
            Skill(name="React", level=6)

    def test_camel_case_input(self):
        skill = Skill.model_validate({"name": "SQL", "level": 3, "yearsExperience": 4, "lastUsed": "2024-01-31"})
        assert skill.years_experience == 4
        assert skill.last_used == date(2024, 1, 31)


class TestCertification:
    def test_valid_without_expiry(self):
        assert Certification(name="CKA").is_valid is True

    def test_expired(self):
        cert = Certification(name="CKA", expiry_date=date.today() - timedelta(days=1))
        assert cert.is_valid is False


class TestAchievement:
    def test_date_alias(self):
        achievement = Achievement.model_validate({"title": "Hackathon winner", "date": "2023-05-01"})
        assert achievement.achieved_on == date(2023, 5, 1)
        assert achievement.model_dump(by_alias=True)["date"] == date(2023, 5, 1)


class TestJobPreferences:
    def test_negative_salary_rejected(self):
        with pytest.raises(ValidationError):
            JobPreferences(salary_range=(-1, 100))

    def test_travel_willingness_bounds(self):
        with pytest.raises(ValidationError):
            JobPreferences(travel_willingness=101)

    def test_work_type_values(self):
        prefs = JobPreferences.model_validate({"workType": ["remote", "hybrid"]})
        assert prefs.work_type == ["remote", "hybrid"]

    def test_unknown_work_type_rejected(self):
        with pytest.raises(ValidationError):
            JobPreferences.model_validate({"workType": ["moon"]})


class TestProfile:
    def test_defaults(self):
        profile = Profile(id="p1", name="Data Engineer")
        assert profile.is_active is True
        assert profile.current_skills == []
        assert profile.job_preferences.salary_range == (0, 0)

    def test_current_skills_excludes_learning(self):
        profile = Profile(
            id="p1",
            name="Data Engineer",
            primary_skills=[Skill(name="Python", level=5)],
            secondary_skills=[Skill(name="Spark", level=3)],
            learning_skills=[Skill(name="Rust", level=1)],
        )
        assert [s.name for s in profile.current_skills] == ["Python", "Spark"]

    def test_camel_case_document(self):
        profile = Profile.model_validate({
            "id": "p1",
            "userId": "u1",
            "name": "Frontend Developer",
            "category": "frontend_developer",
            "primarySkills": [{"name": "React", "level": 5}],
            "relevantExperience": [{"title": "UI Engineer", "duration": "2 years"}],
            "jobPreferences": {"salaryRange": [100000, 120000], "companySize": ["startup"]},
            "isActive": False,
        })
        assert profile.user_id == "u1"
        assert profile.primary_skills[0].level == 5
        assert profile.relevant_experience[0].duration == "2 years"
        assert profile.job_preferences.salary_range == (100000, 120000)
        assert profile.is_active is False

    def test_dump_by_alias(self):
        dumped = Profile(id="p1", name="Backend Developer").model_dump(by_alias=True)
        assert "primarySkills" in dumped
        assert "isActive" in dumped


# ═══════════════════════════════════════════════════════════════════════════
#  opportunity.py
# ═══════════════════════════════════════════════════════════════════════════


class TestRequiredSkill:
    def test_defaults(self):
        skill = RequiredSkill(name=" Go ", level=SkillLevel.PROFICIENT)
        assert skill.name == "Go"
        assert skill.required is True
        assert skill.weight == 1.0

    def test_weight_bounds(self):
        with pytest.raises(ValidationError):
            RequiredSkill(name="Go", level=3, weight=1.5)


class TestOpportunity:
    def test_defaults(self):
        opportunity = Opportunity(id="job-1", title="Engineer")
        assert opportunity.total_weight == pytest.approx(1.0)
        assert opportunity.certifications == []
        assert opportunity.work_type == WorkType.ONSITE

    def test_null_certifications(self):
        opportunity = Opportunity.model_validate({"id": "job-1", "title": "Engineer", "certifications": None})
        assert opportunity.certifications == []

    def test_negative_years_rejected(self):
        with pytest.raises(ValidationError):
            Opportunity(id="job-1", title="Engineer", years_experience_required=-1)

    def test_weight_above_one_rejected(self):
        with pytest.raises(ValidationError):
            Opportunity(id="job-1", title="Engineer", skill_weight=1.2)

    def test_all_skills_order(self):
        opportunity = Opportunity.model_validate({
            "id": "job-1",
            "title": "Engineer",
            "requiredSkills": [{"name": "Go", "level": 4}],
            "preferredSkills": [{"name": "Kafka", "level": 2, "required": False}],
        })
        assert [s.name for s in opportunity.all_skills] == ["Go", "Kafka"]
        assert opportunity.preferred_skills[0].required is False

    def test_seniority_and_weights_from_camel_case(self):
        opportunity = Opportunity.model_validate({
            "id": "job-1",
            "title": "Engineer",
            "seniorityLevel": "lead",
            "yearsExperienceRequired": 8,
            "skillWeight": 0.6,
            "experienceWeight": 0.2,
            "preferencesWeight": 0.2,
        })
        assert opportunity.seniority_level == "lead"
        assert opportunity.years_experience_required == 8
        assert opportunity.total_weight == pytest.approx(1.0)


# ═══════════════════════════════════════════════════════════════════════════
#  match.py
# ═══════════════════════════════════════════════════════════════════════════


class TestMatchModels:
    def test_gap_analysis_defaults(self):
        gaps = GapAnalysis()
        assert gaps.has_gaps is False
        assert gaps.time_to_qualify == "Immediately"

    def test_gap_analysis_has_gaps(self):
        assert GapAnalysis(certification_gaps=["CKA"]).has_gaps is True

    def test_profile_match_score_level(self, matching_engine, make_opportunity, make_profile):
        match = matching_engine.calculate_profile_match(make_opportunity(), make_profile())
        assert isinstance(match, ProfileMatch)
        assert match.score_level == MatchScoreLevel.EXCELLENT

    def test_result_dump_uses_camel_case(self, matching_engine, make_opportunity, make_profile):
        result = matching_engine.find_best_profile_match(make_opportunity(), [make_profile()])
        dumped = result.model_dump(by_alias=True)
        assert dumped["opportunityId"] == "job-1"
        assert dumped["matchScore"] == 100
        assert dumped["profileMatches"][0]["skillMatch"]["skillMatchPercentage"] == 100
        assert dumped["profileMatches"][0]["gapAnalysis"]["timeToQualify"] == "Immediately"
        assert result.best_match.profile_id == "profile-1"
