"""Tests for the matching service against the sample directory."""

import pytest

from models.schemas.availability import TimeWindow
from services.matching.errors import EntryNotFoundError, ErrorCode
from services.matching.service import MatchingService


@pytest.fixture
def service(seed_directory) -> MatchingService:
    return MatchingService(seed_directory)


class TestFindCandidatesForProject:
    def test_ranked_candidates(self, service):
        result = service.find_candidates_for_project("p-001")
        assert [m.user_id for m in result] == ["u-001", "u-002"]
        assert [m.score for m in result] == [0.98, 0.24]
        assert result[0].user_name == "Max Mustermann"
        assert result[0].email == "max@example.com"

    def test_breakdown_and_skill_lists(self, service):
        erika = service.find_candidates_for_project("p-001")[1]
        assert erika.breakdown.must_have_coverage == 0.0
        assert erika.breakdown.level_fit_score == 0.56
        assert erika.breakdown.nice_to_have_coverage == 0.0
        assert erika.breakdown.availability_score == 0.5
        assert [s.skill_name for s in erika.matched_skills] == ["kotlin"]
        assert [s.skill_name for s in erika.missing_skills] == ["docker"]

    def test_disabled_users_are_excluded(self, service):
        result = service.find_candidates_for_project("p-001")
        assert "u-004" not in {m.user_id for m in result}

    def test_active_members_are_excluded(self, service):
        result = service.find_candidates_for_project("p-002")
        assert [m.user_id for m in result] == ["u-002"]
        assert result[0].score == 0.45

    def test_min_score_and_limit(self, service):
        assert [m.user_id for m in service.find_candidates_for_project("p-001", min_score=0.5)] == ["u-001"]
        assert len(service.find_candidates_for_project("p-001", limit=1)) == 1

    def test_availability_outside_project_period(self, service):
        result = service.find_candidates_for_project("p-003")
        assert [(m.user_id, m.score) for m in result] == [("u-001", 0.8), ("u-002", 0.76)]
        assert all(m.breakdown.availability_score == 0.0 for m in result)

    def test_unknown_project(self, service):
        with pytest.raises(EntryNotFoundError) as exc_info:
            service.find_candidates_for_project("p-missing")
        assert exc_info.value.error_code is ErrorCode.PROJECT_NOT_FOUND
        assert "p-missing" in str(exc_info.value)


class TestFindProjectsForUser:
    def test_skips_joined_and_closed_projects(self, service):
        result = service.find_projects_for_user("u-001")
        assert [m.project_id for m in result] == ["p-001"]
        assert result[0].score == 0.98
        assert result[0].owner_name == "Jonas Weber"
        assert result[0].project_name == "Skill Matcher"

    def test_left_membership_does_not_exclude(self, service):
        result = service.find_projects_for_user("u-002")
        assert [(m.project_id, m.score) for m in result] == [("p-002", 0.45), ("p-001", 0.24)]
        assert result[0].status == "ACTIVE"

    def test_no_shared_skills(self, service):
        assert service.find_projects_for_user("u-003") == []

    def test_unknown_user(self, service):
        with pytest.raises(EntryNotFoundError) as exc_info:
            service.find_projects_for_user("u-missing")
        assert exc_info.value.error_code is ErrorCode.USER_NOT_FOUND


class TestScore:
    def test_scores_without_directory(self, seed_directory):
        project = seed_directory.get_project("p-001")
        result = MatchingService.score(
            seed_directory.requirements_of("p-001"),
            seed_directory.skills_of_user("u-001"),
            TimeWindow(start=project.start_date, end=project.end_date),
            seed_directory.availability_of("u-001"),
        )
        assert result.score == 0.98
