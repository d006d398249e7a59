"""Tests for the snapshot directory and its loader."""

from pathlib import Path

import pytest

from config import settings
from models.schemas.directory import DirectoryDocument
from models.schemas.skills import SkillPriority
from services.matching import directory as directory_module
from services.matching.directory import SnapshotDirectory, get_directory, load_directory


class TestSnapshotDirectory:
    def test_counts(self, seed_directory):
        assert seed_directory.user_count == 4
        assert seed_directory.project_count == 3

    def test_requirements_resolve_skill_names(self, seed_directory):
        reqs = seed_directory.requirements_of("p-001")
        assert [(r.skill_name, r.required_level, r.priority) for r in reqs] == [
            ("kotlin", 3, SkillPriority.MUST_HAVE),
            ("docker", 2, SkillPriority.NICE_TO_HAVE),
        ]

    def test_requirements_grouped_by_project(self, seed_directory):
        grouped = seed_directory.requirements_for(["p-001", "p-002", "p-unknown"])
        assert sorted(grouped) == ["p-001", "p-002"]
        assert len(grouped["p-002"]) == 3

    def test_skills_and_availability_of_user(self, seed_directory):
        assert {s.skill_name for s in seed_directory.skills_of_user("u-002")} == {"python", "postgresql", "kotlin"}
        assert len(seed_directory.availability_of("u-001")) == 1
        assert seed_directory.availability_of("u-003") == []

    def test_matchable_projects(self, seed_directory):
        assert [p.id for p in seed_directory.matchable_projects("u-001")] == ["p-001"]
        assert [p.id for p in seed_directory.matchable_projects("u-002")] == ["p-001", "p-002"]

    def test_active_member_ids(self, seed_directory):
        assert seed_directory.active_member_ids("p-002") == {"u-001"}
        assert seed_directory.active_member_ids("p-001") == set()

    def test_unknown_skill_reference_rejected(self):
        doc = DirectoryDocument.model_validate({
            "users": [{"id": "u-1", "first_name": "A", "last_name": "B", "email": "a@b.c"}],
            "user_skills": [{"user_id": "u-1", "skill_id": "sk-nope", "level": 3}],
        })
        with pytest.raises(ValueError, match="unknown skill 'sk-nope'"):
            SnapshotDirectory(doc)

    def test_empty_directory(self):
        directory = SnapshotDirectory()
        assert directory.user_count == 0
        assert directory.get_project("p-001") is None


class TestLoading:
    def test_missing_file_gives_empty_directory(self, tmp_path: Path):
        directory = load_directory(tmp_path / "nope.json")
        assert directory.user_count == 0

    def test_get_directory_is_cached(self, monkeypatch, tmp_path: Path):
        monkeypatch.setattr(settings, "data_file", tmp_path / "nope.json")
        first = get_directory()
        assert get_directory() is first
        directory_module.clear()
        assert get_directory() is not first
