"""Read-only snapshot directory of users, projects and their skill records.

Stands in for the persistence side: the records are loaded once from a JSON
document and never written back. Follows the lazy global singleton pattern:
loaded on first use, `clear()` resets it.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from config import settings
from models.schemas.availability import AvailabilityWindow
from models.schemas.directory import (
    DirectoryDocument,
    MemberStatus,
    ProjectSnapshot,
    ProjectStatus,
    UserSkillRecord,
    UserSnapshot,
)
from models.schemas.skills import SkillPossession, SkillRequirement

logger = logging.getLogger(__name__)

MATCHABLE_STATUSES = frozenset({ProjectStatus.PLANNED, ProjectStatus.ACTIVE})


class SnapshotDirectory:
    def __init__(self, document: DirectoryDocument | None = None) -> None:
        self._doc = document if document is not None else DirectoryDocument()
        self._skill_names = {s.id: s.name for s in self._doc.skills}
        self._users = {u.id: u for u in self._doc.users}
        self._projects = {p.id: p for p in self._doc.projects}
        self._check_references()

    def _check_references(self) -> None:
        """Reject association records pointing at unknown skills, users or projects."""
        for rec in self._doc.user_skills:
            self._require(rec.skill_id in self._skill_names, "skill", rec.skill_id, "user_skills")
            self._require(rec.user_id in self._users, "user", rec.user_id, "user_skills")
        for rec in self._doc.availability:
            self._require(rec.user_id in self._users, "user", rec.user_id, "availability")
        for rec in self._doc.project_skills:
            self._require(rec.skill_id in self._skill_names, "skill", rec.skill_id, "project_skills")
            self._require(rec.project_id in self._projects, "project", rec.project_id, "project_skills")
        for rec in self._doc.project_members:
            self._require(rec.project_id in self._projects, "project", rec.project_id, "project_members")
            self._require(rec.user_id in self._users, "user", rec.user_id, "project_members")
        for project in self._doc.projects:
            self._require(project.owner_id in self._users, "user", project.owner_id, "projects.owner_id")

    @staticmethod
    def _require(ok: bool, kind: str, identifier: str, where: str) -> None:
        if not ok:
            raise ValueError(f"{where} references unknown {kind} '{identifier}'")

    @property
    def user_count(self) -> int:
        return len(self._users)

    @property
    def project_count(self) -> int:
        return len(self._projects)

    def get_user(self, user_id: str) -> UserSnapshot | None:
        return self._users.get(user_id)

    def get_project(self, project_id: str) -> ProjectSnapshot | None:
        return self._projects.get(project_id)

    def display_name_of(self, user_id: str) -> str:
        user = self._users.get(user_id)
        return user.display_name if user else ""

    # --- skills ---

    def to_possession(self, record: UserSkillRecord) -> SkillPossession:
        return SkillPossession(
            skill_id=record.skill_id,
            skill_name=self._skill_names[record.skill_id],
            level=record.level,
        )

    def skills_of_user(self, user_id: str) -> list[SkillPossession]:
        return [
            self.to_possession(rec)
            for rec in self._doc.user_skills
            if rec.user_id == user_id
        ]

    def user_skills_for(self, skill_ids: Iterable[str]) -> list[UserSkillRecord]:
        """All user-skill records for any of the given skills, across users."""
        wanted = set(skill_ids)
        return [rec for rec in self._doc.user_skills if rec.skill_id in wanted]

    def requirements_of(self, project_id: str) -> list[SkillRequirement]:
        return self.requirements_for([project_id]).get(project_id, [])

    def requirements_for(self, project_ids: Iterable[str]) -> dict[str, list[SkillRequirement]]:
        """Requirements grouped by project id, built in one pass."""
        wanted = set(project_ids)
        grouped: dict[str, list[SkillRequirement]] = {}
        for rec in self._doc.project_skills:
            if rec.project_id not in wanted:
                continue
            grouped.setdefault(rec.project_id, []).append(SkillRequirement(
                skill_id=rec.skill_id,
                skill_name=self._skill_names[rec.skill_id],
                required_level=rec.level,
                priority=rec.priority,
            ))
        return grouped

    # --- availability ---

    def availability_of(self, user_id: str) -> list[AvailabilityWindow]:
        return self.availability_for([user_id]).get(user_id, [])

    def availability_for(self, user_ids: Iterable[str]) -> dict[str, list[AvailabilityWindow]]:
        """Availability windows grouped by user id, built in one pass."""
        wanted = set(user_ids)
        grouped: dict[str, list[AvailabilityWindow]] = {}
        for rec in self._doc.availability:
            if rec.user_id in wanted:
                grouped.setdefault(rec.user_id, []).append(AvailabilityWindow(
                    available_from=rec.available_from,
                    available_to=rec.available_to,
                ))
        return grouped

    # --- projects and membership ---

    def active_member_ids(self, project_id: str) -> set[str]:
        return {
            m.user_id
            for m in self._doc.project_members
            if m.project_id == project_id and m.status == MemberStatus.ACTIVE
        }

    def matchable_projects(self, user_id: str) -> list[ProjectSnapshot]:
        """PLANNED or ACTIVE projects the user is not an active member of."""
        joined = {
            m.project_id
            for m in self._doc.project_members
            if m.user_id == user_id and m.status == MemberStatus.ACTIVE
        }
        return [
            p for p in self._doc.projects
            if p.status in MATCHABLE_STATUSES and p.id not in joined
        ]


def load_directory(path: Path) -> SnapshotDirectory:
    """Load a directory from a JSON document; a missing file gives an empty one."""
    if not path.exists():
        logger.warning("Snapshot file %s not found, starting with an empty directory", path)
        return SnapshotDirectory()

    document = DirectoryDocument.model_validate_json(path.read_text(encoding="utf-8"))
    directory = SnapshotDirectory(document)
    logger.info(
        "Snapshot directory loaded from %s: %d users, %d projects",
        path, directory.user_count, directory.project_count,
    )
    return directory


_directory: SnapshotDirectory | None = None


def get_directory() -> SnapshotDirectory:
    """Get the process-wide directory, loading it from settings on first access."""
    global _directory
    if _directory is None:
        _directory = load_directory(Path(settings.data_file))
    return _directory


def clear() -> None:
    """Drop the loaded directory. Useful for testing."""
    global _directory
    _directory = None
