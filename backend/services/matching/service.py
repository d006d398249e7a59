"""Matching service: resolve ids against the directory and run the finders.

Flow:
    project_id -> project + requirements
      -> user-skill records for the required skills, grouped by user
      -> minus active members and disabled users, plus availability
      -> find_candidates() -> list[UserMatch]

    user_id -> user + skills + availability
      -> PLANNED/ACTIVE projects the user has not joined, requirements grouped by project
      -> find_projects() -> list[ProjectMatch]
"""

import logging
from collections import defaultdict
from collections.abc import Sequence

from models.responses import ProjectMatch, UserMatch
from models.schemas.availability import AvailabilityWindow, TimeWindow
from models.schemas.match_score import ScoreResult
from models.schemas.profiles import CandidateProfile, ProjectProfile
from models.schemas.skills import SkillPossession, SkillRequirement
from services.matching.directory import SnapshotDirectory
from services.matching.errors import EntryNotFoundError, ErrorCode
from services.matching.finders import (
    DEFAULT_LIMIT,
    DEFAULT_MIN_SCORE,
    find_candidates,
    find_projects,
)
from services.matching.scoring import compute_score

logger = logging.getLogger(__name__)


class MatchingService:
    def __init__(self, directory: SnapshotDirectory) -> None:
        self._directory = directory

    def find_candidates_for_project(
        self,
        project_id: str,
        min_score: float = DEFAULT_MIN_SCORE,
        limit: int = DEFAULT_LIMIT,
    ) -> list[UserMatch]:
        project = self._directory.get_project(project_id)
        if project is None:
            logger.info("Candidate search for unknown project %s", project_id)
            raise EntryNotFoundError("Project", project_id, ErrorCode.PROJECT_NOT_FOUND)

        requirements = self._directory.requirements_of(project_id)
        if not requirements:
            return []

        excluded = self._directory.active_member_ids(project_id)
        skills_by_user: dict[str, list[SkillPossession]] = defaultdict(list)
        for rec in self._directory.user_skills_for(r.skill_id for r in requirements):
            if rec.user_id in excluded:
                continue
            skills_by_user[rec.user_id].append(self._directory.to_possession(rec))

        users = [self._directory.get_user(uid) for uid in skills_by_user]
        users = [u for u in users if u is not None and u.enabled]
        availability = self._directory.availability_for(u.id for u in users)

        candidates = [
            CandidateProfile(
                user=user,
                skills=skills_by_user[user.id],
                availability=availability.get(user.id, []),
            )
            for user in users
        ]
        return find_candidates(requirements, project.window, candidates, min_score, limit)

    def find_projects_for_user(
        self,
        user_id: str,
        min_score: float = DEFAULT_MIN_SCORE,
        limit: int = DEFAULT_LIMIT,
    ) -> list[ProjectMatch]:
        user = self._directory.get_user(user_id)
        if user is None:
            logger.info("Project search for unknown user %s", user_id)
            raise EntryNotFoundError("User", user_id, ErrorCode.USER_NOT_FOUND)

        skills = self._directory.skills_of_user(user_id)
        if not skills:
            return []

        projects = self._directory.matchable_projects(user_id)
        requirements = self._directory.requirements_for(p.id for p in projects)
        profiles = [
            ProjectProfile(
                project=project,
                requirements=requirements.get(project.id, []),
                owner_name=self._directory.display_name_of(project.owner_id),
            )
            for project in projects
        ]
        availability = self._directory.availability_of(user_id)
        return find_projects(skills, availability, profiles, min_score, limit)

    @staticmethod
    def score(
        requirements: Sequence[SkillRequirement],
        skills: Sequence[SkillPossession],
        window: TimeWindow,
        availability: Sequence[AvailabilityWindow],
    ) -> ScoreResult:
        """Score caller-supplied snapshots without resolving any ids."""
        return compute_score(requirements, skills, window, availability)
