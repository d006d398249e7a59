"""Candidate and project finders: batch scoring plus selection policy.

Both finders score only entities that share at least one skill with the
other side, keep results with score >= min_score, order them by descending
score (ties broken by ascending id) and return at most `limit` entries.
Callers clamp `min_score` to [0.0, 1.0] and pass a positive `limit`.
"""

import logging
from collections.abc import Sequence
from typing import TypeVar

from models.responses import ProjectMatch, UserMatch
from models.schemas.availability import AvailabilityWindow, TimeWindow
from models.schemas.profiles import CandidateProfile, ProjectProfile
from models.schemas.skills import SkillPossession, SkillRequirement
from services.matching.assembler import to_project_match, to_user_match
from services.matching.scoring import compute_score

logger = logging.getLogger(__name__)

DEFAULT_MIN_SCORE = 0.0
DEFAULT_LIMIT = 20

M = TypeVar("M", UserMatch, ProjectMatch)


def _shares_skill(
    requirements: Sequence[SkillRequirement],
    skills: Sequence[SkillPossession],
) -> bool:
    required_ids = {r.skill_id for r in requirements}
    return any(s.skill_id in required_ids for s in skills)


def _select(
    matches: list[tuple[str, M]],
    min_score: float,
    limit: int,
) -> list[M]:
    """Filter by min_score, sort by (score desc, id asc), truncate to limit."""
    kept = [(key, m) for key, m in matches if m.score >= min_score]
    kept.sort(key=lambda pair: (-pair[1].score, pair[0]))
    return [m for _, m in kept[:limit]]


def find_candidates(
    requirements: Sequence[SkillRequirement],
    window: TimeWindow,
    candidates: Sequence[CandidateProfile],
    min_score: float = DEFAULT_MIN_SCORE,
    limit: int = DEFAULT_LIMIT,
) -> list[UserMatch]:
    """Rank candidates for a project.

    A project without requirements has no match targets at all, so nobody is
    scored. Candidates holding none of the required skills are left out
    before scoring rather than scored as 0.
    """
    if not requirements:
        return []

    scored: list[tuple[str, UserMatch]] = []
    for candidate in candidates:
        if not _shares_skill(requirements, candidate.skills):
            continue
        result = compute_score(requirements, candidate.skills, window, candidate.availability)
        scored.append((candidate.user.id, to_user_match(candidate.user, result)))

    ranked = _select(scored, min_score, limit)
    logger.debug(
        "Scored %d of %d candidates, returning %d",
        len(scored), len(candidates), len(ranked),
    )
    return ranked


def find_projects(
    skills: Sequence[SkillPossession],
    availability: Sequence[AvailabilityWindow],
    projects: Sequence[ProjectProfile],
    min_score: float = DEFAULT_MIN_SCORE,
    limit: int = DEFAULT_LIMIT,
) -> list[ProjectMatch]:
    """Rank projects for one candidate.

    Projects without requirements and projects sharing no skill with the
    candidate are skipped. A candidate without skills matches nothing.
    """
    if not skills:
        return []

    scored: list[tuple[str, ProjectMatch]] = []
    for profile in projects:
        if not profile.requirements:
            continue
        if not _shares_skill(profile.requirements, skills):
            continue
        result = compute_score(profile.requirements, skills, profile.project.window, availability)
        scored.append((profile.project.id, to_project_match(profile.project, result, profile.owner_name)))

    ranked = _select(scored, min_score, limit)
    logger.debug(
        "Scored %d of %d projects, returning %d",
        len(scored), len(projects), len(ranked),
    )
    return ranked
