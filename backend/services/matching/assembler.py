"""Wrap score results into the user-centric and project-centric output shapes."""

from models.responses import ProjectMatch, UserMatch
from models.schemas.directory import ProjectSnapshot, UserSnapshot
from models.schemas.match_score import ScoreResult


def to_user_match(user: UserSnapshot, result: ScoreResult) -> UserMatch:
    return UserMatch(
        user_id=user.id,
        user_name=user.display_name,
        email=user.email,
        score=result.score,
        breakdown=result.breakdown,
        matched_skills=result.matched_skills,
        missing_skills=result.missing_skills,
    )


def to_project_match(
    project: ProjectSnapshot,
    result: ScoreResult,
    owner_name: str = "",
) -> ProjectMatch:
    return ProjectMatch(
        project_id=project.id,
        project_name=project.name,
        project_description=project.description,
        status=project.status.value,
        owner_name=owner_name,
        score=result.score,
        breakdown=result.breakdown,
        matched_skills=result.matched_skills,
        missing_skills=result.missing_skills,
    )
