from fastapi import APIRouter, Depends, HTTPException, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_matching_service
from config import settings
from models.requests import ScoreRequest
from models.responses import HealthResponse, ProjectMatch, UserMatch
from models.schemas.match_score import ScoreResult
from services.matching.directory import get_directory
from services.matching.errors import EntryNotFoundError
from services.matching.service import MatchingService

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _clamp_score(value: float) -> float:
    return min(1.0, max(0.0, value))


def _not_found(exc: EntryNotFoundError) -> HTTPException:
    return HTTPException(
        status_code=404,
        detail={
            "error_code": exc.error_code.value,
            "error_message": exc.error_code.description,
        },
    )


@router.get("/health", response_model=HealthResponse)
async def health():
    directory = get_directory()
    return HealthResponse(
        status="ok",
        users=directory.user_count,
        projects=directory.project_count,
    )


@router.get("/api/matching/projects/{project_id}/candidates", response_model=list[UserMatch])
@limiter.limit(settings.rate_limit)
async def find_candidates(
    request: Request,
    project_id: str,
    min_score: float = Query(0.0, description="Minimum score, clamped to 0.0-1.0"),
    limit: int = Query(settings.default_limit, ge=1, le=settings.max_limit),
    service: MatchingService = Depends(get_matching_service),
):
    try:
        return service.find_candidates_for_project(project_id, _clamp_score(min_score), limit)
    except EntryNotFoundError as e:
        raise _not_found(e)


@router.get("/api/matching/users/{user_id}/projects", response_model=list[ProjectMatch])
@limiter.limit(settings.rate_limit)
async def find_projects(
    request: Request,
    user_id: str,
    min_score: float = Query(0.0, description="Minimum score, clamped to 0.0-1.0"),
    limit: int = Query(settings.default_limit, ge=1, le=settings.max_limit),
    service: MatchingService = Depends(get_matching_service),
):
    try:
        return service.find_projects_for_user(user_id, _clamp_score(min_score), limit)
    except EntryNotFoundError as e:
        raise _not_found(e)


@router.post("/api/matching/score", response_model=ScoreResult)
@limiter.limit(settings.rate_limit)
async def score(request: Request, body: ScoreRequest):
    return MatchingService.score(body.requirements, body.skills, body.window, body.availability)
