"""Shared dependencies for API routes."""

from services.matching.directory import get_directory
from services.matching.service import MatchingService


def get_matching_service() -> MatchingService:
    return MatchingService(get_directory())
