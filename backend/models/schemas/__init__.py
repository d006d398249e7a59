"""Snapshot contracts passed into the matching engine."""

from models.schemas.availability import AvailabilityWindow, TimeWindow
from models.schemas.directory import (
    DirectoryDocument,
    MemberStatus,
    ProjectSnapshot,
    ProjectStatus,
    UserSnapshot,
)
from models.schemas.match_score import ScoreResult
from models.schemas.skills import SkillPossession, SkillPriority, SkillRequirement

__all__ = [
    "AvailabilityWindow",
    "TimeWindow",
    "DirectoryDocument",
    "MemberStatus",
    "ProjectSnapshot",
    "ProjectStatus",
    "UserSnapshot",
    "ScoreResult",
    "SkillPossession",
    "SkillPriority",
    "SkillRequirement",
]
