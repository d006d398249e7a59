"""Flat entity records handed over by the persistence side.

The layout mirrors the tables the records come from: skills, users and
projects are addressed by id, and the association records (user skills,
availability, project skills, memberships) reference them by id.
"""

from datetime import date
from enum import Enum

from pydantic import BaseModel, Field

from models.schemas.availability import AvailabilityWindow, TimeWindow
from models.schemas.skills import MAX_LEVEL, MIN_LEVEL, SkillPriority


class ProjectStatus(str, Enum):
    PLANNED = "PLANNED"
    ACTIVE = "ACTIVE"
    PAUSED = "PAUSED"
    COMPLETED = "COMPLETED"


class MemberStatus(str, Enum):
    ACTIVE = "ACTIVE"
    LEFT = "LEFT"


class SkillRecord(BaseModel):
    id: str
    name: str

    model_config = {"frozen": True}


class UserSnapshot(BaseModel):
    id: str
    first_name: str
    last_name: str
    email: str
    enabled: bool = True

    model_config = {"frozen": True}

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class ProjectSnapshot(BaseModel):
    id: str
    name: str
    description: str = ""
    status: ProjectStatus = ProjectStatus.PLANNED
    start_date: date
    end_date: date
    max_members: int = Field(1, ge=1)
    owner_id: str

    model_config = {"frozen": True}

    @property
    def window(self) -> TimeWindow:
        return TimeWindow(start=self.start_date, end=self.end_date)


class UserSkillRecord(BaseModel):
    user_id: str
    skill_id: str
    level: int = Field(..., ge=MIN_LEVEL, le=MAX_LEVEL)

    model_config = {"frozen": True}


class AvailabilityRecord(AvailabilityWindow):
    user_id: str


class ProjectSkillRecord(BaseModel):
    project_id: str
    skill_id: str
    level: int = Field(..., ge=MIN_LEVEL, le=MAX_LEVEL)
    priority: SkillPriority = SkillPriority.MUST_HAVE

    model_config = {"frozen": True}


class ProjectMembership(BaseModel):
    project_id: str
    user_id: str
    status: MemberStatus = MemberStatus.ACTIVE

    model_config = {"frozen": True}


class DirectoryDocument(BaseModel):
    """Serialized form of the whole snapshot directory (one JSON document)."""
    skills: list[SkillRecord] = []
    users: list[UserSnapshot] = []
    user_skills: list[UserSkillRecord] = []
    availability: list[AvailabilityRecord] = []
    projects: list[ProjectSnapshot] = []
    project_skills: list[ProjectSkillRecord] = []
    project_members: list[ProjectMembership] = []
