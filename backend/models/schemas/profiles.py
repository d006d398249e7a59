"""Scoring inputs bundled per entity, as the finders consume them."""

from pydantic import BaseModel

from models.schemas.availability import AvailabilityWindow
from models.schemas.directory import ProjectSnapshot, UserSnapshot
from models.schemas.skills import SkillPossession, SkillRequirement


class CandidateProfile(BaseModel):
    """A user together with their declared skills and availability."""
    user: UserSnapshot
    skills: list[SkillPossession] = []
    availability: list[AvailabilityWindow] = []

    model_config = {"frozen": True}


class ProjectProfile(BaseModel):
    """A project together with its skill requirements."""
    project: ProjectSnapshot
    requirements: list[SkillRequirement] = []
    owner_name: str = ""

    model_config = {"frozen": True}
