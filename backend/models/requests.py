from pydantic import BaseModel, Field

from models.schemas.availability import AvailabilityWindow, TimeWindow
from models.schemas.skills import SkillPossession, SkillRequirement


class ScoreRequest(BaseModel):
    requirements: list[SkillRequirement] = Field(..., max_length=200, description="Project skill requirements")
    skills: list[SkillPossession] = Field(default_factory=list, max_length=200, description="Candidate skills")
    window: TimeWindow = Field(..., description="Project start and end date")
    availability: list[AvailabilityWindow] = Field(default_factory=list, description="Candidate availability windows")
