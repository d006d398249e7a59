"""Skill snapshots: what a project requires and what a candidate possesses."""

from enum import Enum

from pydantic import BaseModel, Field

MIN_LEVEL = 1
MAX_LEVEL = 5


class SkillPriority(str, Enum):
    MUST_HAVE = "MUST_HAVE"
    NICE_TO_HAVE = "NICE_TO_HAVE"


class SkillRequirement(BaseModel):
    """A skill a project asks for, with the minimum level and its priority."""
    skill_id: str
    skill_name: str
    required_level: int = Field(..., ge=MIN_LEVEL, le=MAX_LEVEL)
    priority: SkillPriority = SkillPriority.MUST_HAVE

    model_config = {"frozen": True}


class SkillPossession(BaseModel):
    """A skill a candidate has declared, with their self-assessed level."""
    skill_id: str
    skill_name: str
    level: int = Field(..., ge=MIN_LEVEL, le=MAX_LEVEL)

    model_config = {"frozen": True}
