from pydantic import BaseModel


class MatchScoreBreakdown(BaseModel):
    must_have_coverage: float = 0.0  # share of MUST_HAVE skills at or above level
    level_fit_score: float = 0.0  # how well possessed levels meet required levels
    nice_to_have_coverage: float = 0.0  # share of NICE_TO_HAVE skills possessed
    availability_score: float = 0.0  # share of the project period covered


class MatchedSkill(BaseModel):
    skill_id: str
    skill_name: str
    user_level: int
    required_level: int
    priority: str  # MUST_HAVE | NICE_TO_HAVE


class MissingSkill(BaseModel):
    skill_id: str
    skill_name: str
    required_level: int
    priority: str


class UserMatch(BaseModel):
    user_id: str
    user_name: str
    email: str
    score: float
    breakdown: MatchScoreBreakdown
    matched_skills: list[MatchedSkill] = []
    missing_skills: list[MissingSkill] = []


class ProjectMatch(BaseModel):
    project_id: str
    project_name: str
    project_description: str = ""
    status: str
    owner_name: str = ""
    score: float
    breakdown: MatchScoreBreakdown
    matched_skills: list[MatchedSkill] = []
    missing_skills: list[MissingSkill] = []


class HealthResponse(BaseModel):
    status: str = "ok"
    users: int = 0
    projects: int = 0
