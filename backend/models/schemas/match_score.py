"""Score computer output: composite score plus the explanation behind it."""

from pydantic import BaseModel

from models.responses import MatchedSkill, MatchScoreBreakdown, MissingSkill


class ScoreResult(BaseModel):
    """Result of scoring one candidate against one project.

    `score` and every breakdown field are rounded to two decimals
    independently, so the breakdown does not always recombine to `score`.
    """
    score: float = 0.0  # 0.0-1.0
    breakdown: MatchScoreBreakdown = MatchScoreBreakdown()
    matched_skills: list[MatchedSkill] = []
    missing_skills: list[MissingSkill] = []
