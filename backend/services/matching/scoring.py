"""Score computer: one candidate against one project's requirements.

score = 0.40 * must-have coverage
      + 0.25 * level fit
      + 0.15 * nice-to-have coverage
      + 0.20 * availability

Every input is an immutable snapshot and nothing is cached between calls,
so the same inputs always give the same result and calls may run in parallel.
"""

import math
from collections.abc import Sequence

import numpy as np

from models.responses import MatchedSkill, MatchScoreBreakdown, MissingSkill
from models.schemas.availability import AvailabilityWindow, TimeWindow
from models.schemas.match_score import ScoreResult
from models.schemas.skills import SkillPossession, SkillPriority, SkillRequirement
from services.matching.availability import availability_score

W_MUST_HAVE = 0.40
W_LEVEL_FIT = 0.25
W_NICE_TO_HAVE = 0.15
W_AVAILABILITY = 0.20

# Overqualification only pays off up to 120% of the required level
LEVEL_OVERFIT_CAP = 1.2


def round_score(value: float) -> float:
    """Round half-up to two decimals (0.125 -> 0.13, unlike built-in round)."""
    return math.floor(value * 100.0 + 0.5) / 100.0


def coverage(fulfilled: int, total: int) -> float:
    """Share of fulfilled requirements; an empty requirement class is fully covered."""
    if total == 0:
        return 1.0
    return fulfilled / total


def level_fit_score(level_pairs: Sequence[tuple[int, int]]) -> float:
    """Average capped level ratio over (user_level, required_level) pairs, scaled to 0.0-1.0."""
    if not level_pairs:
        return 0.0
    levels = np.array(level_pairs, dtype=float)
    ratios = np.minimum(levels[:, 0] / levels[:, 1], LEVEL_OVERFIT_CAP)
    return float(np.mean(ratios)) / LEVEL_OVERFIT_CAP


def compute_score(
    requirements: Sequence[SkillRequirement],
    skills: Sequence[SkillPossession],
    window: TimeWindow,
    availability: Sequence[AvailabilityWindow],
) -> ScoreResult:
    """Score a candidate's skills and availability against a project.

    A requirement the candidate possesses is listed as matched even when the
    candidate's level is below the required one; the shortfall only shows up
    in the levels and in the level fit.
    """
    by_skill = {s.skill_id: s for s in skills}

    must_have = [r for r in requirements if r.priority == SkillPriority.MUST_HAVE]
    nice_to_have = [r for r in requirements if r.priority == SkillPriority.NICE_TO_HAVE]

    matched: list[MatchedSkill] = []
    missing: list[MissingSkill] = []
    level_pairs: list[tuple[int, int]] = []

    must_fulfilled = 0
    nice_fulfilled = 0
    for req in must_have + nice_to_have:
        possessed = by_skill.get(req.skill_id)
        if possessed is None:
            missing.append(MissingSkill(
                skill_id=req.skill_id,
                skill_name=req.skill_name,
                required_level=req.required_level,
                priority=req.priority.value,
            ))
            continue

        matched.append(MatchedSkill(
            skill_id=req.skill_id,
            skill_name=req.skill_name,
            user_level=possessed.level,
            required_level=req.required_level,
            priority=req.priority.value,
        ))
        level_pairs.append((possessed.level, req.required_level))

        if req.priority == SkillPriority.NICE_TO_HAVE:
            nice_fulfilled += 1
        elif possessed.level >= req.required_level:
            must_fulfilled += 1

    must_have_coverage = coverage(must_fulfilled, len(must_have))
    nice_to_have_coverage = coverage(nice_fulfilled, len(nice_to_have))
    level_fit = level_fit_score(level_pairs)
    available = availability_score(availability, window)

    raw = (
        W_MUST_HAVE * must_have_coverage
        + W_LEVEL_FIT * level_fit
        + W_NICE_TO_HAVE * nice_to_have_coverage
        + W_AVAILABILITY * available
    )

    return ScoreResult(
        score=round_score(raw),
        breakdown=MatchScoreBreakdown(
            must_have_coverage=round_score(must_have_coverage),
            level_fit_score=round_score(level_fit),
            nice_to_have_coverage=round_score(nice_to_have_coverage),
            availability_score=round_score(available),
        ),
        matched_skills=matched,
        missing_skills=missing,
    )
