"""
Assignment recommendation engine.

Builds staffing metadata for a task by running an ordered chain of rules
over an accumulator. Rules are not mutually exclusive: each one may add
reasoning and plan steps on top of what earlier rules produced.
"""

import logging
from datetime import datetime
from typing import Callable, Optional
from pydantic import BaseModel
from teamops.priority.models import Task, DeadlinePressure, AssignmentRecommendation, Cadence
from teamops.priority.rules import client_deadline_imminent
from teamops.priority.scoring import task_deadline_pressure

logger = logging.getLogger(__name__)

SENIOR_LEVEL = 4
JUNIOR_CEILING = 2

REASON_URGENT_COMPLEX = "Urgent and complex: needs joint analysis"
REASON_IMPORTANT_COMPLEX_LONG = "Important, complex and long-term: senior supervises, assistant executes"
REASON_CLIENT_DEADLINE = "Client deadline under 48h: needs frequent check-ins"
REASON_CLIENT_DEADLINE_COMPLEX = "Complexity plus short deadline: consider extra support"
REASON_HIGH_COMPLEXITY = "High complexity requires senior experience"
REASON_LOW_COMPLEXITY = "Simple task: appropriate for any level"

PLAN_URGENT_COMPLEX = ["15 min kickoff meeting with the team", "Split into subtasks with owners"]
PLAN_IMPORTANT_COMPLEX_LONG = [
    "Senior defines the initial approach",
    "Assistant executes with periodic reviews",
    "Weekly progress check-in",
]
PLAN_CLIENT_DEADLINE = ["Confirm exact deliverables with the client", "Check in every 2 hours until delivery"]
PLAN_QUICK = ["Execute directly", "Mark as complete"]
PLAN_DEFAULT = ["Review requirements", "Define specific steps", "Execute and document progress"]


class RuleContext(BaseModel):
    """Inputs shared by every rule."""
    task: Task
    pressure: DeadlinePressure


Rule = Callable[[AssignmentRecommendation, RuleContext], AssignmentRecommendation]


def _extend(
    rec: AssignmentRecommendation,
    reasoning: Optional[list[str]] = None,
    plan: Optional[list[str]] = None,
    **changes
) -> AssignmentRecommendation:
    """Return a copy of rec with reasoning/plan appended and fields replaced."""
    update = dict(changes)
    if reasoning:
        update["reasoning"] = rec.reasoning + reasoning
    if plan:
        update["suggested_plan"] = rec.suggested_plan + plan
    return rec.model_copy(update=update)


def urgent_complex_rule(rec: AssignmentRecommendation, ctx: RuleContext) -> AssignmentRecommendation:
    """Very urgent + very complex = multi-hand analysis."""
    task = ctx.task
    if task.urgency_level >= 4 and task.complexity_level >= 4:
        return _extend(
            rec,
            reasoning=[REASON_URGENT_COMPLEX],
            plan=PLAN_URGENT_COMPLEX,
            requires_multi_hand=True,
            suggested_collaborators=max(rec.suggested_collaborators, 1),
            recommended_seniority=max(rec.recommended_seniority, SENIOR_LEVEL),
        )
    return rec


def important_complex_long_rule(rec: AssignmentRecommendation, ctx: RuleContext) -> AssignmentRecommendation:
    """Important + hard + long-term = senior and assistant pairing."""
    task = ctx.task
    if task.importance_level >= 4 and task.complexity_level >= 4 and task.durability_category == "LONG":
        return _extend(
            rec,
            reasoning=[REASON_IMPORTANT_COMPLEX_LONG],
            plan=PLAN_IMPORTANT_COMPLEX_LONG,
            requires_multi_hand=True,
            suggested_collaborators=max(rec.suggested_collaborators, 1),
            recommended_seniority=max(rec.recommended_seniority, SENIOR_LEVEL),
        )
    return rec


def client_deadline_rule(rec: AssignmentRecommendation, ctx: RuleContext) -> AssignmentRecommendation:
    """Client deadline within two days: hourly check-ins, extra hands if non-trivial."""
    if not client_deadline_imminent(ctx.pressure):
        return rec

    rec = _extend(
        rec,
        reasoning=[REASON_CLIENT_DEADLINE],
        plan=PLAN_CLIENT_DEADLINE,
        suggested_cadence=Cadence.HOURLY,
    )
    if ctx.task.complexity_level >= 3:
        rec = _extend(
            rec,
            reasoning=[REASON_CLIENT_DEADLINE_COMPLEX],
            requires_multi_hand=True,
            suggested_collaborators=max(rec.suggested_collaborators, 1),
        )
    return rec


def cadence_rule(rec: AssignmentRecommendation, ctx: RuleContext) -> AssignmentRecommendation:
    """Cadence from deadline pressure, unless the client deadline rule already set it."""
    if client_deadline_imminent(ctx.pressure):
        return rec

    score = ctx.pressure.score
    if score >= 85:
        cadence = Cadence.HOURLY
    elif score >= 50:
        cadence = Cadence.DAILY
    else:
        cadence = Cadence.WEEKLY
    return _extend(rec, suggested_cadence=cadence)


def seniority_rule(rec: AssignmentRecommendation, ctx: RuleContext) -> AssignmentRecommendation:
    """Raise or lower the seniority target from complexity."""
    complexity = ctx.task.complexity_level
    if complexity >= 4:
        return _extend(
            rec,
            reasoning=[REASON_HIGH_COMPLEXITY],
            recommended_seniority=max(rec.recommended_seniority, SENIOR_LEVEL),
        )
    if complexity <= 2:
        return _extend(
            rec,
            reasoning=[REASON_LOW_COMPLEXITY],
            recommended_seniority=min(rec.recommended_seniority, JUNIOR_CEILING),
        )
    return rec


def default_plan_rule(rec: AssignmentRecommendation, ctx: RuleContext) -> AssignmentRecommendation:
    """Fallback plan when no other rule produced steps."""
    if rec.suggested_plan:
        return rec
    if ctx.task.estimated_duration in ("XS", "S"):
        return _extend(rec, plan=PLAN_QUICK)
    return _extend(rec, plan=PLAN_DEFAULT)


RULES: tuple[Rule, ...] = (
    urgent_complex_rule,
    important_complex_long_rule,
    client_deadline_rule,
    cadence_rule,
    seniority_rule,
    default_plan_rule,
)


def get_assignment_recommendation(task: Task, now: Optional[datetime] = None) -> AssignmentRecommendation:
    """
    Get assignment recommendation based on task characteristics.

    Starts from the default (single owner, seniority 2, daily cadence, no
    collaborators) and applies every rule in order.

    Args:
        task: Task snapshot
        now: Reference time for deadline pressure

    Returns:
        AssignmentRecommendation with staffing metadata, reasoning and plan
    """
    ctx = RuleContext(task=task, pressure=task_deadline_pressure(task, now))

    recommendation = AssignmentRecommendation()
    for rule in RULES:
        recommendation = rule(recommendation, ctx)

    logger.debug(
        f"Recommendation for {task.id or task.title!r}: "
        f"multi_hand={recommendation.requires_multi_hand}, "
        f"seniority={recommendation.recommended_seniority}, "
        f"cadence={recommendation.suggested_cadence.value}"
    )
    return recommendation
