"""Priority engine for teamops - Scoring, quadrants, flags and staffing recommendations."""

from teamops.priority.models import (
    Task,
    TaskStatus,
    Quadrant,
    Cadence,
    DeadlinePressure,
    ImmediateFlag,
    AssignmentRecommendation,
)
from teamops.priority.tables import (
    DURATION_HOURS,
    DURATION_SCORES,
    DURATION_LABELS,
    DURABILITY_LABELS,
    URGENCY_LABELS,
    IMPORTANCE_LABELS,
    COMPLEXITY_LABELS,
    QUADRANT_LABELS,
)
from teamops.priority.scoring import calculate_deadline_pressure, calculate_priority_score
from teamops.priority.quadrants import get_task_quadrant, group_tasks_by_quadrant
from teamops.priority.rules import should_flag_immediate
from teamops.priority.recommendation import get_assignment_recommendation
from teamops.priority.efficiency import calculate_efficiency

__all__ = [
    "Task",
    "TaskStatus",
    "Quadrant",
    "Cadence",
    "DeadlinePressure",
    "ImmediateFlag",
    "AssignmentRecommendation",
    "DURATION_HOURS",
    "DURATION_SCORES",
    "DURATION_LABELS",
    "DURABILITY_LABELS",
    "URGENCY_LABELS",
    "IMPORTANCE_LABELS",
    "COMPLEXITY_LABELS",
    "QUADRANT_LABELS",
    "calculate_deadline_pressure",
    "calculate_priority_score",
    "get_task_quadrant",
    "group_tasks_by_quadrant",
    "should_flag_immediate",
    "get_assignment_recommendation",
    "calculate_efficiency",
]
