"""Data models for the priority engine."""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Dict, Any
from pydantic import BaseModel, ConfigDict, Field, field_validator


class TaskStatus(str, Enum):
    """Lifecycle status of a task."""
    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    BLOCKED = "BLOCKED"
    DONE = "DONE"


class Quadrant(str, Enum):
    """Eisenhower-style priority buckets."""
    DO_NOW = "DO_NOW"  # Urgent and important
    SCHEDULE = "SCHEDULE"  # Important, not urgent
    DELEGATE = "DELEGATE"  # Urgent, less important
    ELIMINATE = "ELIMINATE"  # Neither


class Cadence(str, Enum):
    """How often an assignee should report progress."""
    HOURLY = "HOURLY"
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"


class Task(BaseModel):
    """Snapshot of a task as seen by the engine."""
    model_config = ConfigDict(frozen=True)

    # Identification
    id: str = ""
    title: str = ""

    # Prioritization factors
    urgency_level: int = Field(default=3, ge=1, le=5)
    importance_level: int = Field(default=3, ge=1, le=5)
    internal_deadline: Optional[datetime] = None
    external_client_deadline: Optional[datetime] = None  # Always weighted above internal
    estimated_duration: str = "M"  # XS, S, M, L, XL
    durability_category: str = "SHORT"  # SHORT, MEDIUM, LONG
    complexity_level: int = Field(default=3, ge=1, le=5)

    # Progress
    status: TaskStatus = TaskStatus.NOT_STARTED
    progress_percent: int = Field(default=0, ge=0, le=100)
    skill_tags: Optional[str] = None  # Comma separated

    # Ownership and activity
    owner_id: Optional[str] = None
    last_checkin_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator(
        "internal_deadline",
        "external_client_deadline",
        "last_checkin_at",
        "updated_at",
    )
    @classmethod
    def _assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class DeadlinePressure(BaseModel):
    """Pressure exerted by the nearest deadline."""
    model_config = ConfigDict(frozen=True)

    score: float  # 0-100
    days_remaining: Optional[int] = None  # Rounded up, negative when overdue
    is_client_deadline: bool = False


class ImmediateFlag(BaseModel):
    """Whether a task must be surfaced for urgent attention, and why."""
    model_config = ConfigDict(frozen=True)

    flag: bool
    reason: Optional[str] = None


class AssignmentRecommendation(BaseModel):
    """Staffing metadata derived from task characteristics."""
    requires_multi_hand: bool = False
    recommended_seniority: int = 2  # 1-5, minimum level for the assignee
    suggested_cadence: Cadence = Cadence.DAILY
    suggested_collaborators: int = 0  # Headcount beyond the primary owner
    reasoning: list[str] = []
    suggested_plan: list[str] = []


class EfficiencyStatus(str, Enum):
    """Actual time spent relative to the estimate."""
    UNDER = "UNDER"
    ON_TRACK = "ON_TRACK"
    OVER = "OVER"


class EfficiencyResult(BaseModel):
    """Estimated vs. actual hours."""
    ratio: float
    status: EfficiencyStatus
    label: str


class TaskView(str, Enum):
    """Named task list views."""
    ALL = "all"
    URGENT = "urgent"
    OVERDUE = "overdue"
    BLOCKED = "blocked"
    FLAGGED = "flagged"
    MULTI_HAND = "multi-hand"


class ComputedFields(BaseModel):
    """Values derived for a task at listing time."""
    priority_score: int
    quadrant: Quadrant
    deadline_pressure: float
    days_remaining: Optional[int] = None
    is_client_deadline: bool = False
    flagged_immediate: bool = False
    flag_reason: Optional[str] = None


class EnrichedTask(BaseModel):
    """A task together with its computed fields."""
    task: Task
    computed: ComputedFields


class GridStats(BaseModel):
    """Counts shown alongside the quadrant grid."""
    total: int = 0
    do_now: int = 0
    schedule: int = 0
    delegate: int = 0
    eliminate: int = 0
    flagged: int = 0
    multi_hand: int = 0


class GridView(BaseModel):
    """Tasks grouped by quadrant with summary stats."""
    quadrants: Dict[Quadrant, list[EnrichedTask]]
    stats: GridStats


class TriageResult(BaseModel):
    """Derived fields to store when a task is created or edited."""
    flagged_immediate: bool
    flag_reason: Optional[str] = None
    requires_multi_hand: bool
    recommended_cadence: Cadence
    recommended_plan: list[str]
    recommendation: AssignmentRecommendation
    recommended_owner_id: Optional[str] = None
    assignment_confidence: Optional[float] = None
    factors: Dict[str, Any] = {}
