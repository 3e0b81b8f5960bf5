"""Data models for owner suggestion."""

from typing import Optional, Dict, Any
from pydantic import BaseModel, ConfigDict, Field


class Member(BaseModel):
    """A team member who can own tasks."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    role: str = ""
    skill_tags: Optional[str] = None  # Comma separated, matched case-insensitively
    seniority_level: int = Field(default=2, ge=1, le=5)
    max_concurrent_tasks: int = Field(default=5, ge=0)
    current_task_count: int = Field(default=0, ge=0)  # Open tasks at snapshot time
    is_active: bool = True


class CandidateScore(BaseModel):
    """Scored candidate with reasoning."""
    member: Member
    total_score: float
    reasons: list[str] = []
    factors: Dict[str, Any] = {}


class OwnerSuggestion(BaseModel):
    """Best owner for a task."""
    member_id: str
    member_name: str
    confidence: float  # 0-1
    reason: str
