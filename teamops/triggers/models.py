"""Data models for alert detection."""

from enum import Enum
from typing import Optional
from datetime import datetime
from pydantic import BaseModel


class AlertType(str, Enum):
    """Conditions that warrant a notification."""
    TASK_OVERDUE = "TASK_OVERDUE"  # Nearest deadline has passed
    PROGRESS_STALL = "PROGRESS_STALL"  # In progress with no recent check-in
    BLOCKED_ALERT = "BLOCKED_ALERT"  # Blocked tasks left untouched


class Alert(BaseModel):
    """An alert condition for one member. Delivery happens elsewhere."""
    type: AlertType
    member_id: str
    message: str
    task_id: Optional[str] = None
    task_title: Optional[str] = None


class SentNotification(BaseModel):
    """A notification already delivered, used for the dedup window."""
    member_id: str
    type: AlertType
    created_at: datetime
