"""
Roster loading.

Turns raw member records (from a JSON file or any data source) into
Member snapshots for owner suggestion.
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Optional
from pydantic import ValidationError
from teamops.config import get_settings
from teamops.delegation.models import Member

logger = logging.getLogger(__name__)


class RosterError(ValueError):
    """Raised when a roster entry or file cannot be read."""


def load_members_from_config(entries: Iterable[dict[str, Any]]) -> list[Member]:
    """
    Validate raw member entries.

    Accepts both snake_case keys and the camelCase keys used by the
    persistence layer (skillTags, seniorityLevel, maxConcurrentTasks,
    isActive, openTaskCount).
    """
    members = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise RosterError(f"Invalid roster entry #{index}: expected an object")
        data = {
            "id": entry.get("id"),
            "name": entry.get("name"),
            "role": entry.get("role", ""),
            "skill_tags": entry.get("skill_tags", entry.get("skillTags")),
            "seniority_level": entry.get("seniority_level", entry.get("seniorityLevel", 2)),
            "max_concurrent_tasks": entry.get("max_concurrent_tasks", entry.get("maxConcurrentTasks", 5)),
            "current_task_count": entry.get("current_task_count", entry.get("openTaskCount", 0)),
            "is_active": entry.get("is_active", entry.get("isActive", True)),
        }
        try:
            members.append(Member(**data))
        except ValidationError as e:
            raise RosterError(f"Invalid roster entry #{index} ({entry.get('name')!r}): {e}") from e

    return members


def load_members_from_file(path: Optional[str] = None) -> list[Member]:
    """
    Load the roster from a JSON file (a list of member objects).

    Defaults to TEAMOPS_ROSTER_PATH. Returns an empty roster when no path is
    configured.
    """
    path = path or get_settings().roster_path
    if not path:
        logger.warning("No roster path configured")
        return []

    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise RosterError(f"Could not read roster file {path}: {e}") from e

    if not isinstance(raw, list):
        raise RosterError(f"Roster file {path} must contain a list of members")

    members = load_members_from_config(raw)
    logger.info(f"Loaded {len(members)} members from {path}")
    return members
