"""
Owner selection algorithm.

Ranks eligible members for a task based on:
- Capacity headroom (open tasks vs. ceiling)
- Seniority against the recommended level
- Skill tag overlap with the task
"""

import logging
from typing import Iterable, Optional
from teamops.delegation.models import Member, CandidateScore, OwnerSuggestion
from teamops.priority.models import Task, AssignmentRecommendation

logger = logging.getLogger(__name__)

CAPACITY_WEIGHT = 20
SENIORITY_MATCH_POINTS = 30
SENIORITY_NEAR_POINTS = 15
SKILL_WEIGHT = 40


def parse_skill_tags(skill_tags: Optional[str]) -> list[str]:
    """Split a comma separated tag string into trimmed, lowercased tags."""
    if not skill_tags:
        return []
    return [tag.strip().lower() for tag in skill_tags.split(",")]


def is_eligible(member: Member) -> bool:
    """Active and below the concurrent task ceiling."""
    return member.is_active and member.current_task_count < member.max_concurrent_tasks


def score_candidate(
    member: Member,
    task_skills: list[str],
    recommendation: AssignmentRecommendation
) -> CandidateScore:
    """Score a single eligible member. Scores are relative, not normalized."""
    reasons = []

    # Capacity headroom (0-20 points)
    free_slots = member.max_concurrent_tasks - member.current_task_count
    capacity = free_slots / member.max_concurrent_tasks * CAPACITY_WEIGHT
    reasons.append(f"Capacity: {free_slots} slots available")

    # Seniority match (0-30 points)
    seniority = 0
    if member.seniority_level >= recommendation.recommended_seniority:
        seniority = SENIORITY_MATCH_POINTS
        reasons.append("Appropriate experience level")
    elif member.seniority_level == recommendation.recommended_seniority - 1:
        seniority = SENIORITY_NEAR_POINTS
        reasons.append("Close experience level")

    # Skill overlap (0-40 points)
    skills = 0.0
    member_skills = parse_skill_tags(member.skill_tags)
    matching = [skill for skill in task_skills if skill in member_skills]
    if matching:
        skills = len(matching) / max(len(task_skills), 1) * SKILL_WEIGHT
        reasons.append(f"Skills: {', '.join(matching)}")

    return CandidateScore(
        member=member,
        total_score=capacity + seniority + skills,
        reasons=reasons,
        factors={
            "capacity": capacity,
            "seniority": seniority,
            "skills": skills,
            "matching_skills": matching,
        }
    )


def rank_candidates(
    task: Task,
    members: Iterable[Member],
    recommendation: AssignmentRecommendation
) -> list[CandidateScore]:
    """
    Rank every eligible member for a task, best first.

    Inactive and capacity-exhausted members are excluded, not penalized.
    Equal scores keep roster order.
    """
    task_skills = parse_skill_tags(task.skill_tags)

    scored = []
    for member in members:
        if not is_eligible(member):
            continue
        candidate = score_candidate(member, task_skills, recommendation)
        logger.debug(f"Candidate {member.name}: {candidate.total_score:.1f} ({candidate.factors})")
        scored.append(candidate)

    scored.sort(key=lambda c: c.total_score, reverse=True)
    return scored


def suggest_owner(
    task: Task,
    members: Iterable[Member],
    recommendation: AssignmentRecommendation
) -> Optional[OwnerSuggestion]:
    """
    Suggest the best owner for a task.

    Args:
        task: Task snapshot (skill tags are used)
        members: Roster snapshot with current open task counts
        recommendation: Assignment recommendation for the task

    Returns:
        OwnerSuggestion for the top candidate, or None if nobody is eligible
    """
    ranked = rank_candidates(task, members, recommendation)

    if not ranked:
        logger.warning(f"No eligible owner for task {task.id or task.title!r}")
        return None

    best = ranked[0]
    logger.info(f"Suggested owner: {best.member.name} (score: {best.total_score:.1f})")

    return OwnerSuggestion(
        member_id=best.member.id,
        member_name=best.member.name,
        confidence=min(best.total_score / 100, 1),
        reason="; ".join(best.reasons)
    )
