"""Delegation engine for teamops - Owner suggestion and roster loading."""

from teamops.delegation.models import Member, CandidateScore, OwnerSuggestion
from teamops.delegation.selector import suggest_owner, rank_candidates

__all__ = [
    "Member",
    "CandidateScore",
    "OwnerSuggestion",
    "suggest_owner",
    "rank_candidates",
]
