"""Domain value objects."""

from votecore.domain.value_objects.candidate_patch import CandidatePatch
from votecore.domain.value_objects.candidate_result import CandidateResult
from votecore.domain.value_objects.candidate_stats import CandidateStats
from votecore.domain.value_objects.election_result_summary import (
    ElectionResultSummary,
    ResultTimeframe,
)


__all__ = [
    "CandidatePatch",
    "CandidateResult",
    "CandidateStats",
    "ElectionResultSummary",
    "ResultTimeframe",
]
