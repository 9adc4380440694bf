"""Domain entities."""

from votecore.domain.entities.candidate import Candidate, CandidateStatus, CandidateUser
from votecore.domain.entities.election import Election, ElectionStatus
from votecore.domain.entities.election_result import ElectionResult


__all__ = [
    "Candidate",
    "CandidateStatus",
    "CandidateUser",
    "Election",
    "ElectionResult",
    "ElectionStatus",
]
