"""DTOs for candidacy lifecycle operations."""

from dataclasses import dataclass, field

from votecore.domain.entities.candidate import CandidateStatus
from votecore.domain.value_objects.candidate_patch import CandidatePatch


# =============================================================================
# Input DTOs
# =============================================================================


@dataclass
class RegisterCandidateInputDto:
    """Input for registering the requester as a candidate."""

    election_id: int
    requester_id: int
    party_name: str
    symbol: str
    age: int
    qualification: str
    manifesto: str = ""


@dataclass
class ApproveCandidateInputDto:
    """Input for approving a PENDING candidacy."""

    candidate_id: int
    requester_id: int


@dataclass
class RejectCandidateInputDto:
    """Input for rejecting a PENDING candidacy."""

    candidate_id: int
    requester_id: int
    reason: str = ""


@dataclass
class UpdateCandidateInputDto:
    """Input for editing a PENDING candidacy's profile."""

    candidate_id: int
    requester_id: int
    patch: CandidatePatch = field(default_factory=CandidatePatch)


@dataclass
class DeleteCandidateInputDto:
    """Input for withdrawing a PENDING candidacy."""

    candidate_id: int
    requester_id: int


@dataclass
class ListCandidatesByElectionInputDto:
    """Input for listing an election's candidacies."""

    election_id: int
    status: CandidateStatus | None = None


@dataclass
class ListPendingCandidatesInputDto:
    """Input for the admin's approval queue."""

    election_id: int
    requester_id: int
