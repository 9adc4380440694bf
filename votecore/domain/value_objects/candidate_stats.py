"""Candidate status counts for one election."""

from dataclasses import asdict, dataclass

from votecore.domain.entities.candidate import CandidateStatus


@dataclass(frozen=True)
class CandidateStats:
    """Number of candidacies per status. ``total`` counts every status."""

    total: int = 0
    approved: int = 0
    pending: int = 0
    rejected: int = 0

    @classmethod
    def from_counts(cls, counts: dict[CandidateStatus, int]) -> "CandidateStats":
        approved = counts.get(CandidateStatus.APPROVED, 0)
        pending = counts.get(CandidateStatus.PENDING, 0)
        rejected = counts.get(CandidateStatus.REJECTED, 0)
        return cls(
            total=approved + pending + rejected,
            approved=approved,
            pending=pending,
            rejected=rejected,
        )

    @property
    def active(self) -> int:
        """Candidacies counted in the election's total_candidates."""
        return self.approved + self.pending

    def to_dict(self) -> dict[str, int]:
        return asdict(self)
