"""Read projection of one tallied candidate."""

from dataclasses import dataclass
from typing import Any


UNKNOWN_CANDIDATE_NAME = "Unknown Candidate"
INDEPENDENT_PARTY_NAME = "Independent"


@dataclass(frozen=True)
class CandidateResult:
    """A candidate's standing in a completed election.

    Recomputed on every aggregation pass and never stored.
    """

    candidate_id: int | None
    election_id: int | None
    name: str = UNKNOWN_CANDIDATE_NAME
    party_name: str = INDEPENDENT_PARTY_NAME
    symbol: str | None = None
    total_votes: int = 0
    vote_percentage: float = 0.0
    profile_photo: str | None = None

    @property
    def label(self) -> str:
        """Chart label: the party name, or the candidate name for independents."""
        if self.party_name and self.party_name != INDEPENDENT_PARTY_NAME:
            return self.party_name
        return self.name

    def to_pie_slice(self) -> dict[str, Any]:
        return {
            "id": self.candidate_id,
            "label": self.label,
            "value": self.total_votes,
            "percentage": self.vote_percentage,
        }

    def to_bar_datum(self) -> dict[str, Any]:
        return {
            "x": self.label,
            "y": self.total_votes,
            "candidateId": self.candidate_id,
            "percentage": self.vote_percentage,
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "candidate_id": self.candidate_id,
            "election_id": self.election_id,
            "name": self.name,
            "party_name": self.party_name,
            "symbol": self.symbol,
            "total_votes": self.total_votes,
            "vote_percentage": self.vote_percentage,
            "profile_photo": self.profile_photo,
        }
