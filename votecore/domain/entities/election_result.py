"""Persisted election result entity."""

from datetime import datetime

from votecore.domain.entities.base import BaseEntity


class ElectionResult(BaseEntity):
    """Condensed form of an election result summary.

    There is exactly one row per election. Regeneration overwrites it.
    """

    def __init__(
        self,
        election_id: int,
        total_votes: int = 0,
        voter_turnout_percentage: float = 0.0,
        winner_candidate_id: int | None = None,
        remarks: str | None = None,
        result_generated_at: datetime | None = None,
        id: int | None = None,
    ) -> None:
        super().__init__(id)
        self.election_id = election_id
        self.total_votes = total_votes
        self.voter_turnout_percentage = float(voter_turnout_percentage)
        self.winner_candidate_id = winner_candidate_id
        self.remarks = remarks
        self.result_generated_at = result_generated_at

    def __str__(self) -> str:
        return (
            f"ElectionResult(election_id={self.election_id}, "
            f"total_votes={self.total_votes}, "
            f"winner_candidate_id={self.winner_candidate_id})"
        )
