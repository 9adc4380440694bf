"""Presentation-ready result of a completed election."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from votecore.domain.value_objects.candidate_result import CandidateResult


@dataclass(frozen=True)
class ResultTimeframe:
    """Voting window of the election."""

    start: datetime | None = None
    end: datetime | None = None

    def to_dict(self) -> dict[str, datetime | None]:
        return {"start": self.start, "end": self.end}


@dataclass
class ElectionResultSummary:
    """Tally, turnout and winner of one election.

    ``candidates`` keeps the order it was built with (descending votes); the
    chart block is derived from it once, at construction.
    """

    election_id: int | None
    title: str
    status: str
    generated_at: datetime
    total_votes: int = 0
    total_registered_voters: int = 0
    voter_turnout_percentage: float = 0.0
    candidates: list[CandidateResult] = field(default_factory=list)
    winner: CandidateResult | None = None
    remarks: str | None = None
    timeframe: ResultTimeframe = field(default_factory=ResultTimeframe)
    chart: dict[str, Any] = field(init=False)

    def __post_init__(self) -> None:
        self.chart = self._build_chart()

    @property
    def winner_candidate_id(self) -> int | None:
        return self.winner.candidate_id if self.winner else None

    def _build_chart(self) -> dict[str, Any]:
        pie_slices = [candidate.to_pie_slice() for candidate in self.candidates]
        bar_data = [candidate.to_bar_datum() for candidate in self.candidates]

        return {
            "pie": {
                "labels": [s["label"] for s in pie_slices],
                "series": [s["value"] for s in pie_slices],
                "meta": pie_slices,
            },
            "bar": {
                "categories": [d["x"] for d in bar_data],
                "series": [
                    {
                        "name": "Votes",
                        "data": [
                            {"x": d["x"], "y": d["y"], "candidateId": d["candidateId"]}
                            for d in bar_data
                        ],
                    }
                ],
            },
            "summary": {
                "totalVotes": self.total_votes,
                "voterTurnoutPercentage": self.voter_turnout_percentage,
            },
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "election_id": self.election_id,
            "title": self.title,
            "status": self.status,
            "generated_at": self.generated_at,
            "total_votes": self.total_votes,
            "total_registered_voters": self.total_registered_voters,
            "voter_turnout_percentage": self.voter_turnout_percentage,
            "chart": self.chart,
            "winner": self.winner.to_dict() if self.winner else None,
            "candidates": [candidate.to_dict() for candidate in self.candidates],
            "remarks": self.remarks,
            "timeframe": self.timeframe.to_dict(),
        }
