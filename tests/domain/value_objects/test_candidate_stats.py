"""Tests for CandidateStats."""

from votecore.domain.entities.candidate import CandidateStatus
from votecore.domain.value_objects.candidate_stats import CandidateStats


class TestCandidateStats:
    def test_from_counts(self) -> None:
        stats = CandidateStats.from_counts(
            {
                CandidateStatus.APPROVED: 3,
                CandidateStatus.PENDING: 2,
                CandidateStatus.REJECTED: 1,
            }
        )

        assert stats.total == 6
        assert stats.approved == 3
        assert stats.pending == 2
        assert stats.rejected == 1
        assert stats.active == 5

    def test_missing_statuses_are_zero(self) -> None:
        stats = CandidateStats.from_counts({CandidateStatus.PENDING: 4})

        assert stats.to_dict() == {
            "total": 4,
            "approved": 0,
            "pending": 4,
            "rejected": 0,
        }

    def test_empty(self) -> None:
        assert CandidateStats.from_counts({}) == CandidateStats()
