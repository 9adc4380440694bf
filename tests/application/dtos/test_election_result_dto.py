"""Tests for election result DTOs."""

from datetime import UTC, datetime

from votecore.application.dtos.election_result_dto import ElectionResultOutputDto
from votecore.domain.value_objects.election_result_summary import (
    ElectionResultSummary,
)


def _summary() -> ElectionResultSummary:
    return ElectionResultSummary(
        election_id=10,
        title="Board Election",
        status="COMPLETED",
        generated_at=datetime(2026, 3, 3, tzinfo=UTC),
    )


class TestElectionResultOutputDto:
    def test_persisted(self) -> None:
        output = ElectionResultOutputDto(summary=_summary(), persisted=True)

        assert output.persistence_failed is False
        data = output.to_dict()
        assert data["persisted"] is True
        assert data["persistence_error"] is None
        assert data["election_id"] == 10

    def test_failed(self) -> None:
        output = ElectionResultOutputDto(
            summary=_summary(), persistence_error="Failed to persist election result"
        )

        assert output.persisted is False
        assert output.persistence_failed is True
