"""Tests for CandidatePatch."""

from tests.fixtures.entity_factories import create_candidate
from votecore.domain.entities.candidate import CandidateStatus
from votecore.domain.value_objects.candidate_patch import CandidatePatch


class TestCandidatePatch:
    def test_empty_patch(self) -> None:
        patch = CandidatePatch()

        assert patch.is_empty() is True
        assert patch.changed_fields() == []

    def test_empty_string_counts_as_a_change(self) -> None:
        patch = CandidatePatch(manifesto="")

        assert patch.is_empty() is False
        assert patch.changed_fields() == ["manifesto"]

    def test_apply_merges_only_given_fields(self) -> None:
        candidate = create_candidate(party_name="Old", symbol="Owl", age=40)

        merged = CandidatePatch(party_name="New", age=41).apply_to(candidate)

        assert merged.party_name == "New"
        assert merged.age == 41
        assert merged.symbol == "Owl"
        assert merged.qualification == candidate.qualification
        assert merged.id == candidate.id
        assert merged.status is CandidateStatus.PENDING

    def test_apply_does_not_mutate_original(self) -> None:
        candidate = create_candidate(party_name="Old")

        CandidatePatch(party_name="New").apply_to(candidate)

        assert candidate.party_name == "Old"

    def test_merged_candidate_is_revalidated(self) -> None:
        candidate = create_candidate()

        merged = CandidatePatch(symbol=" ").apply_to(candidate)

        assert merged.get_validation_errors() == ["Party symbol is required"]
