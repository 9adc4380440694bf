"""Tests for Candidate entity."""

import pytest

from tests.fixtures.entity_factories import create_candidate
from votecore.domain.entities.candidate import Candidate, CandidateStatus


class TestCandidateValidation:
    """Field rules of a candidacy."""

    def test_valid_candidate_has_no_errors(self) -> None:
        candidate = create_candidate()

        assert candidate.get_validation_errors() == []
        assert candidate.is_valid() is True

    def test_all_errors_reported_in_fixed_order(self) -> None:
        candidate = Candidate(
            election_id=None,
            user_id=None,
            party_name="",
            symbol="   ",
            age=None,
            qualification=None,
            status="WITHDRAWN",
        )

        assert candidate.get_validation_errors() == [
            "Election ID is required",
            "User ID is required",
            "Party name is required",
            "Party symbol is required",
            "Valid age is required (between 1 and 149)",
            "Qualification is required",
            "Invalid candidate status",
        ]
        assert candidate.is_valid() is False

    @pytest.mark.parametrize("age", [0, -3, 150, 200])
    def test_age_out_of_range(self, age: int) -> None:
        candidate = create_candidate(age=age)

        assert candidate.get_validation_errors() == [
            "Valid age is required (between 1 and 149)"
        ]

    @pytest.mark.parametrize("age", [1, 149])
    def test_age_bounds_accepted(self, age: int) -> None:
        assert create_candidate(age=age).is_valid() is True

    def test_boolean_age_rejected(self) -> None:
        candidate = create_candidate(age=True)  # type: ignore[arg-type]

        assert "Valid age is required (between 1 and 149)" in (
            candidate.get_validation_errors()
        )

    def test_whitespace_only_party_name_is_blank(self) -> None:
        candidate = create_candidate(party_name=" \t ")

        assert candidate.get_validation_errors() == ["Party name is required"]

    def test_is_valid_matches_error_list(self) -> None:
        samples = [
            create_candidate(),
            create_candidate(symbol=""),
            create_candidate(election_id=None, qualification=""),
            create_candidate(status="UNKNOWN"),
        ]
        for candidate in samples:
            assert candidate.is_valid() == (candidate.get_validation_errors() == [])


class TestCandidateStatus:
    """Status handling."""

    def test_string_status_is_coerced(self) -> None:
        candidate = create_candidate(status="APPROVED")

        assert candidate.status is CandidateStatus.APPROVED
        assert candidate.is_approved() is True
        assert candidate.is_pending() is False

    def test_unknown_status_is_kept(self) -> None:
        candidate = create_candidate(status="WITHDRAWN")

        assert candidate.status == "WITHDRAWN"
        assert candidate.status_value == "WITHDRAWN"
        assert not candidate.is_pending()
        assert not candidate.is_approved()
        assert not candidate.is_rejected()

    def test_default_status_is_pending(self) -> None:
        candidate = Candidate(
            election_id=1,
            user_id=2,
            party_name="P",
            symbol="S",
            age=30,
            qualification="Q",
        )

        assert candidate.status is CandidateStatus.PENDING
        assert candidate.total_votes == 0
        assert candidate.manifesto == ""

    def test_values(self) -> None:
        assert CandidateStatus.values() == ["PENDING", "APPROVED", "REJECTED"]


class TestCandidateViews:
    """Serialized views."""

    def test_public_dict_hides_user_id_and_email(self) -> None:
        candidate = create_candidate(profile_photo="https://img/alice.png")

        data = candidate.to_public_dict()

        assert "user_id" not in data
        assert data["user"] == {
            "fullname": "Alice Example",
            "profile_photo": "https://img/alice.png",
        }
        assert data["status"] == "PENDING"

    def test_full_dict_includes_owner_fields(self) -> None:
        candidate = create_candidate()

        data = candidate.to_dict()

        assert data["user_id"] == 100
        assert data["user"]["email"] == "alice@example.com"
        assert data["candidate_id"] == 1

    def test_views_without_user(self) -> None:
        candidate = create_candidate(fullname=None, email=None)

        assert candidate.user is None
        assert candidate.display_name is None
        assert candidate.to_public_dict()["user"] is None
        assert candidate.to_dict()["user"] is None

    def test_is_owned_by(self) -> None:
        candidate = create_candidate(user_id=7)

        assert candidate.is_owned_by(7) is True
        assert candidate.is_owned_by(8) is False

    def test_equality_by_id(self) -> None:
        assert create_candidate(id=5) == create_candidate(id=5, party_name="Other")
        assert create_candidate(id=5) != create_candidate(id=6)
