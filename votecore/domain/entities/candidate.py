"""Candidate entity."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from votecore.domain.entities.base import BaseEntity


class CandidateStatus(str, Enum):
    """Lifecycle status of a candidacy.

    PENDING is the initial state. APPROVED and REJECTED are terminal.
    """

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"

    @classmethod
    def values(cls) -> list[str]:
        return [status.value for status in cls]


@dataclass(frozen=True)
class CandidateUser:
    """Profile of the user standing as a candidate."""

    user_id: int | None = None
    fullname: str | None = None
    email: str | None = None
    profile_photo: str | None = None


class Candidate(BaseEntity):
    """One user's candidacy in one election."""

    MIN_AGE_EXCLUSIVE = 0
    MAX_AGE_EXCLUSIVE = 150

    def __init__(
        self,
        election_id: int | None,
        user_id: int | None,
        party_name: str | None,
        symbol: str | None,
        age: int | None,
        qualification: str | None,
        manifesto: str | None = "",
        total_votes: int = 0,
        status: CandidateStatus | str = CandidateStatus.PENDING,
        registered_at: datetime | None = None,
        user: CandidateUser | None = None,
        id: int | None = None,
    ) -> None:
        """Initialize the candidate entity.

        Args:
            election_id: Election the candidacy belongs to
            user_id: Registering user
            party_name: Party name
            symbol: Party symbol
            age: Candidate age
            qualification: Educational or professional qualification
            manifesto: Free-text manifesto
            total_votes: Denormalized running vote count
            status: Lifecycle status. Unknown values are kept as-is so that
                validation can report them.
            registered_at: Registration timestamp
            user: Linked user profile
            id: Candidate ID
        """
        super().__init__(id)
        self.election_id = election_id
        self.user_id = user_id
        self.party_name = party_name
        self.symbol = symbol
        self.age = age
        self.qualification = qualification
        self.manifesto = manifesto or ""
        self.total_votes = total_votes
        self.status = _coerce_status(status)
        self.registered_at = registered_at
        self.user = user

    def __str__(self) -> str:
        return (
            f"Candidate(id={self.id}, election_id={self.election_id}, "
            f"user_id={self.user_id}, status={self.status_value})"
        )

    @property
    def status_value(self) -> str:
        if isinstance(self.status, CandidateStatus):
            return self.status.value
        return str(self.status)

    def is_valid(self) -> bool:
        return not self.get_validation_errors()

    def get_validation_errors(self) -> list[str]:
        """Return every violated field rule, in a fixed order."""
        errors: list[str] = []

        if not self.election_id:
            errors.append("Election ID is required")
        if not self.user_id:
            errors.append("User ID is required")
        if _is_blank(self.party_name):
            errors.append("Party name is required")
        if _is_blank(self.symbol):
            errors.append("Party symbol is required")
        if not self._has_valid_age():
            errors.append("Valid age is required (between 1 and 149)")
        if _is_blank(self.qualification):
            errors.append("Qualification is required")
        if not isinstance(self.status, CandidateStatus):
            errors.append("Invalid candidate status")

        return errors

    def _has_valid_age(self) -> bool:
        # bool is an int subclass
        if isinstance(self.age, bool) or not isinstance(self.age, int):
            return False
        return self.MIN_AGE_EXCLUSIVE < self.age < self.MAX_AGE_EXCLUSIVE

    def is_pending(self) -> bool:
        return self.status == CandidateStatus.PENDING

    def is_approved(self) -> bool:
        return self.status == CandidateStatus.APPROVED

    def is_rejected(self) -> bool:
        return self.status == CandidateStatus.REJECTED

    def is_owned_by(self, user_id: int) -> bool:
        return self.user_id == user_id

    @property
    def display_name(self) -> str | None:
        return self.user.fullname if self.user else None

    def to_dict(self) -> dict[str, Any]:
        """Full view, for the owner and the election admin."""
        return {
            "candidate_id": self.id,
            "election_id": self.election_id,
            "user_id": self.user_id,
            "party_name": self.party_name,
            "symbol": self.symbol,
            "manifesto": self.manifesto,
            "age": self.age,
            "qualification": self.qualification,
            "total_votes": self.total_votes,
            "status": self.status_value,
            "registered_at": self.registered_at,
            "user": (
                {
                    "user_id": self.user.user_id,
                    "fullname": self.user.fullname,
                    "email": self.user.email,
                    "profile_photo": self.user.profile_photo,
                }
                if self.user
                else None
            ),
        }

    def to_public_dict(self) -> dict[str, Any]:
        """Public view. Omits the user ID and email."""
        return {
            "candidate_id": self.id,
            "election_id": self.election_id,
            "party_name": self.party_name,
            "symbol": self.symbol,
            "manifesto": self.manifesto,
            "age": self.age,
            "qualification": self.qualification,
            "total_votes": self.total_votes,
            "status": self.status_value,
            "registered_at": self.registered_at,
            "user": (
                {
                    "fullname": self.user.fullname,
                    "profile_photo": self.user.profile_photo,
                }
                if self.user
                else None
            ),
        }


def _is_blank(value: str | None) -> bool:
    return value is None or not str(value).strip()


def _coerce_status(status: CandidateStatus | str) -> CandidateStatus | str:
    if isinstance(status, CandidateStatus):
        return status
    try:
        return CandidateStatus(status)
    except ValueError:
        return status
