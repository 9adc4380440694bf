"""Partial update of a candidate's profile fields."""

from dataclasses import dataclass, fields

from votecore.domain.entities.candidate import Candidate


@dataclass(frozen=True)
class CandidatePatch:
    """Profile fields to change on a PENDING candidacy.

    ``None`` means "keep the stored value". Any other value, including an
    empty string, replaces the stored value and is validated with the rest
    of the merged candidate.
    """

    party_name: str | None = None
    symbol: str | None = None
    manifesto: str | None = None
    age: int | None = None
    qualification: str | None = None

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def changed_fields(self) -> list[str]:
        return [f.name for f in fields(self) if getattr(self, f.name) is not None]

    def apply_to(self, candidate: Candidate) -> Candidate:
        """Return a new candidate with this patch merged over ``candidate``."""
        return Candidate(
            id=candidate.id,
            election_id=candidate.election_id,
            user_id=candidate.user_id,
            party_name=_pick(self.party_name, candidate.party_name),
            symbol=_pick(self.symbol, candidate.symbol),
            manifesto=_pick(self.manifesto, candidate.manifesto),
            age=_pick(self.age, candidate.age),
            qualification=_pick(self.qualification, candidate.qualification),
            total_votes=candidate.total_votes,
            status=candidate.status,
            registered_at=candidate.registered_at,
            user=candidate.user,
        )


def _pick[V](new: V | None, current: V) -> V:
    return current if new is None else new
