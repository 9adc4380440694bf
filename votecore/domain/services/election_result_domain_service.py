"""Election result aggregation domain service."""

from datetime import UTC, datetime
from decimal import ROUND_HALF_UP, Decimal

from votecore.domain.entities.candidate import Candidate
from votecore.domain.entities.election import Election
from votecore.domain.entities.election_result import ElectionResult
from votecore.domain.exceptions import PreconditionFailedError
from votecore.domain.value_objects.candidate_result import (
    INDEPENDENT_PARTY_NAME,
    UNKNOWN_CANDIDATE_NAME,
    CandidateResult,
)
from votecore.domain.value_objects.election_result_summary import (
    ElectionResultSummary,
    ResultTimeframe,
)


_TWO_PLACES = Decimal("0.01")


def percentage(part: int, whole: int) -> float:
    """Return ``part / whole * 100`` rounded half-up to two decimals.

    Returns 0.0 when ``whole`` is not positive.
    """
    if whole <= 0:
        return 0.0
    value = Decimal(part) * 100 / Decimal(whole)
    return float(value.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


class ElectionResultDomainService:
    """Builds the result summary of a completed election.

    All inputs are already loaded; nothing here touches storage. Candidates
    must arrive ranked (descending votes with a deterministic tie-break).
    The ranking is used as-is for both the winner and the display order.
    """

    def resolve_registered_voters(self, election: Election, counted_voters: int) -> int:
        """Prefer the election's explicit voter total, else the counted relation."""
        if election.total_voters and election.total_voters > 0:
            return election.total_voters
        return max(counted_voters, 0)

    def build_summary(
        self,
        election: Election,
        ranked_candidates: list[Candidate],
        votes_cast: int,
        registered_voters: int,
        stored_result: ElectionResult | None = None,
        now: datetime | None = None,
    ) -> ElectionResultSummary:
        """Compute turnout, vote shares and winner.

        Args:
            election: COMPLETED election
            ranked_candidates: APPROVED candidates in ranking order
            votes_cast: Exact number of vote records for the election
            registered_voters: Registered voter count
            stored_result: Previously persisted result, for remarks and the
                generation timestamp
            now: Generation time when nothing is stored yet

        Raises:
            PreconditionFailedError: If the election is not COMPLETED
        """
        if not election.is_completed:
            raise PreconditionFailedError(
                "Election is not completed yet",
                {"election_id": election.id, "status": election.status.value},
            )

        candidates = [
            self._to_candidate_result(candidate, votes_cast)
            for candidate in ranked_candidates
        ]
        winner = candidates[0] if candidates else None

        if stored_result and stored_result.result_generated_at:
            generated_at = stored_result.result_generated_at
        else:
            generated_at = now or datetime.now(UTC)

        return ElectionResultSummary(
            election_id=election.id,
            title=election.title,
            status=election.status.value,
            generated_at=generated_at,
            total_votes=votes_cast,
            total_registered_voters=registered_voters,
            voter_turnout_percentage=percentage(votes_cast, registered_voters),
            candidates=candidates,
            winner=winner,
            remarks=stored_result.remarks if stored_result else None,
            timeframe=ResultTimeframe(start=election.start_time, end=election.end_time),
        )

    def _to_candidate_result(
        self, candidate: Candidate, votes_cast: int
    ) -> CandidateResult:
        user = candidate.user
        return CandidateResult(
            candidate_id=candidate.id,
            election_id=candidate.election_id,
            name=(user.fullname if user and user.fullname else UNKNOWN_CANDIDATE_NAME),
            party_name=candidate.party_name or INDEPENDENT_PARTY_NAME,
            symbol=candidate.symbol or None,
            total_votes=candidate.total_votes or 0,
            vote_percentage=percentage(candidate.total_votes or 0, votes_cast),
            profile_photo=user.profile_photo if user else None,
        )
