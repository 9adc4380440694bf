"""Candidacy lifecycle use case."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from votecore.application.dtos.candidate_dto import (
    ApproveCandidateInputDto,
    DeleteCandidateInputDto,
    ListCandidatesByElectionInputDto,
    ListPendingCandidatesInputDto,
    RegisterCandidateInputDto,
    RejectCandidateInputDto,
    UpdateCandidateInputDto,
)
from votecore.common.logging import get_logger
from votecore.domain.entities.candidate import Candidate, CandidateStatus
from votecore.domain.exceptions import (
    ConflictError,
    InvalidInputError,
    NotFoundError,
    PreconditionFailedError,
    UnauthorizedError,
)
from votecore.domain.services.interfaces.unit_of_work import IUnitOfWork
from votecore.domain.value_objects.candidate_stats import CandidateStats


class ManageCandidatesUseCase:
    """Registers, approves, rejects, edits and withdraws candidacies.

    State machine: PENDING -> APPROVED | REJECTED. Both targets are terminal.
    Every check (validation, existence, authorization, status) runs before the
    first write, and each mutation commits together with the counter change it
    implies through the unit of work.

    The election's ``total_candidates`` counts PENDING and APPROVED
    candidacies: registration adds one, rejection and withdrawal remove one.
    """

    def __init__(self, uow: IUnitOfWork) -> None:
        """Initialize the use case.

        Args:
            uow: Unit of work giving access to repositories in one transaction
        """
        self.uow = uow
        self.logger = get_logger(self.__class__.__name__)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    async def register_candidate(self, input_dto: RegisterCandidateInputDto) -> Candidate:
        """Register the requester as a PENDING candidate of an election.

        Raises:
            InvalidInputError: A field invariant is violated
            ConflictError: The requester already stands in this election
            NotFoundError: The election or the requesting user does not exist
            PreconditionFailedError: The election is completed or cancelled
        """
        candidate = Candidate(
            election_id=input_dto.election_id,
            user_id=input_dto.requester_id,
            party_name=input_dto.party_name,
            symbol=input_dto.symbol,
            manifesto=input_dto.manifesto,
            age=input_dto.age,
            qualification=input_dto.qualification,
            status=CandidateStatus.PENDING,
        )
        self._require_valid(candidate)

        candidate_repo = self.uow.candidate_repository
        election_repo = self.uow.election_repository

        existing = await candidate_repo.get_by_election_and_user(
            input_dto.election_id, input_dto.requester_id
        )
        if existing:
            raise ConflictError(
                "User is already registered as a candidate for this election",
                {
                    "election_id": input_dto.election_id,
                    "user_id": input_dto.requester_id,
                },
            )

        election = await election_repo.get_by_id(input_dto.election_id)
        if election is None:
            raise NotFoundError(
                "Election not found", {"election_id": input_dto.election_id}
            )
        if not election.accepts_registrations:
            raise PreconditionFailedError(
                f"Cannot register candidates for "
                f"{election.status.value.lower()} elections",
                {"election_id": election.id, "status": election.status.value},
            )

        async with self._transaction():
            created = await candidate_repo.create(candidate)
            await election_repo.adjust_candidate_count(input_dto.election_id, 1)

        self.logger.info(
            "Candidate registered",
            candidate_id=created.id,
            election_id=created.election_id,
            user_id=created.user_id,
        )
        return created

    async def approve_candidate(self, input_dto: ApproveCandidateInputDto) -> Candidate:
        """Approve a PENDING candidacy. Only an election admin may do this.

        Raises:
            NotFoundError: The candidate does not exist
            UnauthorizedError: The requester is not an admin of the election
            ConflictError: The candidacy is no longer PENDING
        """
        candidate = await self._get_existing(input_dto.candidate_id)
        await self._require_admin(
            input_dto.requester_id, candidate.election_id, "approve"
        )
        self._require_pending(candidate, "approve")

        async with self._transaction():
            approved = await self._transition(
                candidate, CandidateStatus.APPROVED
            )

        self.logger.info(
            "Candidate approved",
            candidate_id=approved.id,
            election_id=approved.election_id,
            approved_by=input_dto.requester_id,
        )
        return approved

    async def reject_candidate(self, input_dto: RejectCandidateInputDto) -> Candidate:
        """Reject a PENDING candidacy and drop it from the election's count.

        Raises:
            NotFoundError: The candidate does not exist
            UnauthorizedError: The requester is not an admin of the election
            ConflictError: The candidacy is no longer PENDING
        """
        candidate = await self._get_existing(input_dto.candidate_id)
        await self._require_admin(
            input_dto.requester_id, candidate.election_id, "reject"
        )
        self._require_pending(candidate, "reject")

        async with self._transaction():
            rejected = await self._transition(
                candidate, CandidateStatus.REJECTED
            )
            await self.uow.election_repository.adjust_candidate_count(
                candidate.election_id, -1
            )

        # No column stores the reason; the log is its record.
        self.logger.info(
            "Candidate rejected",
            candidate_id=rejected.id,
            election_id=rejected.election_id,
            rejected_by=input_dto.requester_id,
            reason=input_dto.reason,
        )
        return rejected

    async def update_candidate(self, input_dto: UpdateCandidateInputDto) -> Candidate:
        """Edit the profile of the requester's own PENDING candidacy.

        Raises:
            NotFoundError: The candidate does not exist
            UnauthorizedError: The requester does not own the candidacy
            ConflictError: The candidacy is no longer PENDING
            InvalidInputError: Nothing to change, or the merged profile is invalid
        """
        candidate = await self._get_existing(input_dto.candidate_id)
        self._require_owner(candidate, input_dto.requester_id, "update")
        self._require_pending(candidate, "update")

        patch = input_dto.patch
        if patch.is_empty():
            raise InvalidInputError(
                "No fields to update",
                ["At least one field must be provided"],
                {"candidate_id": candidate.id},
            )

        merged = patch.apply_to(candidate)
        self._require_valid(merged)

        async with self._transaction():
            updated = await self.uow.candidate_repository.update_pending(merged)
            if updated is None:
                raise ConflictError(
                    "Can only update pending candidate registrations",
                    {"candidate_id": candidate.id},
                )

        self.logger.info(
            "Candidate updated",
            candidate_id=updated.id,
            fields=patch.changed_fields(),
        )
        return updated

    async def delete_candidate(self, input_dto: DeleteCandidateInputDto) -> bool:
        """Withdraw the requester's own PENDING candidacy.

        Raises:
            NotFoundError: The candidate does not exist
            UnauthorizedError: The requester does not own the candidacy
            ConflictError: The candidacy is no longer PENDING
        """
        candidate = await self._get_existing(input_dto.candidate_id)
        self._require_owner(candidate, input_dto.requester_id, "delete")
        self._require_pending(candidate, "delete")

        async with self._transaction():
            deleted = await self.uow.candidate_repository.delete_pending(candidate.id)
            if not deleted:
                raise ConflictError(
                    "Can only delete pending candidate registrations",
                    {"candidate_id": candidate.id},
                )
            await self.uow.election_repository.adjust_candidate_count(
                candidate.election_id, -1
            )

        self.logger.info(
            "Candidate deleted",
            candidate_id=candidate.id,
            election_id=candidate.election_id,
        )
        return True

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def list_by_election(
        self, input_dto: ListCandidatesByElectionInputDto
    ) -> list[Candidate]:
        """List an election's candidacies, newest first."""
        return await self.uow.candidate_repository.get_by_election(
            input_dto.election_id, input_dto.status
        )

    async def list_approved(self, election_id: int) -> list[Candidate]:
        """List APPROVED candidacies ranked by votes (public)."""
        return await self.uow.candidate_repository.get_approved_by_election(
            election_id
        )

    async def list_pending(
        self, input_dto: ListPendingCandidatesInputDto
    ) -> list[Candidate]:
        """List the approval queue of an election (admin only)."""
        await self._require_admin(
            input_dto.requester_id, input_dto.election_id, "list pending candidates of"
        )
        return await self.uow.candidate_repository.get_by_election(
            input_dto.election_id, CandidateStatus.PENDING
        )

    async def list_by_user(self, user_id: int) -> list[Candidate]:
        """List every candidacy of a user, newest first."""
        return await self.uow.candidate_repository.get_by_user(user_id)

    async def get_candidate(self, candidate_id: int) -> Candidate:
        return await self._get_existing(candidate_id)

    async def get_public_profile(self, candidate_id: int) -> Candidate:
        """Get a candidate for public display. Only APPROVED profiles are shown."""
        candidate = await self._get_existing(candidate_id)
        if not candidate.is_approved():
            raise NotFoundError(
                "Candidate profile not available", {"candidate_id": candidate_id}
            )
        return candidate

    async def get_stats(self, election_id: int) -> CandidateStats:
        counts = await self.uow.candidate_repository.count_by_status(election_id)
        return CandidateStats.from_counts(counts)

    # ------------------------------------------------------------------
    # Guards
    # ------------------------------------------------------------------

    @asynccontextmanager
    async def _transaction(self) -> AsyncIterator[None]:
        try:
            yield
            await self.uow.commit()
        except Exception:
            await self.uow.rollback()
            raise

    async def _get_existing(self, candidate_id: int) -> Candidate:
        candidate = await self.uow.candidate_repository.get_by_id(candidate_id)
        if candidate is None:
            raise NotFoundError("Candidate not found", {"candidate_id": candidate_id})
        return candidate

    async def _require_admin(
        self, requester_id: int, election_id: int | None, action: str
    ) -> None:
        is_admin = False
        if election_id is not None:
            is_admin = await self.uow.election_admin_repository.is_admin(
                requester_id, election_id
            )
        if not is_admin:
            self.logger.warning(
                "Admin check failed",
                action=action,
                requester_id=requester_id,
                election_id=election_id,
            )
            raise UnauthorizedError(
                f"Only the election creator can {action} candidates",
                {"requester_id": requester_id, "election_id": election_id},
            )

    def _require_owner(self, candidate: Candidate, requester_id: int, action: str) -> None:
        if not candidate.is_owned_by(requester_id):
            self.logger.warning(
                "Owner check failed",
                action=action,
                requester_id=requester_id,
                candidate_id=candidate.id,
            )
            raise UnauthorizedError(
                f"Can only {action} your own candidate profile",
                {"requester_id": requester_id, "candidate_id": candidate.id},
            )

    def _require_pending(self, candidate: Candidate, action: str) -> None:
        if not candidate.is_pending():
            raise ConflictError(
                f"Can only {action} pending candidate registrations",
                {"candidate_id": candidate.id, "status": candidate.status_value},
            )

    def _require_valid(self, candidate: Candidate) -> None:
        errors = candidate.get_validation_errors()
        if errors:
            raise InvalidInputError(
                f"Invalid candidate data: {', '.join(errors)}", errors
            )

    async def _transition(
        self, candidate: Candidate, to_status: CandidateStatus
    ) -> Candidate:
        # Compare-and-swap: a concurrent transition leaves the row non-PENDING
        updated = await self.uow.candidate_repository.transition_status(
            candidate.id, CandidateStatus.PENDING, to_status
        )
        if updated is None:
            raise ConflictError(
                "Candidate is no longer pending",
                {"candidate_id": candidate.id, "target_status": to_status.value},
            )
        return updated
