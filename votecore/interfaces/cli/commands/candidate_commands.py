"""Candidacy CLI commands."""

import asyncio

import click

from votecore.application.dtos.candidate_dto import ListCandidatesByElectionInputDto
from votecore.domain.entities.candidate import CandidateStatus
from votecore.infrastructure.di.container import Container
from votecore.interfaces.cli.base import with_error_handling


@click.group()
def candidates():
    """Candidacy commands."""
    pass


@candidates.command("stats")
@click.argument("election_id", type=int)
@with_error_handling
def stats(election_id: int):
    """Show candidacy counts per status."""
    asyncio.run(_run_stats(election_id))


@candidates.command("list")
@click.argument("election_id", type=int)
@click.option(
    "--status",
    type=click.Choice(CandidateStatus.values(), case_sensitive=False),
    help="Only show candidacies in this status",
)
@with_error_handling
def list_candidates(election_id: int, status: str | None):
    """List an election's candidacies, newest first."""
    asyncio.run(_run_list(election_id, status))


async def _run_stats(election_id: int) -> None:
    container = Container()
    try:
        async with container.unit_of_work() as uow:
            result = await container.candidates_usecase(uow).get_stats(election_id)
    finally:
        await container.close()

    click.echo(f"=== Candidates of election #{election_id} ===")
    click.echo(f"  Total:    {result.total:>6,}")
    click.echo(f"  Approved: {result.approved:>6,}")
    click.echo(f"  Pending:  {result.pending:>6,}")
    click.echo(f"  Rejected: {result.rejected:>6,}")


async def _run_list(election_id: int, status: str | None) -> None:
    container = Container()
    try:
        async with container.unit_of_work() as uow:
            found = await container.candidates_usecase(uow).list_by_election(
                ListCandidatesByElectionInputDto(
                    election_id=election_id,
                    status=CandidateStatus(status.upper()) if status else None,
                )
            )
    finally:
        await container.close()

    if not found:
        click.echo(click.style("No candidates found", fg="yellow"))
        return

    for candidate in found:
        name = candidate.display_name or f"user #{candidate.user_id}"
        click.echo(
            f"  {candidate.id:>6}  {candidate.status_value:<8}  "
            f"{name} [{candidate.party_name}]  votes={candidate.total_votes:,}"
        )
