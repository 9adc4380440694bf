"""Election result CLI commands."""

import asyncio
import json

import click

from votecore.application.dtos.election_result_dto import (
    ElectionResultOutputDto,
    GetElectionResultInputDto,
)
from votecore.domain.value_objects.election_result_summary import (
    ElectionResultSummary,
)
from votecore.infrastructure.di.container import Container
from votecore.interfaces.cli.base import with_error_handling


@click.group()
def results():
    """Election result commands."""
    pass


@results.command("list")
@click.option("--json", "as_json", is_flag=True, help="Print JSON")
@with_error_handling
def list_results(as_json: bool):
    """Show results of every completed election."""
    asyncio.run(_run_list(as_json))


@results.command("show")
@click.argument("election_id", type=int)
@click.option("--json", "as_json", is_flag=True, help="Print JSON")
@with_error_handling
def show_result(election_id: int, as_json: bool):
    """Show one election's result, storing it if it changed."""
    asyncio.run(_run_get(election_id, regenerate=False, as_json=as_json))


@results.command("regenerate")
@click.argument("election_id", type=int)
@click.option("--json", "as_json", is_flag=True, help="Print JSON")
@with_error_handling
def regenerate_result(election_id: int, as_json: bool):
    """Rebuild one election's result and always store it."""
    asyncio.run(_run_get(election_id, regenerate=True, as_json=as_json))


async def _run_list(as_json: bool) -> None:
    container = Container()
    try:
        async with container.unit_of_work() as uow:
            summaries = await container.results_usecase(uow).list_completed_results()
    finally:
        await container.close()

    if as_json:
        click.echo(json.dumps([s.to_dict() for s in summaries], default=str, indent=2))
        return

    if not summaries:
        click.echo(click.style("No completed elections", fg="yellow"))
        return
    for summary in summaries:
        _echo_summary(summary)
        click.echo("")


async def _run_get(election_id: int, regenerate: bool, as_json: bool) -> None:
    container = Container()
    try:
        async with container.unit_of_work() as uow:
            output = await container.results_usecase(uow).get_result(
                GetElectionResultInputDto(election_id=election_id, regenerate=regenerate)
            )
    finally:
        await container.close()

    if as_json:
        click.echo(json.dumps(output.to_dict(), default=str, indent=2))
    else:
        _echo_summary(output.summary)
    _echo_persistence(output)


def _echo_summary(summary: ElectionResultSummary) -> None:
    click.echo(f"=== {summary.title} (#{summary.election_id}) ===")
    click.echo(f"  Votes cast:        {summary.total_votes:,}")
    click.echo(f"  Registered voters: {summary.total_registered_voters:,}")
    click.echo(f"  Turnout:           {summary.voter_turnout_percentage:.2f}%")

    if summary.winner:
        click.echo(
            f"  Winner:            {summary.winner.name} [{summary.winner.party_name}]"
        )
    else:
        click.echo("  Winner:            -")

    for rank, candidate in enumerate(summary.candidates, 1):
        click.echo(
            f"  {rank:>3}. {candidate.name} [{candidate.party_name}] "
            f"{candidate.total_votes:>8,} ({candidate.vote_percentage:.2f}%)"
        )


def _echo_persistence(output: ElectionResultOutputDto) -> None:
    if output.persistence_failed:
        click.echo(
            click.style(f"Warning: {output.persistence_error}", fg="yellow"), err=True
        )
    elif output.persisted:
        click.echo(click.style("Stored result updated", fg="green"), err=True)
