"""votecore command line entry point."""

import click

from votecore.interfaces.cli.commands.candidate_commands import candidates
from votecore.interfaces.cli.commands.result_commands import results


@click.group()
def cli():
    """Candidacy and election result management."""
    pass


cli.add_command(results)
cli.add_command(candidates)


if __name__ == "__main__":
    cli()
