"""Shared helpers for CLI commands."""

import functools
import sys

from collections.abc import Callable
from typing import Any

import click

from votecore.domain.exceptions import ErrorKind, InvalidInputError, VoteCoreError


EXIT_CODES: dict[ErrorKind, int] = {
    ErrorKind.INTERNAL: 1,
    ErrorKind.INVALID_INPUT: 2,
    ErrorKind.UNAUTHORIZED: 3,
    ErrorKind.NOT_FOUND: 4,
    ErrorKind.CONFLICT: 5,
    ErrorKind.PRECONDITION_FAILED: 6,
}


def with_error_handling[F: Callable[..., Any]](func: F) -> F:
    """Report core errors on stderr and exit with a code per error kind."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except VoteCoreError as e:
            click.echo(click.style(f"Error: {e.public_message}", fg="red"), err=True)
            if isinstance(e, InvalidInputError):
                for message in e.errors:
                    click.echo(f"  - {message}", err=True)
            sys.exit(EXIT_CODES[e.kind])

    return wrapper  # type: ignore[return-value]
