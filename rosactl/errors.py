"""Error types raised by command handlers and their translation to exit codes."""
from contextlib import contextmanager
from typing import Iterator

import typer


class RosaError(Exception):
    """Base exception for failures that end a command."""
    exit_code = 1
    level = "error"


class InvalidInputError(RosaError):
    """Exception raised when an argument is malformed."""
    pass


class ProtectedResourceError(InvalidInputError):
    """Exception raised when a command targets a resource that must not be touched."""
    pass


class LookupFailedError(RosaError):
    """Exception raised when a resource can't be fetched from the API."""
    pass


class NotFoundError(LookupFailedError):
    """Exception raised when a requested object is not found."""
    pass


class StatePreconditionError(RosaError):
    """Exception raised when a resource is not in a state that allows the command."""
    pass


class ActionFailedError(RosaError):
    """Exception raised when the API call performing the command fails."""
    pass


class NoResultsError(RosaError):
    """Raised when a listing has nothing to show. Reported as a warning."""
    level = "warning"


def report(reporter, error: RosaError) -> int:
    """Report an error at its level and return the exit code for it."""
    if error.level == "warning":
        reporter.warn("%s", error)
    else:
        reporter.error("%s", error)
    return error.exit_code


@contextmanager
def translate_errors(reporter) -> Iterator[None]:
    """Turn a RosaError raised inside the block into a reported typer.Exit."""
    try:
        yield
    except RosaError as e:
        raise typer.Exit(code=report(reporter, e)) from None
