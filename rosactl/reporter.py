"""User facing output of the command line tool."""
import logging

import typer

logger = logging.getLogger("rosactl")


class Reporter:
    """Writes status messages for the operator.

    Messages take printf-style arguments, the same way the logging module does.
    Info goes to stdout, warnings and errors go to stderr and debug messages go
    through the logger so they only show up with --debug.
    """

    @staticmethod
    def _format(fmt: str, args) -> str:
        return fmt % args if args else fmt

    def debug(self, fmt: str, *args) -> None:
        logger.debug(fmt, *args)

    def info(self, fmt: str, *args) -> None:
        typer.secho(f"I: {self._format(fmt, args)}", fg=typer.colors.GREEN)

    def warn(self, fmt: str, *args) -> None:
        typer.secho(f"W: {self._format(fmt, args)}", fg=typer.colors.YELLOW, err=True)

    def error(self, fmt: str, *args) -> None:
        typer.secho(f"E: {self._format(fmt, args)}", fg=typer.colors.RED, err=True)
