import typer
import logging
import sys
from rosactl.commands import delete, list as list_
from rosactl.logging import setup_logging
from rosactl.reporter import Reporter
from rosactl.runtime import Invocation

# Create a callback for global options
app = typer.Typer(no_args_is_help=True)

# Global debug flag
debug_mode = False

# Add all command groups
app.add_typer(delete.app, name="delete")
app.add_typer(list_.app, name="list")


# Global options callback
@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging"),
):
    """rosactl - Administration CLI for managed OpenShift clusters."""
    global debug_mode
    debug_mode = debug
    setup_logging(debug)
    if debug:
        logging.debug("Debug mode enabled")
    if ctx.obj is None:
        ctx.obj = Invocation(reporter=Reporter())


if __name__ == "__main__":
    try:
        app()
    except Exception as e:
        if debug_mode:
            import traceback
            logging.error(f"Unhandled exception: {e}\n{traceback.format_exc()}")
        else:
            logging.error(f"Error: {e}")
        sys.exit(1)
