import typer

from rosactl.commands.options import cluster_option
from rosactl.errors import translate_errors
from rosactl.modules import users
from rosactl.output import OutputFormat, render_users
from rosactl.runtime import Invocation
from rosactl.validators import validate_cluster_key

app = typer.Typer(help="List all resources of a specific type.")


def list_users_cmd(
    ctx: typer.Context,
    cluster: str = cluster_option(),
    output: OutputFormat = typer.Option(OutputFormat.TABLE, "--output", "-o", help="Output format"),
):
    """List administrative cluster users.

    Example: list all users on a cluster named "mycluster"

        rosactl list users --cluster=mycluster
    """
    invocation: Invocation = ctx.obj
    with translate_errors(invocation.reporter):
        validate_cluster_key(cluster)
        with invocation.runtime(cluster) as r:
            groups = users.list_users(r)
        typer.echo(render_users(groups, output))


app.command("users")(list_users_cmd)
app.command("user", hidden=True)(list_users_cmd)
