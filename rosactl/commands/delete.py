import typer

from rosactl.commands.options import cluster_option
from rosactl.errors import translate_errors
from rosactl.modules import machinepool
from rosactl.runtime import Invocation
from rosactl.validators import validate_cluster_key, validate_machine_pool_id

app = typer.Typer(help="Delete a specific resource.")


def delete_machinepool_cmd(
    ctx: typer.Context,
    machine_pool_id: str = typer.Argument(..., metavar="ID", help="ID of the machine pool"),
    cluster: str = cluster_option(),
    yes: bool = typer.Option(False, "--yes", "-y", help="Automatically answer yes to confirm operation"),
):
    """Delete the additional machine pool from a cluster.

    Example: delete machine pool with ID mp-1 from a cluster named 'mycluster'

        rosactl delete machinepool --cluster=mycluster mp-1
    """
    invocation: Invocation = ctx.obj
    with translate_errors(invocation.reporter):
        validate_cluster_key(cluster)
        validate_machine_pool_id(machine_pool_id, cluster)
        with invocation.runtime(cluster) as r:
            machinepool.delete_machine_pool(r, machine_pool_id, yes=yes)


app.command("machinepool")(delete_machinepool_cmd)
for alias in ("machinepools", "machine-pool", "machine-pools"):
    app.command(alias, hidden=True)(delete_machinepool_cmd)
