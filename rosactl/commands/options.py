import typer


def cluster_option():
    return typer.Option(..., "--cluster", "-c", help="Name or ID of the cluster.")
