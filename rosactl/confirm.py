import typer


def confirm(action: str, yes: bool = False) -> bool:
    """Ask the operator to approve a destructive action. Defaults to no.

    End of input (Ctrl-D, a closed or empty stdin) counts as no.
    """
    if yes:
        return True
    try:
        return typer.confirm(f"Are you sure you want to {action}?", default=False)
    except typer.Abort:
        typer.echo()
        return False
