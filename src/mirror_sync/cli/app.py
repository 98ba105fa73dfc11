from typing import Optional

import typer


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:  # pragma: no cover
        import mirror_sync

        typer.echo(f"mirror-sync version: {mirror_sync.__version__}")
        raise typer.Exit()


app = typer.Typer(name="mirror-sync")


@app.callback()
def app_callback(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """mirror-sync - mirror a source directory into a destination directory."""
