import logging
import warnings
from pathlib import Path
from typing import Optional

import typer

from tiny_pgctl import Controller, PgCtlError
from tiny_pgctl.ctl_status import INTERNAL_ERROR_CODE

app = typer.Typer()

formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
handler = logging.StreamHandler()
handler.setFormatter(formatter)
logger = logging.getLogger("tiny_pgctl")
logger.addHandler(handler)
logger.setLevel(logging.INFO)


def main():
    app()


@app.command()
def status(
    pg_data: Path,
    pg_ctl: Optional[Path] = typer.Option(None, help="Path to pg_ctl"),
    verbose: bool = False,
):
    if verbose:
        logger.setLevel(logging.DEBUG)
    controller = Controller(pg_data, pg_ctl_bin=pg_ctl)
    try:
        result = controller.status()
    except PgCtlError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=INTERNAL_ERROR_CODE)
    typer.echo(result)
    raise typer.Exit(code=result.error_code)


@app.command()
def is_started(
    pg_data: Path,
    pg_ctl: Optional[Path] = typer.Option(None, help="Path to pg_ctl"),
):
    controller = Controller(pg_data, pg_ctl_bin=pg_ctl)
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", DeprecationWarning)
            started = controller.is_started()
    except PgCtlError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)
    typer.echo("true" if started else "false")


if __name__ == "__main__":
    main()
