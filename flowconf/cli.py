"""
flowconf CLI: validate a config script or print the workflow it resolves to.
"""

import logging
from pathlib import Path
from typing import Optional

import typer

from flowconf import __version__
from flowconf.core.config import settings
from flowconf.core.console import CONSOLE_LOGGER_NAME
from flowconf.core.exceptions import ConfigValidationError
from flowconf.core.options import GeneralOptions, Options, WorkflowOptions
from flowconf.loader import ConfigParser
from flowconf.models import Config
from flowconf.modules import OPTIONAL_MODULES

app = typer.Typer(
    name="flowconf",
    help="Load and validate workflow config scripts",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"flowconf {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    # Console messages are user output, not library logging.
    logging.getLogger(CONSOLE_LOGGER_NAME).setLevel(logging.INFO)


def _load(config_path: Path, workflow: str, verbose: bool, last_revision: str | None) -> Config:
    options = Options(
        general=GeneralOptions(verbose=verbose),
        workflow=WorkflowOptions(workflow_name=workflow, last_revision=last_revision),
    )
    if verbose:
        logging.getLogger("flowconf").setLevel(logging.DEBUG)
    try:
        return ConfigParser(OPTIONAL_MODULES).load_config_file(config_path, options)
    except ConfigValidationError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(code=1) from e


@app.command()
def validate(
    config_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Config script"),
    workflow: str = typer.Argument(settings.DEFAULT_WORKFLOW, help="Workflow to select"),
    last_revision: Optional[str] = typer.Option(None, "--last-rev", help="Revision to start from"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Load the config and check that the workflow exists."""
    config = _load(config_path, workflow, verbose, last_revision)
    wf = config.active_workflow
    typer.echo(
        f"Configuration '{config_path}' is valid. "
        f"Project: {config.project_name}, workflow: {wf.name} ({wf.mode.value})"
    )


@app.command()
def show(
    config_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Config script"),
    workflow: str = typer.Argument(settings.DEFAULT_WORKFLOW, help="Workflow to select"),
    last_revision: Optional[str] = typer.Option(None, "--last-rev", help="Revision to start from"),
) -> None:
    """Print the resolved config as JSON."""
    config = _load(config_path, workflow, False, last_revision)
    typer.echo(config.model_dump_json(indent=2))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
