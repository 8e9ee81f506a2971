"""Main CLI application module.

This module provides the entry point for the SimpleApp deployment driver.
One command builds the application image, pushes it, packs the Helm chart
and uploads it, each step enabled by its own flag:

    simpleapp-deploy --build --push --tag 1.0.0
    simpleapp-deploy --pack_helm --push_helm --helm_repo https://charts.example.com

Every setting defaults to an environment variable (DOCKER_REG, DOCKER_USR,
DOCKER_PSW, DOCKER_REPO, DOCKER_TAG, HELM_REPO, HELM_USR, HELM_PSW) and can be
overridden by a flag. Usage errors, ``-h``/``--help`` and running without
arguments all print the usage and exit with status 1.
"""

import os
import sys
from collections.abc import Mapping, Sequence
from typing import Annotated

import click
import typer
from dotenv import load_dotenv
from loguru import logger
from rich.markup import escape

from src.cli.config import DriverConfig
from src.cli.context import get_cli_context
from src.cli.deployment.constants import DeploymentConstants
from src.cli.deployment.pipeline import DeploymentPipeline
from src.cli.shared.console import console, with_error_handling

PROG_NAME = "simpleapp-deploy"
LOG_FORMAT = "{level: <8} | {message}"

# The built-in help option exits with status 0; -h/--help is declared on the
# command instead so it can exit with status 1.
app = typer.Typer(
    help="Script for building the Docker image and Helm chart",
    add_completion=False,
    rich_markup_mode="rich",
)


@app.command(context_settings={"help_option_names": []})
@with_error_handling
def deploy(
    ctx: typer.Context,
    build: Annotated[
        bool, typer.Option("--build", help="Build the Docker image")
    ] = False,
    push: Annotated[
        bool, typer.Option("--push", help="Push the Docker image")
    ] = False,
    pack_helm: Annotated[
        bool, typer.Option("--pack_helm", help="Pack the Helm chart")
    ] = False,
    push_helm: Annotated[
        bool, typer.Option("--push_helm", help="Push the Helm chart")
    ] = False,
    registry: Annotated[
        str | None,
        typer.Option("--registry", metavar="REG", help="A custom Docker registry"),
    ] = None,
    docker_usr: Annotated[
        str | None,
        typer.Option("--docker_usr", metavar="USER", help="Docker registry username"),
    ] = None,
    docker_psw: Annotated[
        str | None,
        typer.Option("--docker_psw", metavar="PASS", help="Docker registry password"),
    ] = None,
    tag: Annotated[
        str | None,
        typer.Option("--tag", metavar="TAG", help="A custom app version"),
    ] = None,
    helm_repo: Annotated[
        str | None,
        typer.Option(
            "--helm_repo", metavar="URL", help="The Helm repository to push to"
        ),
    ] = None,
    helm_usr: Annotated[
        str | None,
        typer.Option(
            "--helm_usr",
            metavar="USER",
            help="The user for uploading to the Helm repository",
        ),
    ] = None,
    helm_psw: Annotated[
        str | None,
        typer.Option(
            "--helm_psw",
            metavar="PASS",
            help="The password for uploading to the Helm repository",
        ),
    ] = None,
    show_help: Annotated[
        bool, typer.Option("-h", "--help", help="Show this usage")
    ] = False,
) -> None:
    """Build and push the Docker image, pack and push the Helm chart.

    Steps run in a fixed order (build, push, pack_helm, push_helm) and the
    run stops at the first failure.

    Examples:
        simpleapp-deploy --build --tag 1.0.0
        simpleapp-deploy --build --push --registry ghcr.io/me --tag 1.0.0
        simpleapp-deploy --pack_helm --push_helm --helm_repo https://charts.example.com
    """
    if show_help:
        print_usage(ctx)
        raise typer.Exit(1)

    cli_ctx = get_cli_context(ctx)
    load_dotenv(cli_ctx.paths.env_file, override=False)
    config = DriverConfig.from_options(os.environ, ctx.params)

    cli_ctx.console.print_header("SimpleApp Deploy")
    DeploymentPipeline.from_context(cli_ctx).run(config)
    cli_ctx.console.ok("Done")


def print_usage(ctx: click.Context) -> None:
    """Print the command usage.

    In rich markup mode typer renders the help itself and returns nothing.
    """
    help_text = ctx.get_help()
    if help_text:
        click.echo(help_text)


def _usage_context(command: click.Command) -> click.Context:
    """Create a context for rendering help without running the command."""
    return command.make_context(PROG_NAME, [], resilient_parsing=True)


def parse_args(argv: Sequence[str], environ: Mapping[str, str]) -> DriverConfig:
    """Parse command-line flags into a configuration without running anything.

    Args:
        argv: Command-line arguments, without the program name
        environ: Environment mapping supplying the defaults

    Returns:
        The resolved configuration

    Raises:
        click.UsageError: On unknown flags, extra arguments, missing values,
            ``-h``/``--help`` or an empty argument list
    """
    command = typer.main.get_command(app)
    with command.make_context(PROG_NAME, list(argv)) as ctx:
        if not argv:
            raise click.UsageError("No arguments given", ctx=ctx)
        if ctx.params.get("show_help"):
            raise click.UsageError("Help requested", ctx=ctx)
        return DriverConfig.from_options(environ, ctx.params)


def configure_logging(environ: Mapping[str, str]) -> None:
    """Send log records to stderr at the level named by DEPLOY_LOG_LEVEL."""
    constants = DeploymentConstants()
    level = environ.get(constants.LOG_LEVEL_ENV) or constants.DEFAULT_LOG_LEVEL

    logger.remove()
    try:
        logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)
    except ValueError:
        logger.add(sys.stderr, level=constants.DEFAULT_LOG_LEVEL, format=LOG_FORMAT)
        logger.warning(f"Unknown log level '{level}', using {constants.DEFAULT_LOG_LEVEL}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main entry point for the CLI."""
    args = list(sys.argv[1:] if argv is None else argv)
    configure_logging(os.environ)

    command = typer.main.get_command(app)
    if not args:
        print_usage(_usage_context(command))
        raise SystemExit(1)

    try:
        exit_code = command.main(
            args=args, prog_name=PROG_NAME, standalone_mode=False
        )
    except click.UsageError as e:
        console.error(escape(e.format_message()))
        print_usage(_usage_context(command))
        raise SystemExit(1) from e
    except click.Abort:
        raise SystemExit(130) from None

    if exit_code:
        raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
