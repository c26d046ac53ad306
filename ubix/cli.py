"""CLI interface for UBIX.

This module provides the Typer-based command-line interface:

    ubix init <solution_name>     (alias: create)
    ubix version [update|set]     (alias: ver)
    ubix info
    ubix package                  (alias: pack)

Every command builds its option set, runs the command implementation and
turns any UbixError into a one-line message plus the matching exit code.
"""

import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Annotated

import typer

from ubix.commands.info import run_info
from ubix.commands.init import run_init
from ubix.commands.options import InfoOptions, InitOptions, PackageOptions, VersionOptions
from ubix.commands.package import run_package
from ubix.commands.version import run_version
from ubix.config.manager import ConfigManager
from ubix.ui.prompts import DefaultsPrompter, Prompter, QuestionaryPrompter
from ubix.utils.console import console, print_error, print_info, show_version
from ubix.utils.errors import ExitCode, UbixError, UserCancelledError
from ubix.utils.logging import log_command, setup_logging

app = typer.Typer(
    name="ubix",
    help="UBIX - Scaffold, version, inspect and package UBIX solutions",
    add_completion=False,
    no_args_is_help=False,
)


def version_callback(value: bool) -> None:
    """Display version and exit."""
    if value:
        show_version()
        raise typer.Exit()


@contextmanager
def _command_errors(command: str) -> Iterator[None]:
    """Convert failures of ``command`` into a message and an exit code."""
    started = time.monotonic()
    try:
        yield
    except UserCancelledError as e:
        print_info(str(e))
        log_command(command, e.exit_code, time.monotonic() - started)
        raise typer.Exit(e.exit_code) from e
    except UbixError as e:
        print_error(str(e))
        log_command(command, e.exit_code, time.monotonic() - started)
        raise typer.Exit(e.exit_code) from e
    except KeyboardInterrupt as e:
        print_info("Operation cancelled by user")
        log_command(command, ExitCode.USER_CANCELLED, time.monotonic() - started)
        raise typer.Exit(ExitCode.USER_CANCELLED) from e
    else:
        log_command(command, ExitCode.SUCCESS, time.monotonic() - started)


def _load_config() -> ConfigManager:
    config = ConfigManager()
    config.load()
    return config


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    show_config: Annotated[
        bool,
        typer.Option(
            "--config",
            help="Show current configuration and exit",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version information",
        ),
    ] = None,
) -> None:
    """UBIX - Scaffold, version, inspect and package UBIX solutions."""
    setup_logging()

    if show_config:
        with _command_errors("config"):
            _load_config().show()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help(), markup=False, highlight=False)
        raise typer.Exit()


@app.command("init")
def init_command(
    solution_name: Annotated[
        str,
        typer.Argument(help="Name of the solution; its sanitized form names the folder"),
    ],
    path: Annotated[
        str | None,
        typer.Option("--path", "-p", help="Path to root of ubix solution. Defaults to current folder."),
    ] = None,
    author: Annotated[
        str | None,
        typer.Option("--author", "-A", help="Author of solution."),
    ] = None,
    solution_version: Annotated[
        str | None,
        typer.Option("--version", "-v", help="Solution version. Defaults to 0.0.0"),
    ] = None,
    api: Annotated[
        str | None,
        typer.Option("--api", "-V", help="UBIX API version. Defaults to latest"),
    ] = None,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Accept defaults instead of prompting"),
    ] = False,
) -> None:
    """Initialize a UBIX solution repository."""
    options = InitOptions(
        solution_name=solution_name,
        path=path,
        author=author,
        version=solution_version,
        api=api,
        assume_defaults=yes,
    )
    with _command_errors("init"):
        settings = _load_config().settings
        prompter: Prompter
        if options.assume_defaults or settings.assume_defaults:
            prompter = DefaultsPrompter()
        else:
            prompter = QuestionaryPrompter()
        run_init(options, settings, prompter)


@app.command("version")
def version_command(
    action: Annotated[
        str | None,
        typer.Argument(help="'update' or 'set' to change the version; omit to show it"),
    ] = None,
    solution: Annotated[
        str | None,
        typer.Option("--solution", "-s", help="The solution file. Defaults to ./ubix.json"),
    ] = None,
    new_version: Annotated[
        str | None,
        typer.Option("--version", "-v", help="Set new version for solution"),
    ] = None,
    minor: Annotated[
        str | None,
        typer.Option("--minor", "-m", help="Increment minor version (by minor amount)"),
    ] = None,
    major: Annotated[
        str | None,
        typer.Option("--major", "-M", help="Increment major version (by major amount)"),
    ] = None,
    patch: Annotated[
        str | None,
        typer.Option("--patch", "-p", help="Increment patch version (by patch amount)"),
    ] = None,
) -> None:
    """Reversion the solution package."""
    options = VersionOptions(
        action=action,
        solution=solution,
        version=new_version,
        major=major,
        minor=minor,
        patch=patch,
    )
    with _command_errors("version"):
        run_version(options)


@app.command("info")
def info_command(
    solution: Annotated[
        str | None,
        typer.Option("--solution", "-s", help="The solution file. Defaults to ./ubix.json"),
    ] = None,
) -> None:
    """Information on the solution package."""
    with _command_errors("info"):
        run_info(InfoOptions(solution=solution))


@app.command("package")
def package_command(
    path: Annotated[
        str | None,
        typer.Option("--path", "-p", help="The path to the solution folder. Defaults to ."),
    ] = None,
    file: Annotated[
        str | None,
        typer.Option(
            "--file",
            "-f",
            help="The file to output the packaged solution to. Defaults to ubix.zip in solution folder.",
        ),
    ] = None,
) -> None:
    """Package solution for upload."""
    options = PackageOptions(path=path, file=file)
    with _command_errors("package"):
        settings = _load_config().settings
        run_package(options, settings)


# Aliases
app.command("create", hidden=True)(init_command)
app.command("ver", hidden=True)(version_command)
app.command("pack", hidden=True)(package_command)


if __name__ == "__main__":
    app()
