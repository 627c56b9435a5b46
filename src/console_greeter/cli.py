"""CLI adapter for ``console_greeter`` built on ``lib_cli_exit_tools``.

Purpose
-------
Expose the console interaction routine as a command so it can be run from a
shell, piped into, and scripted. Invoking the command without a subcommand runs
the greeting session directly.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – root command wiring traceback handling into
  ``lib_cli_exit_tools`` and running the session when no subcommand is given.
* :func:`cli_greet` – the session as an explicit subcommand.
* :func:`cli_info` – prints distribution metadata for quick diagnostics.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
The CLI lives in the outermost layer. It hands ``sys.stdin``/``sys.stdout`` to
:func:`console_greeter.core.greet` and leaves exit code selection to
``lib_cli_exit_tools``.
"""

from __future__ import annotations

import sys
from importlib import metadata
from typing import Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .core import greet

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000


def _resolve_version() -> str:
    """Return the installed package version, or ``"0.0.0"`` when not installed."""

    try:
        return metadata.version("console_greeter")
    except metadata.PackageNotFoundError:
        return "0.0.0"


def _run_session() -> None:
    # Resolved at call time so Click's test runner can swap the streams.
    greet(sys.stdin, sys.stdout)


@click.group(
    help="Ask for a name and an age, then say hello",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=_resolve_version(),
    prog_name="console_greeter",
    message="console_greeter version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Root command configuring traceback handling for all subcommands.

    What
        Mirrors the traceback preference into :mod:`lib_cli_exit_tools.config`
        and runs the greeting session when no subcommand was requested.

    Side Effects
        Mutates ``lib_cli_exit_tools.config.traceback`` and
        ``lib_cli_exit_tools.config.traceback_force_color``.
    """

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback
    if ctx.invoked_subcommand is None:
        _run_session()


@cli.command("greet", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_greet() -> None:
    """Prompt for a name and an age on the terminal and print a greeting.

    Examples
    --------
    >>> from click.testing import CliRunner
    >>> result = CliRunner().invoke(cli, ["greet"], input="Ann Lee\\n5\\n")
    >>> result.output
    'Enter your name: Enter your age: Hello, Ann Lee! You are 5 years old.\\n'
    """

    _run_session()


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print basic distribution metadata so users can confirm installation."""

    try:
        meta = metadata.metadata("console_greeter")
    except metadata.PackageNotFoundError:
        click.echo("console_greeter (metadata unavailable)")
        return
    click.echo(f"Info for {meta.get('Name', 'console_greeter')}:")
    click.echo(f"  Version         : {meta.get('Version', _resolve_version())}")
    click.echo(f"  Requires-Python : {meta.get('Requires-Python', '>=3.10')}")
    summary = meta.get("Summary")
    if summary:
        click.echo(f"  Summary         : {summary}")


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name="console_greeter",
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=(
                    _TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else _TRACEBACK_SUMMARY_LIMIT
                ),
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))
