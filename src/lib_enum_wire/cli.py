"""Click command group exposing the codec on the command line.

Purpose
-------
Let operators inspect how an enum renders on the wire and check payload values
without writing Python: list the name table of an enum, encode one member, or
decode one JSON literal.

Contents
--------
* :func:`cli` - root group with global options (naming, strictness, wire-name
  uniqueness, dotenv, traceback).
* ``info`` / ``names`` / ``encode`` / ``decode`` subcommands.
* :func:`main` - entry point wrapping :func:`lib_cli_exit_tools.run_cli`.

System Role
-----------
Presentation layer. Settings resolve through :mod:`lib_enum_wire.config` and
codecs come from :mod:`lib_enum_wire.runtime`, so the CLI behaves exactly like
library callers configured through the same environment.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Optional, Sequence

import click
import lib_cli_exit_tools
from rich.console import Console
from rich.table import Table

from . import __init__conf__
from . import config as config_module
from .adapters.naming import NAMING_STRATEGIES
from .application.codec import EnumCodec
from .domain import NO_MATCH, EnumWireError
from .lib_enum_wire import load_enum, summary_info
from .runtime import get_codec

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _should_use_dotenv(flag: bool | None) -> bool:
    """CLI flag wins; otherwise the ``ENUM_WIRE_USE_DOTENV`` toggle decides."""

    if flag is not None:
        return flag
    return config_module.env_bool(config_module.DOTENV_ENV_VAR, False)


def _codec(ctx: click.Context) -> EnumCodec:
    options = ctx.find_root().obj or {}
    try:
        settings = config_module.CodecSettings.from_env(
            naming=options.get("naming"),
            strict_unknown=options.get("strict"),
            validate_unique=options.get("validate_unique"),
        )
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    return get_codec(settings=settings)


def _load(enum_path: str) -> type[Enum]:
    try:
        return load_enum(enum_path)
    except (ImportError, AttributeError, ValueError, TypeError) as exc:
        raise click.BadParameter(str(exc), param_hint="ENUM_PATH") from exc


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help=f"Load the nearest .env before resolving settings (default: ${config_module.DOTENV_ENV_VAR}).",
)
@click.option(
    "--naming",
    type=click.Choice(sorted(NAMING_STRATEGIES), case_sensitive=False),
    default=None,
    help=f"Naming strategy (default: ${config_module.ENV_NAMING} or snake).",
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Fail instead of reporting <no match> for unknown names.",
)
@click.option(
    "--validate-unique/--no-validate-unique",
    default=None,
    help=f"Refuse enums whose members share a wire name (default: ${config_module.ENV_VALIDATE_UNIQUE}).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    traceback: bool,
    use_dotenv: bool | None,
    naming: str | None,
    strict: bool | None,
    validate_unique: bool | None,
) -> None:
    """Inspect and exercise the string-only enum codec."""

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback
    if _should_use_dotenv(use_dotenv):
        config_module.enable_dotenv()
    ctx.obj = {"naming": naming, "strict": strict, "validate_unique": validate_unique}
    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)


@cli.command("names", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("enum_path")
@click.pass_context
def cli_names(ctx: click.Context, enum_path: str) -> None:
    """Show the canonical and wire name of every member of ENUM_PATH (module:Class)."""

    enum_type = _load(enum_path)
    codec = _codec(ctx)
    try:
        table = codec.register(enum_type)
    except EnumWireError as exc:
        raise click.ClickException(str(exc)) from exc

    view = Table(title=enum_type.__name__)
    view.add_column("Member")
    view.add_column("Wire name")
    view.add_column("Value")
    for entry in table:
        try:
            wire = codec.to_json(entry.member)
        except EnumWireError:
            wire = "[red]refused[/red]"
        view.add_row(entry.canonical_name, wire, repr(entry.member.value))
    Console(soft_wrap=True).print(view)


@cli.command("encode", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("enum_path")
@click.argument("member")
@click.pass_context
def cli_encode(ctx: click.Context, enum_path: str, member: str) -> None:
    """Print the JSON wire value of MEMBER (its declared name) of ENUM_PATH."""

    enum_type = _load(enum_path)
    try:
        value = enum_type[member]
    except KeyError as exc:
        raise click.BadParameter(f"{member!r} is not a member of {enum_type.__name__}", param_hint="MEMBER") from exc
    try:
        wire = _codec(ctx).to_json(value)
    except EnumWireError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(json.dumps(wire))


@cli.command("decode", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("enum_path")
@click.argument("json_text")
@click.option("--nullable", is_flag=True, default=False, help="Treat the target as Optional[ENUM].")
@click.pass_context
def cli_decode(ctx: click.Context, enum_path: str, json_text: str, nullable: bool) -> None:
    """Decode JSON_TEXT (a JSON literal such as '"reply_broadcast"') into ENUM_PATH."""

    enum_type = _load(enum_path)
    try:
        raw = json.loads(json_text)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"not valid JSON: {exc.msg}", param_hint="JSON_TEXT") from exc

    declared = Optional[enum_type] if nullable else enum_type
    try:
        value = _codec(ctx).from_json(raw, declared)
    except EnumWireError as exc:
        raise click.ClickException(str(exc)) from exc

    if value is NO_MATCH:
        click.echo("<no match>")
    elif value is None:
        click.echo("null")
    else:
        click.echo(value.name)


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI through :func:`lib_cli_exit_tools.run_cli` and return its exit code.

    Traceback preferences changed by ``--traceback`` are restored afterwards
    unless ``restore_traceback`` is ``False``.
    """

    previous = (lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = previous


__all__ = ["cli", "main"]
