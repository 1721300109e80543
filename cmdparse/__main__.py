"""
Cmdparse Option Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import os
import shlex
import sys
from pathlib import Path
from typing import Sequence

from rich.markup import escape
from rich.table import Table

from cmdparse.config import Handles, loader
from cmdparse.console import console
from cmdparse.context import Context
from cmdparse.exceptions import ConfigError, ValidationError
from cmdparse.flags import OptionFlag
from cmdparse.option import CommandHandle, OptionHandle
from cmdparse.utils import setup_logging

USAGE = "cmdparse [options]\n  Check an argument line against a YAML or TOML definition file."


def find_cmdparse_config() -> Path | None:
    candidates = [
        Path.cwd() / "cmdparse.yaml",
        Path.cwd() / "cmdparse.toml",
        Path(os.environ.get("CMDPARSE_CONFIG", "cmdparse.yaml")),
        Path.home() / ".config" / "cmdparse" / "cmdparse.yaml",
        Path.home() / ".config" / "cmdparse" / "cmdparse.toml",
    ]
    return next((p for p in candidates if p.exists()), None)


def build_results_table(context: Context, handles: Handles) -> Table:
    table = Table(title="Validation results", show_lines=False)
    table.add_column("Name", style="cyan")
    table.add_column("Count", justify="right")
    table.add_column("Values")
    for key, handle in handles.items():
        if isinstance(handle, CommandHandle):
            table.add_row(key, str(context.count(handle)), "command")
        elif isinstance(handle, OptionHandle):
            values = context.take_values(handle)
            table.add_row(
                key,
                str(context.count(handle)),
                ", ".join(outcome.raw or "" for outcome in values),
            )
    leftovers = context.get_leftover_args()
    if leftovers:
        table.add_row("[dim]leftover[/]", str(len(leftovers)), ", ".join(leftovers))
    return table


def main(argv: Sequence[str] | None = None) -> int:
    ctx = Context(USAGE, argv)
    help_opt = ctx.add_flag("help", "h", "Display this help")
    config_opt = ctx.add_option(
        "config",
        "c",
        "Definition file (YAML or TOML)",
        OptionFlag.TAKES_ARG | OptionFlag.UNIQUE,
    )
    args_opt = ctx.add_option(
        "args", "a", "Argument line to check", OptionFlag.TAKES_ARG | OptionFlag.UNIQUE
    )
    verbose_opt = ctx.add_flag("verbose", "v", "Increase log verbosity (repeatable)")
    log_mode_opt = ctx.add_option(
        "log-mode", None, "Log output mode: cli or json", OptionFlag.TAKES_OPTIONAL_ARG
    )
    log_file_opt = ctx.add_option(
        "log-file",
        None,
        "Also write logs to this file",
        OptionFlag.TAKES_ARG | OptionFlag.UNIQUE,
    )

    try:
        ctx.validate()
    except ValidationError as error:
        ctx.print_help(error.message)
        return 2

    if ctx.check(help_opt):
        ctx.print_help()
        return 0

    log_file = ctx.value_or(log_file_opt, None, type=str)
    log_mode = ctx.take_value(log_mode_opt).value if ctx.check(log_mode_opt) else None
    try:
        setup_logging(
            mode=log_mode, verbosity=ctx.count(verbose_opt), log_filename=log_file
        )
    except ValueError as error:
        ctx.print_help(str(error))
        return 2

    config_path = ctx.value_or(config_opt, None, type=Path) or find_cmdparse_config()
    if config_path is None:
        ctx.print_help("No definition file given and none found")
        return 1

    line = ctx.value_or(args_opt, None, type=str)
    try:
        target_args = shlex.split(line) if line else []
    except ValueError as error:
        ctx.print_help(f"Invalid argument line: {error}")
        return 2

    try:
        target, handles = loader(config_path, target_args)
    except ConfigError as error:
        console.print(f"[cmdparse.error]{escape(str(error))}[/]")
        return 1

    if line is None:
        target.print_help()
        return 0

    try:
        target.validate()
    except ValidationError as error:
        target.print_help(error.message)
        return 2

    console.print(build_results_table(target, handles))
    return 0


def main_entry() -> None:
    sys.exit(main())


if __name__ == "__main__":
    main_entry()
