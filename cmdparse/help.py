# Cmdparse Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders the usage and help text of a `Context` with Rich.

The formatter only reads the registry: the usage summary, every visible
option of the global scope, and every command with its own visible options.
Option labels are padded to the scope's alignment so descriptions line up.

Example output:
    Error : Invalid option : x.
    Usage:
      build [options] command
    
    Valid global options :
      -v,     --verbose          Talk more
              --output=argument  Output path
    
    Valid commands :
      clean    Remove build artefacts
        Valid options for clean :
        -a,     --all              Remove everything
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

from cmdparse.console import console
from cmdparse.option import OptionSpec
from cmdparse.scope import OptionScope

if TYPE_CHECKING:
    from cmdparse.context import Context


class HelpFormatter:
    """Builds and prints help text for a context."""

    def __init__(self, context: Context, console: Console = console) -> None:
        self.context = context
        self.console = console

    @staticmethod
    def format_option(option: OptionSpec, alignment: int, indent: str = "  ") -> str:
        """Return the plain help line of one option."""
        line = f"{indent}{option.get_label(alignment)}  {option.description or ''}"
        return line.rstrip()

    def format_scope(self, scope: OptionScope, indent: str = "  ") -> list[str]:
        return [
            self.format_option(option, scope.alignment, indent)
            for option in scope.visible_options
        ]

    def get_lines(self, message: str | None = None) -> list[str]:
        """Return the help text as plain lines."""
        lines: list[str] = []
        if message:
            lines.append(f"Error : {message}")
        lines.append("Usage:")
        lines.append(f"  {self.context.description}")

        global_lines = self.format_scope(self.context.scope)
        if global_lines:
            lines.append("")
            lines.append("Valid global options :")
            lines.extend(global_lines)

        if self.context.commands:
            lines.append("")
            lines.append("Valid commands :")
            for name, command in self.context.commands.items():
                lines.append(f"  {name}    {command.description}")
                command_lines = self.format_scope(command, indent="    ")
                if command_lines:
                    lines.append(f"    Valid options for {name} :")
                    lines.extend(command_lines)
                    lines.append("")
        return lines

    def render(self, message: str | None = None) -> None:
        """Print the help text, prefixed by `message` when given."""
        if message:
            self.console.print(f"[cmdparse.error]Error :[/] {escape(message)}")
        self.console.print("[cmdparse.heading]Usage:[/]")
        self.console.print(f"  {escape(self.context.description)}")

        global_lines = self.format_scope(self.context.scope)
        if global_lines:
            self.console.print("\n[cmdparse.heading]Valid global options :[/]")
            for line in global_lines:
                self.console.print(escape(line), style="cmdparse.description")

        if self.context.commands:
            self.console.print("\n[cmdparse.heading]Valid commands :[/]")
            for name, command in self.context.commands.items():
                self.console.print(
                    f"  [cmdparse.command]{escape(name)}[/]    "
                    f"{escape(command.description)}"
                )
                command_lines = self.format_scope(command, indent="    ")
                if command_lines:
                    self.console.print(f"    Valid options for {escape(name)} :")
                    for line in command_lines:
                        self.console.print(escape(line), style="cmdparse.description")
                    self.console.print()
