# Cmdparse Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for cmdparse help and diagnostics."""
from rich.console import Console
from rich.theme import Theme

theme = Theme(
    {
        "cmdparse.error": "bold red",
        "cmdparse.heading": "bold",
        "cmdparse.option": "cyan",
        "cmdparse.command": "bold magenta",
        "cmdparse.description": "default",
    }
)

console = Console(theme=theme, highlight=False)

# Log output. stdout is reserved for help text and result tables.
error_console = Console(theme=theme, highlight=False, stderr=True)
