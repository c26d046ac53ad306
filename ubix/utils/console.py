"""Rich-based console output utilities.

All user-facing output goes through this module so that every message
has a consistent style and is mirrored to the log file.
"""

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

from ubix import SCRIPT_NAME, __version__

custom_theme = Theme(
    {
        "error": "bold red",
        "success": "bold green",
        "warning": "bold yellow",
        "info": "bold blue",
        "header": "bold magenta",
        "step": "bold cyan",
        "highlight": "bold white",
    }
)

# Global console instance. Errors go to stdout too.
console = Console(theme=custom_theme, soft_wrap=True)


def print_error(message: str) -> None:
    """Print error message in red.

    Args:
        message: Error message to display
    """
    from ubix.utils.logging import log_message

    console.print(f"[error]Error:[/error] [red]{escape(message)}[/red]")
    log_message(f"ERROR: {message}")


def print_success(message: str) -> None:
    """Print success message in green.

    Args:
        message: Success message to display
    """
    from ubix.utils.logging import log_message

    console.print(f"[success]{escape(message)}[/success]")
    log_message(f"SUCCESS: {message}")


def print_warning(message: str) -> None:
    """Print warning message in yellow.

    Args:
        message: Warning message to display
    """
    from ubix.utils.logging import log_message

    console.print(f"[warning]Warning:[/warning] [yellow]{escape(message)}[/yellow]")
    log_message(f"WARNING: {message}")


def print_info(message: str) -> None:
    """Print info message in cyan.

    Args:
        message: Info message to display
    """
    from ubix.utils.logging import log_message

    console.print(f"[cyan]{escape(message)}[/cyan]")
    log_message(f"INFO: {message}")


def print_header(title: str) -> None:
    """Print section header in magenta."""
    console.print()
    console.print(f"[header]=== {escape(title)} ===[/header]")
    console.print()


def print_step(message: str) -> None:
    """Print step indicator with arrow."""
    console.print(f"[step]➜[/step] {escape(message)}")


def print_plain(text: str) -> None:
    """Print text verbatim, with no markup, highlighting or wrapping."""
    console.print(text, markup=False, highlight=False, emoji=False)


def show_version() -> None:
    """Display version information."""
    console.print(f"[bold]{SCRIPT_NAME}[/bold] v{__version__}")


__all__ = [
    "console",
    "custom_theme",
    "print_error",
    "print_success",
    "print_warning",
    "print_info",
    "print_header",
    "print_step",
    "print_plain",
    "show_version",
]
