"""Rich-based console formatting utilities"""

from rich.console import Console
from rich.text import Text

console = Console()
error_console = Console(stderr=True)

def print_error(message: str) -> None:
    """Print an error message in bold red."""
    text = Text("✗ ", style="bold red") + Text(message, style="bold")
    error_console.print(text)

def print_warning(message: str) -> None:
    """Print a warning message in bold yellow."""
    text = Text("⚠ ", style="bold yellow") + Text(message, style="bold")
    console.print(text)

def print_success(message: str) -> None:
    """Print a success message in plain green."""
    text = Text("✓ ", style="green") + Text(message, style="green")
    console.print(text)

def print_json(document: str) -> None:
    """Print a JSON document with syntax highlighting."""
    console.print_json(document)
