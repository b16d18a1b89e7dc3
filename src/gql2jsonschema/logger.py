"""Rich-backed logging for gql2jsonschema with CLI output helpers."""

import logging

from rich.console import Console
from rich.logging import RichHandler


class Gql2JsonSchemaLogger(logging.Logger):
    """
    Logger that combines Python logging with a few CLI formatting methods.

    Everything is written to stderr so that stdout only ever carries the
    generated JSON Schema.
    """

    def __init__(self, name: str, level: int = logging.INFO) -> None:
        """
        Initialize the logger.

        Args:
            name: Logger name
            level: Initial log level
        """
        super().__init__(name, level)
        self.console = Console(stderr=True)

        handler = RichHandler(
            console=self.console,
            rich_tracebacks=True,
            show_time=True,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        self.addHandler(handler)
        self.propagate = False

    def print(self, message: str) -> None:
        """Print a plain message (with Rich markup support)."""
        self.console.print(message)

    def colored(self, message: str, style: str = "bold cyan") -> None:
        """
        Print a message with a specific style/color.

        Args:
            message: Message to display
            style: Rich style string (e.g., "green", "red", "bold cyan", "dim")
        """
        self.print(f"[{style}]{message}[/{style}]")

    def success(self, message: str) -> None:
        """Print a success message in green with a checkmark."""
        self.print(f"[green]✓[/green] {message}")

    def hint(self, message: str) -> None:
        """Print a dimmed hint/secondary message."""
        self.colored(message, "dim")


def get_logger(name: str = "gql2jsonschema") -> Gql2JsonSchemaLogger:
    """
    Get or create a gql2jsonschema logger instance.

    Args:
        name: Logger name (default: "gql2jsonschema")

    Returns:
        Gql2JsonSchemaLogger instance
    """
    previous = logging.getLoggerClass()
    logging.setLoggerClass(Gql2JsonSchemaLogger)
    try:
        logger = logging.getLogger(name)
    finally:
        logging.setLoggerClass(previous)

    return logger  # type: ignore[return-value]
