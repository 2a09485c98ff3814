import logging
from typing import Any, Optional

from rich.console import Console
from rich.panel import Panel
from rich.pretty import Pretty
from rich.table import Table

from typedcache.domain.interfaces.user_interface import UserInterface
from typedcache.domain.models.common import CacheKey, ValueKind

logger = logging.getLogger(__name__)


class ConsoleDisplay(UserInterface):
    """Concrete implementation of UserInterface using the rich library for console output."""

    def __init__(self, console: Optional[Console] = None):
        """Initializes the rich Console."""
        self._console = console or Console()

    @property
    def console(self) -> Console:
        """Get the Rich console instance for direct operations."""
        return self._console

    @console.setter
    def console(self, console: Console) -> None:
        self._console = console

    def display_value(self, key: CacheKey, kind: ValueKind, value: Any) -> None:
        """Shows a value read from the cache as a one-row table.

        Scalars are printed as-is; containers and custom objects are
        pretty-printed.
        """
        logger.debug(f"display_value called: key={key}, kind={kind.value}, type={type(value).__name__}")
        table = Table(show_header=True, header_style="bold cyan", box=None)
        table.add_column("Key", style="bold")
        table.add_column("Kind", style="dim")
        table.add_column("Value")
        if isinstance(value, (str, int, float, bool)) or value is None:
            rendered: Any = repr(value) if isinstance(value, str) else str(value)
        else:
            rendered = Pretty(value)
        table.add_row(str(key), kind.value, rendered)
        self.console.print(table)

    def display_error(self, error_message: str, **kwargs: Any) -> None:
        title = kwargs.get("title", "Error")
        self.console.print(Panel(error_message, title=f"[bold red]{title}[/bold red]", border_style="red"))

    def display_warning(self, warning_message: str, **kwargs: Any) -> None:
        self.console.print(f"[bold yellow]Warning:[/bold yellow] {warning_message}")

    def display_info(self, info_message: str, **kwargs: Any) -> None:
        self.console.print(f"[blue]Info:[/blue] {info_message}")
