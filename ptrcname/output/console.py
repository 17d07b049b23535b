"""
Rich console output for ptrcname
"""

from typing import Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .. import __version__
from ..models import Endpoint, RecordType


class ConsoleOutput:
    """
    Rich console output for endpoint lists.

    Features:
    - Header panel with source and resolver
    - Endpoint table with rewritten rows highlighted
    - One-line summary
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def print_header(self, source: str, resolver: str,
                     lookup_timeout: Optional[float] = None):
        """Print run header"""
        content = Text()
        content.append("ptrcname", style="bold cyan")
        content.append(f" v{__version__}\n", style="dim")
        content.append("Source: ", style="dim")
        content.append(source, style="bold")
        content.append("\n")
        content.append(f"Resolver: {resolver}", style="dim")
        if lookup_timeout is not None:
            content.append(f"  |  Timeout: {lookup_timeout:g}s", style="dim")

        self.console.print(Panel(content, border_style="cyan", padding=(0, 1)))

    def print_endpoints(self, endpoints: list[Endpoint], rewritten: set[int]):
        """
        Print endpoints as a table.

        Args:
            endpoints: Endpoints to show, in order
            rewritten: Indexes of endpoints that were turned into CNAMEs
        """
        table = Table(
            show_header=True,
            header_style="bold magenta",
            box=box.ROUNDED,
            border_style="dim",
            padding=(0, 1)
        )

        table.add_column("#", style="dim", justify="right")
        table.add_column("DNS Name")
        table.add_column("Type", width=6)
        table.add_column("Targets", overflow="fold")
        table.add_column("TTL", justify="right")
        table.add_column("", width=2)

        for i, ep in enumerate(endpoints):
            is_rewritten = i in rewritten
            table.add_row(
                str(i + 1),
                ep.dns_name,
                Text(ep.record_type, style=self._type_style(ep.record_type)),
                ", ".join(ep.targets) or "-",
                str(ep.record_ttl) if ep.record_ttl else "-",
                Text("✔", style="green") if is_rewritten else "",
                style="bold" if is_rewritten else None,
            )

        self.console.print(table)

    def print_summary(self, total: int, rewritten: int):
        """Print how many endpoints were rewritten"""
        line = Text()
        line.append(f"{rewritten}", style="bold green" if rewritten else "bold")
        line.append(f" of {total} endpoints published as CNAME", style="dim")
        if total - rewritten:
            line.append(f", {total - rewritten} left as-is", style="dim")
        self.console.print(line)

    def print_error(self, message: str):
        """Print error message"""
        self.console.print(f"[bold red]Error:[/] {message}")

    def print_warning(self, message: str):
        """Print warning message"""
        self.console.print(f"[yellow]Warning:[/] {message}")

    def _type_style(self, record_type: str) -> str:
        if record_type == RecordType.CNAME:
            return "cyan"
        if record_type in (RecordType.A, RecordType.AAAA):
            return "yellow"
        return "dim"
