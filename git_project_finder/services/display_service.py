"""Display service for resolved project entries"""
import json
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from git_project_finder.constants import COLUMNS
from git_project_finder.formatters import format_directory, format_main_marker, format_title
from git_project_finder.logging_config import get_logger
from git_project_finder.models.project import Diagnostic, FlatEntry

logger = get_logger(__name__)


class DisplayService:
    def __init__(self, base_path: str, console: Optional[Console] = None, err_console: Optional[Console] = None):
        self.base_path = base_path
        self.console = console or Console()
        # Notices go to stderr so --json output stays parseable
        self.err_console = err_console or Console(stderr=True)

    def display_diagnostics(self, diagnostics: List[Diagnostic]) -> None:
        """Print non-blocking notices."""
        for diagnostic in diagnostics:
            self.err_console.print(Text.assemble((diagnostic.title, "yellow"), ": ", diagnostic.message))

    def display_projects(self, entries: List[FlatEntry], config_path: str) -> None:
        """Display a table of project entries."""
        if not entries:
            self.console.print("[bold]No Projects[/bold]")
            self.console.print(f"Try and add some to the config file at {config_path}")
            return

        table = Table()
        for col in COLUMNS:
            if col.width:
                table.add_column(col.label, max_width=col.width)
            else:
                table.add_column(col.label)

        for entry in entries:
            # Text() keeps rich from reading "[...]" in branch names as markup
            table.add_row(
                Text(format_title(entry.display_name)),
                Text(entry.branch or ""),
                Text(format_directory(entry.directory, self.base_path)),
                format_main_marker(entry),
                style="cyan" if entry.is_main_worktree else None,
            )

        self.console.print(table)
        logger.debug(f"Displayed {len(entries)} entries")

    def display_json(self, entries: List[FlatEntry]) -> None:
        """Print entries as a JSON array."""
        payload = json.dumps([entry.to_dict() for entry in entries], indent=2)
        self.console.print(payload, markup=False, highlight=False, emoji=False, soft_wrap=True)
