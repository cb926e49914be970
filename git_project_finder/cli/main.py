"""Command-line entry point for git-project-finder"""

import sys

from rich.console import Console

from git_project_finder.cli.args import parse_args
from git_project_finder.config import Config
from git_project_finder.core import ProjectFinder
from git_project_finder.logging_config import setup_logging
from git_project_finder.services.display_service import DisplayService

console = Console()
# Diagnostics and debug output, kept off stdout so --json stays parseable
err_console = Console(stderr=True)


def main(argv=None) -> int:
    """Main entry point for the application."""
    parsed_args = None
    try:
        parsed_args = parse_args(argv)

        setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

        config_values = {
            "base_path": parsed_args.base_path,
            "search": parsed_args.search,
            "output_json": parsed_args.json,
            "verbose": parsed_args.verbose,
            "debug": parsed_args.debug,
            "refresh": parsed_args.refresh,
            "sequential": parsed_args.sequential,
            "workers": parsed_args.workers,
        }
        if parsed_args.config:
            config_values["config_path"] = parsed_args.config
        config = Config.from_dict(config_values)

        if config.debug:
            err_console.print("[yellow]Debug mode enabled[/yellow]")

            from git_project_finder.utils.threading import get_threading_info
            threading_info = get_threading_info()
            err_console.print("[yellow]Threading Information:[/yellow]")
            err_console.print(f"  Python version: {threading_info['python_version']}", markup=False)
            err_console.print(f"  Threading mode: {threading_info['mode']}", markup=False)
            err_console.print(f"  Optimal workers: {threading_info['optimal_workers']}", markup=False)

            err_console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                # Paths may contain "[...]", which rich would read as markup
                err_console.print(f"  {key}: {value}", markup=False, highlight=False, soft_wrap=True)

        finder = ProjectFinder(config)
        result = finder.find()

        entries = result.entries
        if config.search:
            entries = finder.search(config.search, entries)

        display = DisplayService(config.base_path, console=console, err_console=err_console)
        if config.output_json:
            display.display_json(entries)
        else:
            display.display_projects(entries, config.config_path)
        display.display_diagnostics(result.diagnostics)

        return 0
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        if parsed_args is not None and parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
