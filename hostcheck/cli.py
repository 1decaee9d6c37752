"""
Hostcheck CLI - Run host state checks from the command line.
"""

import logging
from typing import List

import typer
from rich.console import Console
from rich.table import Table

from .checks import CHECKS, check_parameters, get_check
from .errors import ConfigurationError, EnvironmentUnavailableError
from .settings import get_settings

# Exit status when a check cannot be evaluated at all
EXIT_UNAVAILABLE = 2

# Setup
app = typer.Typer(
    name="hostcheck",
    help="Assert the state of packages, repositories and systemd units on this host",
    add_completion=False,
)
console = Console()


def configure_logging():
    """Configure logging based on settings."""
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


# Configure logging on module import
configure_logging()


@app.command(name="list")
def list_checks():
    """List the available checks and the arguments they take."""
    table = Table(title="Hostcheck Checks")
    table.add_column("Check", style="cyan")
    table.add_column("Arguments")
    table.add_column("Description", style="dim")

    for name, factory in CHECKS.items():
        doc = (factory.__doc__ or "").strip().splitlines()
        table.add_row(name, " ".join(check_parameters(name)), doc[0] if doc else "")

    console.print(table)


@app.command()
def run(
    name: str = typer.Argument(..., help="Check name (see 'hostcheck list')"),
    args: List[str] = typer.Argument(None, help="Target value(s) for the check"),
):
    """Run one check and exit with its exit code."""
    try:
        check = get_check(name, *(args or []))
        exit_code, message = check()
    except ConfigurationError as e:
        console.print(f"[bold red]✗ Invalid check:[/bold red] {e}")
        raise typer.Exit(code=EXIT_UNAVAILABLE)
    except EnvironmentUnavailableError as e:
        console.print(f"[bold red]✗ Environment unavailable:[/bold red] {e}")
        raise typer.Exit(code=EXIT_UNAVAILABLE)

    if exit_code == 0:
        console.print(f"[bold green]✓ {name} passed[/bold green]")
    else:
        console.print(f"[bold red]✗ {name} failed[/bold red]")
        console.print(message, markup=False, highlight=False)
    raise typer.Exit(code=exit_code)


@app.command()
def version():
    """Show Hostcheck version."""
    from . import __version__

    console.print(f"Hostcheck version: [bold]{__version__}[/bold]")


if __name__ == "__main__":
    app()
