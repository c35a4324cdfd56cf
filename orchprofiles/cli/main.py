"""Main CLI interface using Typer."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from ..api import OrchestratorProfileService
from ..catalog import load_catalog
from ..exporters import convert_profile_list_to_vlabs, get_exporter
from ..model.errors import OrchestratorError
from ..model.export import OutputFormat
from ..model.orchestrator import OrchestratorProfile, OrchestratorVersionProfile
from ..utils.logger import get_logger

# Create CLI app
app = typer.Typer(
    name="orchprofiles",
    help="Look up supported orchestrator versions and their upgrade paths",
    add_completion=True,
)

console = Console()
logger = get_logger(__name__)


def _print_profiles_table(profiles: List[OrchestratorVersionProfile], title: str) -> None:
    """Print version profiles in a formatted table."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Orchestrator", style="cyan", no_wrap=True)
    table.add_column("Version", style="green")
    table.add_column("Default", justify="center")
    table.add_column("Upgrades", style="white")

    for profile in profiles:
        upgrades = ", ".join(profile.upgrade_versions) or "[dim]none[/dim]"
        table.add_row(
            profile.orchestrator_type.value,
            profile.orchestrator_version,
            "[bold green]✓[/bold green]" if profile.default else "",
            upgrades,
        )

    console.print(table)


def _check_output_option(format: OutputFormat, output: Optional[Path]) -> None:
    """Reject an output file for the table format, which only prints to the console."""
    if output is not None and format == OutputFormat.TABLE:
        raise typer.BadParameter(
            "only applies to the json and yaml formats", param_hint="'--output'"
        )


def _output_profiles(
    profiles: List[OrchestratorVersionProfile],
    format: OutputFormat,
    output: Optional[Path],
    title: str,
) -> None:
    """Render profiles as a table or export them in the public schema."""
    if format == OutputFormat.TABLE:
        _print_profiles_table(profiles, title)
        return

    exporter = get_exporter(format, output)
    content = exporter.export(convert_profile_list_to_vlabs(profiles))
    if output:
        console.print(f"Exported [green]{len(profiles)}[/green] profile(s) to [cyan]{output}[/cyan]")
    else:
        typer.echo(content, nl=False)


@app.command()
def orchestrators(
    orchestrator: str = typer.Option(
        "", "--orchestrator", "-o", help="Orchestrator name (default: all orchestrators)"
    ),
    version: str = typer.Option(
        "", "--version", "-v", help="Orchestrator version (default: all versions)"
    ),
    windows: bool = typer.Option(
        False, "--windows/--no-windows", help="Only list versions that support Windows nodes"
    ),
    format: OutputFormat = typer.Option(
        OutputFormat.TABLE, "--format", "-f", help="Output format"
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        help="Write JSON or YAML output to this file (requires --format json or yaml)",
    ),
    catalog: Optional[Path] = typer.Option(
        None, "--catalog", help="Path to a YAML version catalog override"
    ),
):
    """List supported orchestrator versions and their upgrade targets."""
    _check_output_option(format, output)
    try:
        service = OrchestratorProfileService(load_catalog(catalog))
        profiles = service.get_profile_list(orchestrator, version, windows)
        _output_profiles(profiles, format, output, "Orchestrator Versions")

    except OrchestratorError as e:
        console.print(f"[red]Error:[/red] {str(e)}")
        raise typer.Exit(1)


@app.command()
def upgrades(
    orchestrator: str = typer.Argument(..., help="Orchestrator name (Kubernetes or DCOS)"),
    version: str = typer.Argument(..., help="Current orchestrator version (e.g., 1.14.7)"),
    windows: bool = typer.Option(
        False, "--windows/--no-windows", help="Cluster has Windows nodes"
    ),
    format: OutputFormat = typer.Option(
        OutputFormat.TABLE, "--format", "-f", help="Output format"
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        help="Write JSON or YAML output to this file (requires --format json or yaml)",
    ),
    catalog: Optional[Path] = typer.Option(
        None, "--catalog", help="Path to a YAML version catalog override"
    ),
):
    """Show the upgrade targets for a cluster's current orchestrator version."""
    _check_output_option(format, output)
    try:
        service = OrchestratorProfileService(load_catalog(catalog))
        family = service.resolver.validate(orchestrator, version)
        if family is None:
            raise typer.BadParameter("Orchestrator is required", param_hint="ORCHESTRATOR")

        profile = service.get_exact_profile(
            OrchestratorProfile(orchestrator_type=family, orchestrator_version=version), windows
        )
        _output_profiles([profile], format, output, f"{family.value} {version} Upgrades")

        if format == OutputFormat.TABLE and not profile.upgrades:
            console.print("[yellow]No upgrades available for this version[/yellow]")

    except OrchestratorError as e:
        console.print(f"[red]Error:[/red] {str(e)}")
        raise typer.Exit(1)


@app.command()
def version():
    """Show version information."""
    console.print("[bold]orchprofiles[/bold] version 0.1.0")
    console.print("Orchestrator version catalog and upgrade path resolver")


if __name__ == "__main__":
    app()
