"""
SkillGlobe Command Line Interface

Provides CLI commands for matching a user's profiles against job
opportunities stored as JSON files.
"""

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

app = typer.Typer(
    name="skillglobe",
    help="SkillGlobe profile-to-opportunity matching CLI",
    add_completion=False,
)
console = Console()

LEVEL_COLORS = {
    "excellent": "green",
    "good": "blue",
    "moderate": "yellow",
    "low": "red",
}


@app.callback()
def main():
    """Initialize logging before any command runs."""
    from skillglobe.utils.logger import setup_logging

    setup_logging()


def _load_inputs(opportunities_file: Path, profiles_file: Path):
    """Load opportunities and profiles, exiting with code 1 on bad input."""
    from skillglobe.data.loaders import load_opportunities, load_profiles

    try:
        opportunities = load_opportunities(opportunities_file)
        profiles = load_profiles(profiles_file)
    except FileNotFoundError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    except (ValidationError, ValueError) as e:
        console.print(f"[red]Error: Invalid input data: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    return opportunities, profiles


@app.command()
def version():
    """Show application version."""
    from skillglobe import __version__, __app_name__

    console.print(f"[bold blue]{__app_name__}[/bold blue] version [green]{__version__}[/green]")


@app.command()
def info():
    """Show the active configuration."""
    from skillglobe.utils.config import get_settings

    settings = get_settings()

    table = Table(title="SkillGlobe Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Environment", settings.environment)
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Skill Weights", str(settings.matching.use_skill_weights))
    table.add_row("Strict Durations", str(settings.matching.strict_duration_parsing))
    table.add_row("Weight Tolerance", str(settings.matching.weight_sum_tolerance))
    table.add_row("Audit Matches", str(settings.matching.audit_matches))
    table.add_row("Log Level", settings.logging.level)

    console.print(table)


@app.command()
def match(
    opportunities_file: Path = typer.Argument(..., help="JSON file with one or more opportunities"),
    profiles_file: Path = typer.Argument(..., help="JSON file with the user's profiles"),
    opportunity_id: Optional[str] = typer.Option(None, "--opportunity", "-o", help="Opportunity ID (default: first in file)"),
    top_n: int = typer.Option(10, "--top", "-n", help="Number of profiles to show"),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON"),
):
    """Find the best profile for an opportunity."""
    from skillglobe.core.matching import EmptyCandidateSetError, MalformedDurationError, get_matching_engine

    opportunities, profiles = _load_inputs(opportunities_file, profiles_file)

    if opportunity_id:
        selected = [o for o in opportunities if o.id == opportunity_id]
        if not selected:
            console.print(f"[red]Error: Opportunity not found: {opportunity_id}[/red]")
            raise typer.Exit(1)
        opportunity = selected[0]
    elif opportunities:
        opportunity = opportunities[0]
    else:
        console.print("[red]Error: No opportunities found in file.[/red]")
        raise typer.Exit(1)

    engine = get_matching_engine()
    try:
        result = engine.find_best_profile_match(opportunity, profiles)
    except (EmptyCandidateSetError, MalformedDurationError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if as_json:
        console.print_json(result.model_dump_json(by_alias=True))
        return

    console.print(f"  Opportunity: [cyan]{opportunity.title}[/cyan] at {opportunity.company}")

    table = Table(title=f"Profile Matches for {opportunity.title}")
    table.add_column("Rank", style="dim", width=4)
    table.add_column("Profile", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Level", justify="center")
    table.add_column("Skills", justify="right")
    table.add_column("Experience", justify="right")
    table.add_column("Time to Qualify", justify="center")

    for i, profile_match in enumerate(result.profile_matches[:top_n], 1):
        level = profile_match.score_level.value
        level_color = LEVEL_COLORS[level]
        table.add_row(
            str(i),
            profile_match.profile_name,
            str(profile_match.match_score),
            f"[{level_color}]{level.upper()}[/{level_color}]",
            f"{profile_match.skill_match.skill_match_percentage}%",
            f"{profile_match.experience_match.years_experience_match}%",
            str(profile_match.gap_analysis.time_to_qualify),
        )

    console.print(table)

    reasoning = result.reasoning
    console.print(f"\n[bold]Best Profile:[/bold] {result.best_matching_profile.name}")
    console.print(f"  {reasoning.overall_assessment}")
    if reasoning.why_good_match:
        console.print("  [green]Why it fits:[/green]")
        for s in reasoning.why_good_match:
            console.print(f"    • {s}")
    if reasoning.potential_concerns:
        console.print("  [yellow]Concerns:[/yellow]")
        for c in reasoning.potential_concerns:
            console.print(f"    • {c}")
    if reasoning.improvement_areas:
        console.print("  [blue]To improve:[/blue]")
        for a in reasoning.improvement_areas:
            console.print(f"    • {a}")

    gaps = result.best_match.gap_analysis
    if gaps.has_gaps:
        console.print(f"  [magenta]Gaps[/magenta] (time to qualify: {gaps.time_to_qualify}):")
        for gap in [*gaps.skill_gaps, *gaps.experience_gaps, *gaps.certification_gaps]:
            console.print(f"    • {escape(gap)}")


@app.command()
def rank(
    opportunities_file: Path = typer.Argument(..., help="JSON file with opportunities"),
    profiles_file: Path = typer.Argument(..., help="JSON file with the user's profiles"),
    min_score: float = typer.Option(0.0, "--min-score", "-s", help="Minimum best-match score"),
    top_n: int = typer.Option(20, "--top", "-n", help="Number of opportunities to show"),
):
    """Rank opportunities by how well the user's best profile fits."""
    from skillglobe.core.matching import MalformedDurationError, get_matching_engine

    opportunities, profiles = _load_inputs(opportunities_file, profiles_file)

    engine = get_matching_engine()
    try:
        rows = engine.rank_opportunities(opportunities, profiles, min_score=min_score)
    except MalformedDurationError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if not rows:
        console.print("[yellow]No opportunities matched the threshold.[/yellow]")
        raise typer.Exit(0)

    table = Table(title=f"Top {min(len(rows), top_n)} Opportunities")
    table.add_column("Rank", style="dim", width=4)
    table.add_column("Opportunity", style="cyan")
    table.add_column("Company")
    table.add_column("Score", justify="right")
    table.add_column("Best Profile")

    for i, row in enumerate(rows[:top_n], 1):
        best_profile = (
            row.result.best_matching_profile.name if row.result else f"[dim]{row.error}[/dim]"
        )
        table.add_row(
            str(i),
            row.opportunity.title,
            row.opportunity.company,
            str(row.best_match_score),
            best_profile,
        )

    console.print(table)


if __name__ == "__main__":
    app()
