import click
from rich.console import Console
from rich.table import Table

from emotropy.emotions.profiles import PROFILES


@click.command()
def profiles():
    """
    Show the physics profile of every emotion.
    """
    console = Console()
    table = Table(title="Emotion Profiles")
    table.add_column("Emotion", style="cyan")
    table.add_column("Behavior")
    table.add_column("Color")
    table.add_column("Speed", justify="right")
    table.add_column("Friction", justify="right")
    table.add_column("Lifespan", justify="right")
    table.add_column("Count", justify="right")

    for profile in PROFILES.values():
        table.add_row(
            profile.label,
            profile.behavior,
            f"[{profile.color}]{profile.color}[/]",
            str(profile.speed),
            str(profile.friction),
            str(profile.lifespan),
            str(profile.count),
        )

    console.print(table)
