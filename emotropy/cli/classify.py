import click
from rich.console import Console
from rich.table import Table

from emotropy.emotions.classifier import classify as classify_text


@click.command()
@click.argument("text", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, help="Print the raw classification result as JSON.")
def classify(text, as_json):
    """
    Classify TEXT into an emotion blend.
    """
    console = Console()
    result = classify_text(" ".join(text))

    if as_json:
        console.print_json(result.model_dump_json())
        return

    if not result.has_signal:
        console.print(f"[bold]{result.label}[/bold] - no emotion words found. Could you describe that feeling more deeply?")
        return

    table = Table(title=f"{result.label} (confidence {result.confidence:.0%})")
    table.add_column("Emotion", style="cyan")
    table.add_column("Weight", style="magenta", justify="right")
    table.add_column("Raw score", justify="right")

    for entry in result.blend:
        table.add_row(entry.tag.label, f"{entry.weight:.3f}", f"{result.scores.get(entry.tag, 0.0):.2f}")

    console.print(table)
    console.print(f"Bodily intensity: {result.bodily:.2f}   Raw total: {result.raw_score_total:.2f}")
