import click
import pygame
from rich.console import Console

from emotropy.app import EmotropyApp
from emotropy.config import load_settings
from emotropy.exceptions import EmotropyError
from emotropy.render.surface import PygameSurface


@click.command()
@click.argument("texts", nargs=-1)
@click.option("--frames", type=int, default=None, help="Stop after this many frames.")
@click.option("--headless", is_flag=True, help="Render offscreen instead of opening a window.")
@click.option("--snapshot", type=click.Path(dir_okay=False), default=None, help="Save the last frame as an image.")
@click.option("--seed", type=int, default=None, help="Seed the simulation's random source.")
@click.option("--settings", "settings_path", type=click.Path(dir_okay=False), default=None, help="YAML settings file.")
def run(texts, frames, headless, snapshot, seed, settings_path):
    """
    Play each of TEXTS as a particle field, one after another.

    Left click places an attractor, right click a repeller. Each passage
    starts once the previous one has faded out.
    """
    console = Console()
    try:
        settings = load_settings(settings_path)
    except EmotropyError as e:
        raise click.ClickException(str(e)) from e
    if seed is not None:
        settings = settings.model_copy(update={"seed": seed})
    if headless and frames is None and not texts:
        raise click.UsageError("--headless needs --frames or at least one text to play.")

    pygame.init()
    try:
        size = (settings.width, settings.height)
        if headless:
            target = pygame.Surface(size)
        else:
            target = pygame.display.set_mode(size, pygame.RESIZABLE)
            pygame.display.set_caption("Emotropy")
        target.fill((0, 0, 0))

        surface = PygameSurface(target)
        app = EmotropyApp(surface, settings)
        app.boot()
        for text in texts:
            app.queue_text(text)

        played = app.run(frames=frames, display=not headless, until_done=headless)
        if app.last_result is not None:
            console.print(f"Last feeling: [bold]{app.last_result.label}[/bold] ({played} frames)")
        if snapshot:
            surface.save(snapshot)
            console.print(f"Saved snapshot to {snapshot}")
    finally:
        pygame.quit()
