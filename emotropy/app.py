"""
Frame-driven host for the simulation.

One ``step`` is one animation frame: admit a queued passage if the gate is
open, tick the world, render it. Text submissions are gated so that a new
passage only plays once the previous one has completely faded out.
"""

import logging
from collections import deque

import pygame

from emotropy.config import SimulationSettings
from emotropy.emotions.classifier import classify
from emotropy.particles.fields import FieldKind
from emotropy.particles.world import SimulationWorld
from emotropy.render.renderer import FrameRenderer

logger = logging.getLogger(__name__)

LEFT_BUTTON = 1
RIGHT_BUTTON = 3


class SubmissionGate:
    """Admits a new submission only while the previous one is not still playing."""

    def __init__(self):
        self.locked = False

    def submit(self, world, result, count=None) -> bool:
        """Passes ``result`` to the world; returns True if particles were spawned."""
        if self.locked:
            logger.info("Submission ignored; waiting for the current feeling to fade.")
            return False
        spawned = world.submit(result, count)
        if spawned:
            self.locked = True
        return spawned > 0

    def poll(self, world) -> bool:
        """Unlocks once the world is idle. Returns True when open."""
        if self.locked and world.is_idle():
            self.locked = False
            logger.info("World is idle; ready for the next submission.")
        return not self.locked


class EmotropyApp:

    def __init__(self, surface, settings: SimulationSettings | None = None, rng=None, classifier=classify):
        self.settings = settings or SimulationSettings()
        self.surface = surface
        self.world = SimulationWorld(surface.width, surface.height, self.settings, rng)
        self.renderer = FrameRenderer(cache_size=self.settings.color_cache_size)
        self.gate = SubmissionGate()
        self.classifier = classifier
        self.pending = deque()
        self.last_result = None
        self.running = False

    def boot(self):
        self.world.spawn_idle()

    def queue_text(self, text: str):
        self.pending.append(text)

    def submit_text(self, text: str):
        """Classifies and submits ``text``; returns the result, or None while the gate is locked."""
        if self.gate.locked:
            return None
        result = self.classifier(text)
        self.last_result = result
        self.gate.submit(self.world, result)
        if not result.has_signal:
            logger.info("Could not read a feeling from the text; please describe it more deeply.")
        return result

    def handle_click(self, x, y, button):
        if button == LEFT_BUTTON:
            self.world.fields.place(x, y, FieldKind.ATTRACT)
        elif button == RIGHT_BUTTON:
            self.world.fields.place(x, y, FieldKind.REPEL)

    def step(self):
        if self.gate.poll(self.world) and self.pending:
            self.submit_text(self.pending.popleft())
        self.world.tick()
        self.renderer.render(self.world, self.surface)

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self.handle_click(event.pos[0], event.pos[1], event.button)
        elif event.type == pygame.VIDEORESIZE:
            self.world.resize(event.w, event.h)

    def finished(self) -> bool:
        return not self.pending and not self.gate.locked and self.last_result is not None

    def run(self, frames=None, display=True, until_done=False):
        """
        Runs the frame loop.

        Stops after ``frames`` frames, when the window is closed, or (with
        ``until_done``) once every queued passage has played out.
        """
        clock = pygame.time.Clock()
        self.running = True
        frame = 0
        while self.running:
            if display:
                for event in pygame.event.get():
                    self.handle_event(event)
            self.step()
            if display:
                pygame.display.flip()
                clock.tick(self.settings.fps)
            frame += 1
            if frames is not None and frame >= frames:
                break
            if until_done and self.finished():
                break
        self.running = False
        logger.info("Stopped after %d frame(s).", frame)
        return frame
