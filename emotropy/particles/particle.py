import math
import random
from collections import deque

from emotropy.particles.behaviors import behavior_forces

TRAIL_ALPHA = 0.4
TRAIL_RADIUS = 0.6
MIN_TRAIL_RADIUS = 0.5
PULSE_AMPLITUDE = 0.15
PULSE_RATE = 0.2


class Particle:
    """
    A single simulated particle.

    Particles are created by the world from an (already jittered) emotion
    profile. Each tick they record their trail, run their behavior's force
    model, integrate, wrap at the canvas edges and age toward death.
    """

    def __init__(self, x: float, y: float, profile, bodily: float = 1.0, rng: random.Random | None = None):
        self.rng = rng or random.Random()

        self.x = x
        self.y = y

        angle = self.rng.random() * math.pi * 2
        self.vx = math.cos(angle) * profile.speed * (0.5 + self.rng.random() * 0.5)
        self.vy = math.sin(angle) * profile.speed * (0.5 + self.rng.random() * 0.5)

        self.ax = 0.0
        self.ay = 0.0

        self.color = profile.color
        self.glow_color = profile.glow_color or profile.color
        self.size = profile.size * (0.6 + self.rng.random() * 0.8)

        self.friction = profile.friction
        self.behavior = profile.behavior
        self.speed = profile.speed

        self.lifespan = profile.lifespan
        self.age = 0
        self.alive = True

        self.bodily = bodily
        self.trail = deque(maxlen=profile.trail)

    def apply_force(self, fx: float, fy: float):
        """Accumulates a force into this tick's acceleration."""
        if not self.alive:
            return
        self.ax += fx
        self.ay += fy

    def tick(self, bounds_w: float, bounds_h: float):
        if not self.alive:
            return

        if self.trail.maxlen:
            self.trail.append((self.x, self.y))

        for fx, fy in behavior_forces(self, bounds_w / 2, bounds_h / 2, self.rng):
            self.apply_force(fx, fy)

        self.vx += self.ax
        self.vy += self.ay
        self.vx *= self.friction
        self.vy *= self.friction
        self.x += self.vx
        self.y += self.vy
        self.ax = 0.0
        self.ay = 0.0

        # Re-enter from the opposite edge.
        if self.x < -self.size:
            self.x = bounds_w + self.size
        elif self.x > bounds_w + self.size:
            self.x = -self.size
        if self.y < -self.size:
            self.y = bounds_h + self.size
        elif self.y > bounds_h + self.size:
            self.y = -self.size

        self.age += 1
        if self.age >= self.lifespan:
            self.alive = False

    @property
    def life_fraction(self) -> float:
        return max(0.0, 1.0 - self.age / self.lifespan)

    @property
    def radius(self) -> float:
        pulse = 1 + PULSE_AMPLITUDE * self.bodily * math.sin(self.age * PULSE_RATE)
        return self.size * pulse

    def render(self, surface, colors):
        """
        Draws the trail and the glowing core onto ``surface``.

        The caller selects the compositing mode; ``colors`` is the renderer's
        color cache. Nothing about the particle's simulation state changes.
        """
        alpha = self.life_fraction
        radius = self.radius

        if len(self.trail) > 1:
            count = len(self.trail)
            for i, (tx, ty) in enumerate(self.trail):
                if i == count - 1:
                    break
                t = i / count
                surface.fill_circle(
                    tx, ty,
                    max(MIN_TRAIL_RADIUS, radius * t * TRAIL_RADIUS),
                    colors.rgba(self.color, t * alpha * TRAIL_ALPHA),
                )

        surface.fill_radial_gradient(
            self.x, self.y, radius,
            [
                (0.0, colors.rgba(self.color, alpha)),
                (0.6, colors.rgba(self.color, alpha * 0.8)),
                (1.0, colors.rgba(self.color, 0.0)),
            ],
        )

    def __repr__(self):
        return f"<Particle {self.behavior} at ({self.x:.1f}, {self.y:.1f}) age {self.age}/{self.lifespan}>"
