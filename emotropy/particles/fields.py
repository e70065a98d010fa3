"""
User-placed attractors/repellers and same-behavior repulsion.

Both passes only accumulate forces; they must run before any particle
integrates in the same frame.
"""

import logging
import math
from collections import deque
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

FIELD_CAPACITY = 3
FIELD_LIFETIME = 600
FIELD_RADIUS = 160.0
FIELD_STRENGTH = 0.22

REPULSION_BEHAVIOR = "anger"
REPULSION_RADIUS = 60.0
REPULSION_STRENGTH = 0.4
REPULSION_SAMPLE_CAP = 80
MIN_REPULSION_DIST_SQ = 0.01


class FieldKind(str, Enum):
    ATTRACT = "attract"
    REPEL = "repel"


@dataclass
class ForceFieldPoint:
    x: float
    y: float
    kind: FieldKind
    radius: float = FIELD_RADIUS
    strength: float = FIELD_STRENGTH
    age: int = 0

    def force_on(self, particle):
        """Returns the force this point exerts on ``particle``, or None when out of range."""
        dx = self.x - particle.x
        dy = self.y - particle.y
        dist = math.sqrt(dx * dx + dy * dy) or 1.0
        if dist >= self.radius:
            return None
        force = self.strength * (1 - dist / self.radius)
        if self.kind is FieldKind.REPEL:
            force = -force
        return (dx / dist) * force, (dy / dist) * force


class ForceFieldManager:
    """Owns the active field points and applies global forces to a population."""

    def __init__(
        self,
        capacity: int = FIELD_CAPACITY,
        lifetime: int = FIELD_LIFETIME,
        radius: float = FIELD_RADIUS,
        strength: float = FIELD_STRENGTH,
        repulsion_behavior: str = REPULSION_BEHAVIOR,
        repulsion_radius: float = REPULSION_RADIUS,
        repulsion_strength: float = REPULSION_STRENGTH,
        repulsion_sample_cap: int = REPULSION_SAMPLE_CAP,
    ):
        self.capacity = capacity
        self.lifetime = lifetime
        self.radius = radius
        self.strength = strength
        self.repulsion_behavior = repulsion_behavior
        self.repulsion_radius = repulsion_radius
        self.repulsion_strength = repulsion_strength
        self.repulsion_sample_cap = repulsion_sample_cap
        self._points = deque()

    @property
    def points(self):
        return tuple(self._points)

    def __len__(self):
        return len(self._points)

    def place(self, x: float, y: float, kind) -> ForceFieldPoint:
        """Adds a field point, evicting the oldest one when at capacity."""
        point = ForceFieldPoint(
            x=float(x), y=float(y), kind=FieldKind(kind),
            radius=self.radius, strength=self.strength,
        )
        while len(self._points) >= self.capacity:
            evicted = self._points.popleft()
            logger.debug("Field capacity reached; evicted %s point at (%.0f, %.0f).", evicted.kind.value, evicted.x, evicted.y)
        self._points.append(point)
        logger.debug("Placed %s point at (%.0f, %.0f).", point.kind.value, point.x, point.y)
        return point

    def clear(self):
        self._points.clear()

    def tick(self, particles):
        """Applies every point's force to the particles in range, then ages and expires points."""
        for point in self._points:
            for particle in particles:
                force = point.force_on(particle)
                if force is not None:
                    particle.apply_force(*force)
            point.age += 1

        expired = [p for p in self._points if p.age >= self.lifetime]
        if expired:
            self._points = deque(p for p in self._points if p.age < self.lifetime)
            logger.debug("%d field point(s) expired.", len(expired))

    def apply_repulsion(self, particles):
        """
        Pushes same-behavior particles apart.

        Only the first ``repulsion_sample_cap`` matching particles take part,
        which bounds the pairwise pass for large cohorts.
        """
        sample = [p for p in particles if p.behavior == self.repulsion_behavior][:self.repulsion_sample_cap]
        limit_sq = self.repulsion_radius * self.repulsion_radius
        for i, a in enumerate(sample):
            for b in sample[i + 1:]:
                dx = b.x - a.x
                dy = b.y - a.y
                dist_sq = dx * dx + dy * dy
                if MIN_REPULSION_DIST_SQ < dist_sq < limit_sq:
                    f = self.repulsion_strength / math.sqrt(dist_sq)
                    a.apply_force(-dx * f, -dy * f)
                    b.apply_force(dx * f, dy * f)
