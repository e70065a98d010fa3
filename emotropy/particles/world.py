import logging
import random

from emotropy.config import SimulationSettings
from emotropy.emotions.contracts import BlendEntry
from emotropy.emotions.profiles import IDLE_PROFILE, resolve_profile
from emotropy.particles.fields import ForceFieldManager
from emotropy.particles.particle import Particle

logger = logging.getLogger(__name__)

DEFAULT_BG_GLOW = 'rgba(100,100,150,0.02)'
NO_GLOW = None


def _tag_and_weight(entry):
    if isinstance(entry, BlendEntry):
        return entry.tag, entry.weight
    tag, weight = entry
    return tag, weight


class SimulationWorld:
    """
    The particle population and everything that acts on it.

    The world is the only owner of its particles and field points; outside
    callers submit blends and field placements, and drive ``tick``.
    """

    def __init__(self, width: float | None = None, height: float | None = None,
                 settings: SimulationSettings | None = None, rng: random.Random | None = None):
        self.settings = settings or SimulationSettings()
        self.width = width if width is not None else self.settings.width
        self.height = height if height is not None else self.settings.height
        self.rng = rng or random.Random(self.settings.seed)
        self.capacity = self.settings.max_particles

        self.particles: list[Particle] = []
        self.fields = ForceFieldManager(
            capacity=self.settings.field_capacity,
            lifetime=self.settings.field_lifetime,
            radius=self.settings.field_radius,
            strength=self.settings.field_strength,
            repulsion_behavior=self.settings.repulsion_behavior,
            repulsion_radius=self.settings.repulsion_radius,
            repulsion_strength=self.settings.repulsion_strength,
            repulsion_sample_cap=self.settings.repulsion_sample_cap,
        )
        self.bg_glow = DEFAULT_BG_GLOW
        self.bg_glow_secondary = NO_GLOW
        self.frame = 0

    @property
    def center(self):
        return self.width / 2, self.height / 2

    def resize(self, width: float, height: float):
        self.width = width
        self.height = height

    def _jittered(self, profile):
        # Batch-level jitter on top of the particle's own velocity/size jitter.
        return profile.model_copy(update={
            "speed": profile.speed * (0.7 + self.rng.random() * 0.6),
            "lifespan": max(1, round(profile.lifespan * (0.8 + self.rng.random() * 0.4))),
        })

    def _make_batch(self, profile, count: int, bodily: float):
        cx, cy = self.center
        spread = min(self.width, self.height) * self.settings.spawn_spread
        batch = []
        for _ in range(count):
            x = cx + (self.rng.random() - 0.5) * spread
            y = cy + (self.rng.random() - 0.5) * spread
            batch.append(Particle(x, y, self._jittered(profile), bodily=bodily, rng=self.rng))
        return batch

    def _admit(self, batch):
        overflow = len(self.particles) + len(batch) - self.capacity
        if overflow > 0:
            evicted = min(overflow, len(self.particles))
            del self.particles[:evicted]
            logger.debug("Population at capacity %d; evicted %d oldest particle(s).", self.capacity, evicted)
            if overflow > evicted:
                batch = batch[overflow - evicted:]
                logger.debug("Batch larger than capacity; kept its newest %d particle(s).", len(batch))
        self.particles.extend(batch)
        return len(batch)

    def spawn_blend(self, blend, total_count: int, bodily: float = 1.0) -> int:
        """
        Spawns ``total_count`` particles split across the blend by weight.

        Entries are ``BlendEntry`` models or plain ``(tag, weight)`` pairs; a
        tag with no profile spawns idle particles. Every entry gets at least
        one particle. When the population would go over capacity, the
        oldest-inserted particles are dropped first.
        """
        batch = []
        for entry in blend:
            tag, weight = _tag_and_weight(entry)
            count = max(1, round(total_count * weight))
            batch.extend(self._make_batch(resolve_profile(tag), count, bodily))
        spawned = self._admit(batch)
        logger.debug("Spawned %d particle(s) for %d blend entr(ies); population %d.", spawned, len(blend), len(self.particles))
        return spawned

    def spawn_idle(self) -> int:
        """Boot-time ambient particles."""
        return self._admit(self._make_batch(IDLE_PROFILE, IDLE_PROFILE.count, 1.0))

    def submit(self, result, count: int | None = None) -> int:
        """
        Shows a classification result: updates the background tints and
        spawns its blend. Results without signal spawn nothing.
        """
        if not result.has_signal:
            logger.info("Submission produced no signal; nothing spawned.")
            return 0

        self.bg_glow = resolve_profile(result.dominant).bg_glow
        secondary = result.secondary
        self.bg_glow_secondary = resolve_profile(secondary).bg_glow if secondary else NO_GLOW

        if count is None:
            count = self.settings.blend_spawn_count if len(result.blend) > 1 else self.settings.single_spawn_count
        logger.info("Submitting %s (confidence %.2f, bodily %.2f).", result.label, result.confidence, result.bodily)
        return self.spawn_blend(result.blend, count, result.bodily)

    def tick(self):
        self.fields.tick(self.particles)
        self.fields.apply_repulsion(self.particles)
        for particle in self.particles:
            particle.tick(self.width, self.height)
        self.particles = [p for p in self.particles if p.alive]
        self.frame += 1

    def is_idle(self) -> bool:
        return not self.particles

    def __len__(self):
        return len(self.particles)
