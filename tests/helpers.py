import random

from emotropy.emotions.profiles import EmotionProfile
from emotropy.particles.particle import Particle


def make_profile(**overrides):
    """A still, long-lived profile whose behavior has no force model."""
    values = dict(
        color='#FF0000', glow_color='#FF0000', size=2, speed=0, friction=1.0,
        behavior='inert', lifespan=100, count=1, trail=0, bg_glow='rgba(0,0,0,0)',
    )
    values.update(overrides)
    return EmotionProfile(**values)


def make_particle(x=0.0, y=0.0, seed=0, bodily=1.0, **overrides):
    return Particle(x, y, make_profile(**overrides), bodily=bodily, rng=random.Random(seed))
