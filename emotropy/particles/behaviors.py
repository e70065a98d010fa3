"""
Per-emotion force models.

Each model is a plain function registered under a behavior id. It receives the
particle, the canvas center and the random source, and returns the force
vectors to apply this tick. Models only read the particle's own state; forces
between particles are applied by the force field manager before the particle
ticks.
"""

import math
from typing import Callable, Dict, List, Tuple

Force = Tuple[float, float]
BehaviorModel = Callable[..., List[Force]]

BEHAVIORS: Dict[str, BehaviorModel] = {}

FEAR_CYCLE_TICKS = 30
COURAGE_LIFT_TICKS = 80
STRESS_BURST_TICKS = 12
UNSETTLED_LURCH_TICKS = 25
DISCONNECTED_SINK_AFTER = 0.4


def register_behavior(behavior_id: str):
    """Decorator that adds a force model to the dispatch table."""
    def decorator(func: BehaviorModel) -> BehaviorModel:
        BEHAVIORS[behavior_id] = func
        return func
    return decorator


def behavior_forces(particle, cx: float, cy: float, rng) -> List[Force]:
    """Runs the particle's force model; unknown behaviors contribute nothing."""
    model = BEHAVIORS.get(particle.behavior)
    if model is None:
        return []
    return model(particle, cx, cy, rng)


def _outward(particle, cx, cy):
    """Unit vector from the canvas center to the particle."""
    dx = particle.x - cx
    dy = particle.y - cy
    dist = math.sqrt(dx * dx + dy * dy) or 1.0
    return dx / dist, dy / dist


def _jitter(rng, amplitude):
    return ((rng.random() - 0.5) * amplitude, (rng.random() - 0.5) * amplitude)


def _burst(rng, magnitude):
    angle = rng.random() * math.pi * 2
    return (math.cos(angle) * magnitude, math.sin(angle) * magnitude)


@register_behavior("joy")
def joy(particle, cx, cy, rng):
    ux, uy = _outward(particle, cx, cy)
    return [(ux * 0.08, uy * 0.06)]


@register_behavior("anger")
def anger(particle, cx, cy, rng):
    return [_jitter(rng, 1.2)]


@register_behavior("sadness")
def sadness(particle, cx, cy, rng):
    ux, uy = _outward(particle, cx, cy)
    return [(0.0, 0.12), (-ux * 0.04, -uy * 0.04)]


@register_behavior("anxiety")
def anxiety(particle, cx, cy, rng):
    return [
        _jitter(rng, 0.8),
        (math.sin(particle.age * 0.4) * 0.5, math.cos(particle.age * 0.3) * 0.5),
    ]


@register_behavior("fear")
def fear(particle, cx, cy, rng):
    forces = []
    if (particle.age // FEAR_CYCLE_TICKS) % 2 == 0:
        # freeze
        forces.append((-particle.vx * 0.25, -particle.vy * 0.25))
    else:
        # flight
        forces.append(_burst(rng, 0.9))
    forces.append(_jitter(rng, 0.3))
    return forces


@register_behavior("calm")
def calm(particle, cx, cy, rng):
    ux, uy = _outward(particle, cx, cy)
    return [(-ux * 0.008, -uy * 0.008)]


@register_behavior("curiosity")
def curiosity(particle, cx, cy, rng):
    ux, uy = _outward(particle, cx, cy)
    return [(uy * 0.18, -ux * 0.18), (-ux * 0.04, -uy * 0.04)]


@register_behavior("gratitude")
def gratitude(particle, cx, cy, rng):
    ux, uy = _outward(particle, cx, cy)
    return [(ux * 0.06, uy * 0.05), (0.0, -0.02)]


@register_behavior("shame")
def shame(particle, cx, cy, rng):
    ux, uy = _outward(particle, cx, cy)
    # Curl runs opposite to curiosity.
    return [(-ux * 0.14, -uy * 0.12), (-uy * 0.08, ux * 0.08)]


@register_behavior("courage")
def courage(particle, cx, cy, rng):
    lift = max(0.0, 1.0 - particle.age / COURAGE_LIFT_TICKS)
    ux, uy = _outward(particle, cx, cy)
    return [(0.0, -0.2 * lift), (ux * 0.04, uy * 0.03)]


@register_behavior("hopeful")
def hopeful(particle, cx, cy, rng):
    return [(0.0, -0.06), (math.sin(particle.age * 0.05) * 0.08, 0.0)]


@register_behavior("disconnected")
def disconnected(particle, cx, cy, rng):
    ux, uy = _outward(particle, cx, cy)
    forces = [(-ux * 0.015, -uy * 0.015)]
    if particle.age > particle.lifespan * DISCONNECTED_SINK_AFTER:
        forces.append((0.0, 0.02))
    return forces


@register_behavior("stress")
def stress(particle, cx, cy, rng):
    forces = []
    if particle.age % STRESS_BURST_TICKS == 0:
        forces.append(_burst(rng, 1.4))
    forces.append(_jitter(rng, 0.5))
    return forces


@register_behavior("powerless")
def powerless(particle, cx, cy, rng):
    ux, uy = _outward(particle, cx, cy)
    return [(0.0, 0.2), (-ux * 0.02, -uy * 0.02)]


@register_behavior("unsettled")
def unsettled(particle, cx, cy, rng):
    forces = [_jitter(rng, 0.35)]
    if particle.age % UNSETTLED_LURCH_TICKS == 0:
        forces.append(_jitter(rng, 1.2))
    return forces


@register_behavior("tender")
def tender(particle, cx, cy, rng):
    ux, uy = _outward(particle, cx, cy)
    return [(ux * 0.03, uy * 0.025), (uy * 0.05, -ux * 0.045)]
