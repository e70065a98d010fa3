from emotropy.particles.behaviors import BEHAVIORS, behavior_forces, register_behavior
from emotropy.particles.particle import Particle
from emotropy.particles.fields import FieldKind, ForceFieldManager, ForceFieldPoint
from emotropy.particles.world import SimulationWorld

__all__ = [
    "BEHAVIORS",
    "behavior_forces",
    "register_behavior",
    "Particle",
    "FieldKind",
    "ForceFieldManager",
    "ForceFieldPoint",
    "SimulationWorld",
]
