"""Emotropy - turns free-form text into an emotion-driven particle simulation."""

from emotropy.emotions import (
    BlendEntry,
    ClassificationResult,
    EmotionProfile,
    EmotionTag,
    classify,
    resolve_profile,
)
from emotropy.particles import FieldKind, Particle, SimulationWorld

__version__ = "0.3.0"

__all__ = [
    "BlendEntry",
    "ClassificationResult",
    "EmotionProfile",
    "EmotionTag",
    "classify",
    "resolve_profile",
    "FieldKind",
    "Particle",
    "SimulationWorld",
]
