from emotropy.emotions.tags import EmotionTag
from emotropy.emotions.contracts import BlendEntry, ClassificationResult
from emotropy.emotions.classifier import EmotionClassifier, classify
from emotropy.emotions.profiles import EmotionProfile, IDLE_PROFILE, PROFILES, resolve_profile

__all__ = [
    "EmotionTag",
    "BlendEntry",
    "ClassificationResult",
    "EmotionClassifier",
    "classify",
    "EmotionProfile",
    "IDLE_PROFILE",
    "PROFILES",
    "resolve_profile",
]
