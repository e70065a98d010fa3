from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

from emotropy.emotions.tags import EmotionTag


class BlendEntry(BaseModel):
    """
    One emotion present in a passage, with its share of the blend.

    Tags are validated against :class:`EmotionTag`. Callers holding tags from
    elsewhere can pass ``(tag, weight)`` pairs to ``SimulationWorld.spawn_blend``
    instead; unknown tags there fall back to the idle profile.
    """
    model_config = ConfigDict(frozen=True)

    tag: EmotionTag
    weight: float = Field(..., ge=0.0, description="Relative weight inside the blend.")


class ClassificationResult(BaseModel):
    """
    The output of the classifier for one passage of text.

    ``blend`` is ordered by descending weight and always has at least one
    entry. A ``raw_score_total`` of zero means no keyword matched at all;
    callers should treat that as "no signal" rather than as an emotion.
    """
    model_config = ConfigDict(frozen=True)

    dominant: EmotionTag
    confidence: float = Field(..., ge=0.0, le=1.0, description="The dominant emotion's share of the total score.")
    blend: List[BlendEntry] = Field(..., min_length=1)
    bodily: float = Field(1.0, ge=0.8, le=2.2, description="Somatic intensity multiplier.")
    raw_score_total: float = Field(0.0, ge=0.0)
    scores: Dict[EmotionTag, float] = Field(default_factory=dict, description="Document-level raw score per emotion.")

    @property
    def has_signal(self) -> bool:
        return self.raw_score_total > 0

    @property
    def secondary(self) -> EmotionTag | None:
        if len(self.blend) < 2:
            return None
        return self.blend[1].tag

    @property
    def label(self) -> str:
        """The text shown in the emotion badge, e.g. ``"Joy + Gratitude"``."""
        if not self.has_signal:
            # Empty input keeps the idle badge; text that matched nothing is unclear.
            return self.dominant.label if self.confidence > 0 else "Unclear"
        if len(self.blend) >= 2:
            return f"{self.blend[0].tag.label} + {self.blend[1].tag.label}"
        return self.dominant.label
