from enum import Enum


class EmotionTag(str, Enum):
    """
    The closed set of emotion tags known to the simulation.

    The first fifteen members are the tags the classifier can emit. CURIOSITY
    only exists as a visual profile and behavior, and IDLE is the ambient
    state shown before anything has been submitted.
    """
    JOY = "joy"
    CALM = "calm"
    ANGER = "anger"
    FEAR = "fear"
    ANXIETY = "anxiety"
    SADNESS = "sadness"
    SHAME = "shame"
    GRATITUDE = "gratitude"
    COURAGE = "courage"
    HOPEFUL = "hopeful"
    DISCONNECTED = "disconnected"
    STRESS = "stress"
    POWERLESS = "powerless"
    UNSETTLED = "unsettled"
    TENDER = "tender"
    CURIOSITY = "curiosity"
    IDLE = "idle"

    @classmethod
    def parse(cls, value):
        """Returns the matching tag for ``value``, or None if it is not one of ours."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None

    @property
    def label(self) -> str:
        if self is EmotionTag.IDLE:
            return "Waiting…"
        return self.value.capitalize()
