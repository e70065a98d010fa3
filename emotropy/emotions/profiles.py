"""
Physics and visual profile for every emotion tag.

Profiles are immutable and looked up by tag; an unknown tag resolves to the
idle profile so that a malformed or future blend entry degrades to ambient
particles instead of failing.
"""

from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field

from emotropy.emotions.tags import EmotionTag


class EmotionProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    color: str
    glow_color: str
    size: float = Field(..., gt=0, description="Base particle radius in pixels.")
    speed: float = Field(..., ge=0, description="Scalar applied to the initial velocity.")
    friction: float = Field(..., gt=0, le=1, description="Per-tick velocity multiplier.")
    behavior: str
    lifespan: int = Field(..., ge=1, description="Lifetime in ticks.")
    count: int = Field(..., ge=1, description="Default spawn count.")
    trail: int = Field(..., ge=0, description="Number of past positions kept for the trail.")
    bg_glow: str = Field(..., description="Background tint shown while this emotion dominates.")
    label: str = ""


def _profile(tag, **values):
    return EmotionProfile(behavior=tag.value, label=tag.label, **values)


IDLE_PROFILE = EmotionProfile(
    color='#AAAACC', glow_color='#8888AA', size=3, speed=1.2, friction=0.99,
    behavior=EmotionTag.JOY.value, lifespan=300, count=40, trail=5,
    bg_glow='rgba(100,100,150,0.02)', label=EmotionTag.IDLE.label,
)

PROFILES = MappingProxyType({
    # Expansive outward spirals, near-frictionless.
    EmotionTag.JOY: _profile(
        EmotionTag.JOY, color='#FFD700', glow_color='#FFA500', size=5, speed=4.5,
        friction=0.985, lifespan=280, count=110, trail=12, bg_glow='rgba(255,200,0,0.04)'),
    # Explosive burst with neighbour repulsion.
    EmotionTag.ANGER: _profile(
        EmotionTag.ANGER, color='#FF2200', glow_color='#FF6600', size=7, speed=9,
        friction=0.935, lifespan=160, count=140, trail=6, bg_glow='rgba(255,40,0,0.05)'),
    EmotionTag.SADNESS: _profile(
        EmotionTag.SADNESS, color='#4488FF', glow_color='#2255CC', size=4, speed=1.8,
        friction=0.97, lifespan=360, count=90, trail=14, bg_glow='rgba(40,80,200,0.04)'),
    EmotionTag.ANXIETY: _profile(
        EmotionTag.ANXIETY, color='#CC44FF', glow_color='#9900CC', size=4.5, speed=5.5,
        friction=0.96, lifespan=220, count=120, trail=9, bg_glow='rgba(150,0,220,0.05)'),
    # Low friction so the flight bursts burn out quickly.
    EmotionTag.FEAR: _profile(
        EmotionTag.FEAR, color='#445566', glow_color='#223355', size=4, speed=6.5,
        friction=0.91, lifespan=140, count=100, trail=5, bg_glow='rgba(20,30,60,0.06)'),
    EmotionTag.CALM: _profile(
        EmotionTag.CALM, color='#44DDAA', glow_color='#22BB88', size=3.5, speed=1.2,
        friction=0.993, lifespan=420, count=70, trail=16, bg_glow='rgba(40,200,150,0.03)'),
    EmotionTag.CURIOSITY: _profile(
        EmotionTag.CURIOSITY, color='#FF9933', glow_color='#FF6600', size=4.5, speed=3.5,
        friction=0.978, lifespan=300, count=100, trail=13, bg_glow='rgba(220,120,0,0.04)'),
    EmotionTag.GRATITUDE: _profile(
        EmotionTag.GRATITUDE, color='#FFEE88', glow_color='#DDCC44', size=4, speed=2.2,
        friction=0.988, lifespan=350, count=90, trail=15, bg_glow='rgba(220,200,50,0.03)'),
    EmotionTag.SHAME: _profile(
        EmotionTag.SHAME, color='#DD4477', glow_color='#AA2255', size=4, speed=2.8,
        friction=0.955, lifespan=190, count=80, trail=8, bg_glow='rgba(180,40,80,0.04)'),
    EmotionTag.COURAGE: _profile(
        EmotionTag.COURAGE, color='#00DDFF', glow_color='#0099CC', size=5.5, speed=6,
        friction=0.975, lifespan=260, count=100, trail=11, bg_glow='rgba(0,200,255,0.04)'),
    EmotionTag.HOPEFUL: _profile(
        EmotionTag.HOPEFUL, color='#88FFCC', glow_color='#44BBAA', size=4, speed=2.5,
        friction=0.986, lifespan=320, count=85, trail=13, bg_glow='rgba(80,220,170,0.03)'),
    EmotionTag.DISCONNECTED: _profile(
        EmotionTag.DISCONNECTED, color='#778899', glow_color='#445566', size=3.5, speed=1.5,
        friction=0.975, lifespan=280, count=65, trail=10, bg_glow='rgba(60,80,100,0.03)'),
    EmotionTag.STRESS: _profile(
        EmotionTag.STRESS, color='#FF8800', glow_color='#CC5500', size=5, speed=7,
        friction=0.945, lifespan=175, count=130, trail=7, bg_glow='rgba(200,100,0,0.05)'),
    EmotionTag.POWERLESS: _profile(
        EmotionTag.POWERLESS, color='#775544', glow_color='#442211', size=5, speed=1.5,
        friction=0.968, lifespan=300, count=75, trail=9, bg_glow='rgba(60,30,20,0.05)'),
    EmotionTag.UNSETTLED: _profile(
        EmotionTag.UNSETTLED, color='#BBCC33', glow_color='#889900', size=4, speed=3.2,
        friction=0.962, lifespan=200, count=90, trail=8, bg_glow='rgba(150,160,0,0.04)'),
    EmotionTag.TENDER: _profile(
        EmotionTag.TENDER, color='#FFAABB', glow_color='#DD6688', size=4, speed=2,
        friction=0.99, lifespan=380, count=80, trail=15, bg_glow='rgba(220,100,150,0.03)'),
    EmotionTag.IDLE: IDLE_PROFILE,
})


def resolve_profile(tag) -> EmotionProfile:
    """Returns the profile for ``tag`` (an EmotionTag or its string value)."""
    return PROFILES.get(EmotionTag.parse(tag), IDLE_PROFILE)
