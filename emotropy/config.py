import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from emotropy.exceptions import SettingsError

load_dotenv()

ENV = os.getenv("EMOTROPY_ENV", "development")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("EMOTROPY_LOG_DIR", "logs")

DEFAULT_SETTINGS_PATH = Path(__file__).resolve().parent / "settings.yaml"


class SimulationSettings(BaseModel):
    """Tunable parameters of the simulation and its host loop."""

    width: int = Field(1280, gt=0)
    height: int = Field(720, gt=0)
    fps: int = Field(60, gt=0)
    seed: Optional[int] = Field(None, description="Seed for the world's random source; None means unseeded.")

    max_particles: int = Field(700, gt=0)
    spawn_spread: float = Field(0.12, ge=0, description="Spawn jitter as a fraction of the smaller canvas side.")
    single_spawn_count: int = Field(120, gt=0)
    blend_spawn_count: int = Field(160, gt=0)

    field_capacity: int = Field(3, gt=0)
    field_lifetime: int = Field(600, gt=0)
    field_radius: float = Field(160.0, gt=0)
    field_strength: float = Field(0.22, ge=0)

    repulsion_behavior: str = "anger"
    repulsion_radius: float = Field(60.0, gt=0)
    repulsion_strength: float = Field(0.4, ge=0)
    repulsion_sample_cap: int = Field(80, ge=0)

    color_cache_size: int = Field(1000, gt=0)


def _settings_path(path=None) -> Optional[Path]:
    if path is not None:
        return Path(path)
    env_path = os.getenv("EMOTROPY_SETTINGS")
    if env_path:
        return Path(env_path)
    if DEFAULT_SETTINGS_PATH.exists():
        return DEFAULT_SETTINGS_PATH
    return None


def load_settings(path=None) -> SimulationSettings:
    """
    Loads simulation settings from YAML.

    The file is taken from ``path``, then the ``EMOTROPY_SETTINGS`` environment
    variable, then the packaged ``settings.yaml``. Missing keys fall back to
    their defaults.

    Raises:
        SettingsError: If the chosen file does not exist, is not a YAML
            mapping, or holds invalid values.
    """
    settings_path = _settings_path(path)
    if settings_path is None:
        return SimulationSettings()
    if not settings_path.exists():
        raise SettingsError(f"Settings file not found: {settings_path}")

    with open(settings_path, 'r') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise SettingsError(f"Settings file {settings_path} is not valid YAML: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SettingsError(f"Settings file {settings_path} is not a YAML mapping.")

    try:
        return SimulationSettings(**data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings in {settings_path}: {e}") from e
