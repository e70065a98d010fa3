import os
import tempfile

# Runs when pytest loads conftest.py, before the emotropy modules are imported,
# so config.py and pygame pick these values up.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"
os.environ["EMOTROPY_LOG_DIR"] = tempfile.mkdtemp(prefix="emotropy-logs-")
os.environ.pop("EMOTROPY_SETTINGS", None)
