class EmotropyError(Exception):
    """Base class for errors raised by Emotropy outside the simulation core."""
    pass


class SettingsError(EmotropyError):
    """Raised when a settings file is missing, malformed or fails validation."""
    pass
