"""Project-level exception hierarchy."""


class ReactoError(Exception):
    """Base for all reacto exceptions."""


class SessionParametersError(ReactoError, ValueError):
    """Session parameters violate the caller contract."""


class SessionError(ReactoError):
    """Session lifecycle misuse."""


class PlaybackError(ReactoError):
    """Audio cue playback was rejected."""


class ConfigError(ReactoError):
    """Config file could not be read or written."""
