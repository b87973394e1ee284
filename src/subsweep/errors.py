class SubsweepError(Exception):
    """Base class for every error raised by subsweep."""


class ResolverInitError(SubsweepError):
    """The DNS resolver client could not be built. Fatal to the whole scan."""


class LookupFailure(SubsweepError):
    """A single candidate produced no address. Absorbed by the engine."""

    def __init__(self, name, reason=None):
        self.name = name
        self.reason = reason
        message = f"{name} did not resolve"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class SerializationError(SubsweepError):
    """Scan results could not be rendered to the requested format."""


class WordlistError(SubsweepError):
    """A wordlist file or URL could not be read."""
