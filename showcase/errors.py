"""Exception types shared across Showcase subsystems."""


class ShowcaseError(Exception):
    """Base class for all Showcase errors."""


class ConfigError(ShowcaseError):
    """Raised when the configuration file is missing or invalid.

    Configuration errors are fatal: nothing downstream runs without a
    valid config, so callers should let these propagate.
    """


class RemoteError(ShowcaseError):
    """Wraps a failed remote listing or raw fetch with context."""

    def __init__(self, operation: str, target: str, cause: Exception | None = None) -> None:
        self.operation = operation
        self.target = target
        message = f"{operation} failed for {target!r}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.__cause__ = cause
