from enum import Enum


class ErrorKind(str, Enum):
    fatal = "fatal"
    unavailable = "unavailable"
    transient = "transient"


class ConfigurationError(RuntimeError):
    """A required setting (API key, database URL) is missing or invalid."""


class ProviderError(RuntimeError):
    """Failure reported by an LLM provider, tagged with how the retry policy should treat it."""

    def __init__(self, message: str, *, kind: ErrorKind, status_code: int | None = None):
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code


class ResponseValidationError(ValueError):
    """The provider answered, but the payload could not be decoded or had the wrong shape."""


class ContentGenerationError(RuntimeError):
    def __init__(self, kind: str, reason: str):
        super().__init__(f"Failed to generate {kind}: {reason}")
        self.kind = kind
        self.reason = reason
