"""Custom error types for guide generation."""

from enum import Enum


class ErrorKind(str, Enum):
    """Why a generation failed."""

    CONFIGURATION_MISSING = "configuration_missing"
    CONNECTIVITY_FAILURE = "connectivity_failure"
    PROVIDER_REJECTED = "provider_rejected"
    UNCLASSIFIED = "unclassified"


class GuideError(Exception):
    """Base error for guide pipeline operations."""

    kind: ErrorKind = ErrorKind.UNCLASSIFIED

    def __init__(self, message: str, kind: ErrorKind = None):
        super().__init__(message)
        if kind is not None:
            self.kind = kind


class ConfigurationError(GuideError):
    """A configuration environment variable has an unusable value."""

    kind = ErrorKind.CONFIGURATION_MISSING

    def __init__(self, message: str, env_var: str = None):
        super().__init__(message)
        self.env_var = env_var


class ProviderError(GuideError):
    """Error raised by a provider backend."""

    def __init__(self, message: str, provider: str = None, kind: ErrorKind = None):
        super().__init__(message, kind)
        self.provider = provider


class ProviderConfigurationError(ProviderError):
    """Credential or backend configuration is missing."""

    kind = ErrorKind.CONFIGURATION_MISSING

    def __init__(self, message: str, provider: str = None, env_var: str = None):
        super().__init__(message, provider)
        self.env_var = env_var


class ProviderConnectionError(ProviderError):
    """Provider could not be reached (network, transport, timeout)."""

    kind = ErrorKind.CONNECTIVITY_FAILURE


class ProviderRejectedError(ProviderError):
    """Provider answered with an error or an unusable response."""

    kind = ErrorKind.PROVIDER_REJECTED


class GenerationError(GuideError):
    """User-facing failure of a guide generation request."""
