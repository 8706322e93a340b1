"""Project-wide exception types."""

class BenfordError(Exception):
    """Base exception for all benford_engine errors."""


class PreconditionError(BenfordError, ValueError):
    """Raised when the library is called with arguments that violate its contract."""


class InvalidBaseError(PreconditionError):
    """Raised when a numeric base is not an integer >= 3."""


class DistributionLengthError(PreconditionError):
    """Raised when an ideal PDF and a realized distribution are not aligned."""


class InsufficientDataError(BenfordError):
    """Raised when input data does not support the requested computation."""


class NoValidSamplesError(InsufficientDataError):
    """Raised when no samples remain after dropping zeros, NaNs and unparseable values."""


class ConfigError(BenfordError):
    """Raised when configuration is missing or malformed."""


class ConfigValidationError(ConfigError):
    """Raised when validation fails for supplied configuration."""
