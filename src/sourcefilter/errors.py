"""Exception hierarchy for the source-filter model."""
from __future__ import annotations


class SourceFilterError(Exception):
    """Base class for every error raised by sourcefilter."""


class InvalidParameter(SourceFilterError, ValueError):
    """A non-positive or otherwise meaningless physical/sampling parameter."""


class EmptyInput(SourceFilterError, ValueError):
    """Fourier synthesis was asked to sum zero waves."""


class ConfigError(SourceFilterError, ValueError):
    """Malformed YAML configuration."""
