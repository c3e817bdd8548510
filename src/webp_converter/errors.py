"""Exception hierarchy for WebP conversion runs."""

from __future__ import annotations


class WebpConverterError(Exception):
    """Base error for conversion runs."""

    exit_code = 1


class ConfigurationError(WebpConverterError):
    """Raised when run options fail validation."""

    exit_code = 2


class DiscoveryError(WebpConverterError):
    """Raised when the input tree cannot be walked."""


class EncodingError(WebpConverterError):
    """Raised when one source file cannot be encoded or written."""


class OutputCollisionError(WebpConverterError):
    """Raised when two source files map to the same output path."""
