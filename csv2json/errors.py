"""Exceptions raised by record conversion."""

from __future__ import annotations


class ConversionFailure(Exception):
    """A record could not be converted. No partial output is produced.

    The underlying error is kept on ``cause`` and chained as ``__cause__``.
    """

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class ConfigurationError(ValueError):
    """Converter options are missing or invalid."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
