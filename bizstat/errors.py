"""Exception hierarchy for dataset ingestion and statistical engines.

Every error derives from :class:`ValueError` so callers that already guard
numeric parsing with ``except ValueError`` keep working unchanged.
"""

from __future__ import annotations


class StatisticsError(ValueError):
    """Base class for all bizstat input and domain errors."""


class EmptyDatasetError(StatisticsError):
    """No valid numeric observations remain after filtering."""


class EmptyInputError(EmptyDatasetError):
    """An engine received a zero-length array of values."""


class InsufficientDataError(StatisticsError):
    """Too few observations for the requested measure."""


class MismatchedLengthError(StatisticsError):
    """Paired x and y sequences do not have the same length."""


class InvalidDomainError(StatisticsError):
    """A measure was requested on values outside its mathematical domain."""
