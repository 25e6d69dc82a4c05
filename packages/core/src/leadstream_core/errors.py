"""Typed failures raised by the triage core.

ConfigurationError and SourceFetchError propagate to whoever triggered a
triage run so the presentation layer can show a specific message.
ClassificationError never leaves a classifier: BaseClassifier.classify turns
it into a labelled ClassificationResult.
"""

from __future__ import annotations


class LeadstreamError(Exception):
    """Base class for all errors raised by leadstream."""


class ConfigurationError(LeadstreamError):
    """A required credential or identifier is missing."""


class SourceFetchError(LeadstreamError):
    """The remote comment listing failed or returned an error payload."""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


class ClassificationError(LeadstreamError):
    """A classifier strategy could not produce a verdict."""
