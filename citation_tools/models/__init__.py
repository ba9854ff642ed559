"""Data models for identifiers and citations."""

from .citation import (
    IdentifierFormat,
    ResolutionFailure,
    ResolutionPlan,
    CitationRecord,
    BookRecord,
    VenueRecord,
    ResolutionResult,
)

__all__ = [
    'IdentifierFormat',
    'ResolutionFailure',
    'ResolutionPlan',
    'CitationRecord',
    'BookRecord',
    'VenueRecord',
    'ResolutionResult',
]
