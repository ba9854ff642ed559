"""Resolution of identifiers to citations."""

from .resolver import CitationResolver, RESOLUTION_PLANS, resolve_path

__all__ = ['CitationResolver', 'RESOLUTION_PLANS', 'resolve_path']
