"""
Resolve scholarly persistent identifiers (ISBN, ISSN, DOI, PMID, PMCID,
arXiv ID) to bibliographic citations.
"""

from citation_tools.models.citation import IdentifierFormat
from citation_tools.utils.identifier_validator import classify, normalize
from citation_tools.metadata.resolver import CitationResolver, resolve_path

__version__ = "1.0.0"


def resolve_citation(raw: str, email: str = None):
    """Resolve one identifier with default clients; None if it cannot be resolved."""
    resolver = CitationResolver(email=email)
    try:
        return resolver.resolve_citation(raw)
    finally:
        resolver.close()


__all__ = [
    'IdentifierFormat',
    'classify',
    'normalize',
    'CitationResolver',
    'resolve_path',
    'resolve_citation',
]
