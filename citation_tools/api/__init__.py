"""
Registry clients used to resolve identifiers to citations.
"""

from .base_client import BaseAPIClient, FetchError
from .crossref_client import CrossRefClient
from .arxiv_client import ArxivClient
from .pubmed_client import PubMedClient
from .openlibrary_client import OpenLibraryClient
from .openalex_client import OpenAlexClient

__all__ = [
    'BaseAPIClient',
    'FetchError',
    'CrossRefClient',
    'ArxivClient',
    'PubMedClient',
    'OpenLibraryClient',
    'OpenAlexClient',
]
