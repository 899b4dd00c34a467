"""Catalog gateway: third-party music search, projected onto ``Track``."""

from .deezer import DeezerCatalog
from .itunes import CatalogQuery, ItunesCatalog

__all__ = ['CatalogQuery', 'DeezerCatalog', 'ItunesCatalog']
