"""Portas de integração utilizadas pela camada de aplicação."""
from .document import Document
from .fetcher import DocumentFetcher, QueryParams

__all__ = ["Document", "DocumentFetcher", "QueryParams"]
