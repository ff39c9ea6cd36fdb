"""Adaptadores concretos para as portas do domínio."""
from .fetcher import RequestsFetcher
from .soup_document import SoupDocument

__all__ = ["RequestsFetcher", "SoupDocument"]
