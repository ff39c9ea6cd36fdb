"""Serviços de aplicação da biblioteca."""
from .crawler import Crawler, Selector

__all__ = ["Crawler", "Selector"]
