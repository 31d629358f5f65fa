"""Brands feature - list brands connected to the account."""

from .commands import brands
from .display import show_brands

__all__ = [
    "brands",
    "show_brands",
]
