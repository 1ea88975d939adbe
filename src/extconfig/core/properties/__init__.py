# src/extconfig/core/properties/__init__.py
"""Parser do formato texto `.properties`."""

from .parser import parse_properties

__all__ = ["parse_properties"]
