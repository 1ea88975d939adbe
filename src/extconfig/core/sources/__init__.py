# src/extconfig/core/sources/__init__.py
"""
Fontes externas de configuração.

    - descriptors → tipo de fonte, chave fixa e lista de locais
    - resolvers   → abertura, leitura e parse de um único local
"""

from .descriptors import PASS_ORDER, SourceDescriptor, SourceKind, read_descriptor, split_locations
from .resolvers import LoadedSource, is_url, load_absolute_file, load_relative_file, load_url

__all__ = [
    "PASS_ORDER",
    "SourceDescriptor",
    "SourceKind",
    "read_descriptor",
    "split_locations",
    "LoadedSource",
    "is_url",
    "load_absolute_file",
    "load_relative_file",
    "load_url",
]
