# src/extconfig/core/sources/descriptors.py
"""
Descritores de fontes externas de configuração.

Um descritor identifica o tipo da fonte e a lista de locais declarada no
mapa do host sob a chave fixa daquele tipo. A leitura dos descritores
acontece uma única vez por invocação do merge.

Decisões:
    - Entradas da lista são aparadas; entradas vazias são ignoradas
    - Chave ausente e chave vazia produzem lista vazia (passada no-op),
      exceto FILE_NAME ausente, que usa o nome derivado do deployment
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional, Tuple

from extconfig.core.config import keys


class SourceKind(str, Enum):
    RELATIVE_FILE = "relative-file"
    ABSOLUTE_FILE = "absolute-file"
    URL = "url"


# ordem fixa das passadas; a posterior sobrescreve a anterior
PASS_ORDER: Tuple[SourceKind, ...] = (
    SourceKind.RELATIVE_FILE,
    SourceKind.ABSOLUTE_FILE,
    SourceKind.URL,
)

_KEY_BY_KIND = {
    SourceKind.RELATIVE_FILE: keys.FILE_NAME,
    SourceKind.ABSOLUTE_FILE: keys.FILE_NAME_ABSOLUTE,
    SourceKind.URL: keys.URL,
}


@dataclass(frozen=True)
class SourceDescriptor:
    kind: SourceKind
    key: str
    locations: Tuple[str, ...]
    defaulted: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.locations


def split_locations(raw: Optional[str]) -> Tuple[str, ...]:
    """Divide uma lista separada por vírgulas, descartando entradas vazias."""
    if not raw:
        return ()
    parts = (part.strip() for part in raw.split(keys.LIST_SEPARATOR))
    return tuple(part for part in parts if part)


def read_descriptor(
    configuration: Mapping[str, str],
    kind: SourceKind,
    deployment_id: str,
) -> SourceDescriptor:
    """
    Lê o descritor de uma passada a partir do estado atual do mapa.

    Chamado no início de cada passada: uma fonte carregada por uma
    passada anterior pode declarar as listas das passadas seguintes.
    """
    key = _KEY_BY_KIND[kind]

    if kind is SourceKind.RELATIVE_FILE and key not in configuration:
        return SourceDescriptor(
            kind=kind,
            key=key,
            locations=(keys.default_file_name(deployment_id),),
            defaulted=True,
        )

    return SourceDescriptor(
        kind=kind,
        key=key,
        locations=split_locations(configuration.get(key)),
    )
