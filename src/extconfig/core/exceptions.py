"""
extconfig — Canonical Exceptions (v1)

Este módulo define as exceções tipadas levantadas durante a resolução
de uma fonte externa de configuração (arquivo relativo, arquivo absoluto
ou URL).

Objetivo:
- Permitir que resolvers e parser levantem falhas semânticas tipadas
- Facilitar o mapeamento determinístico para ExtConfigErrorPayload
- Separar "fonte ausente" (recuperável, warning) de "referência inválida"
  ou "falha de leitura" (recuperável, erro)

Regras:
- Nenhuma exceção daqui é fatal para o merge: o loop de itens as captura.
- Exceções devem carregar apenas dados estruturados (serializáveis).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ExtConfigException(Exception):
    """Base class para exceções internas do extconfig.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Não embedar stack trace em payloads de erro
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover
        return self.message


# ---------------------------------------------------------------------------
# Resolução de fontes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SourceNotFound(ExtConfigException):
    """Arquivo ou recurso referenciado não existe."""


@dataclass(frozen=True)
class InvalidSourceReference(ExtConfigException):
    """Referência não pode ser tratada pelo tipo de fonte (ex.: URL sem http/https)."""


@dataclass(frozen=True)
class SourceReadError(ExtConfigException):
    """Fonte existe (ou foi aceita), mas a leitura falhou."""


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PropertiesParseError(ExtConfigException):
    """Conteúdo lido não é um arquivo .properties válido."""
