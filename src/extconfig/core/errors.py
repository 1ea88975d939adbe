"""
extconfig — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros registrados no relatório
de merge. Um erro aqui nunca interrompe a inicialização do host: ele é
um artefato de diagnóstico anexado ao resultado do item que falhou,
devendo ser:

- explícito
- serializável
- rastreável
- acionável

Nenhuma decisão implícita é permitida.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from .exceptions import (
    ExtConfigException,
    InvalidSourceReference,
    PropertiesParseError,
    SourceNotFound,
    SourceReadError,
)


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ExtConfigErrorPayload:
    """
    Payload canônico de erro do extconfig.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

SOURCE_NOT_FOUND = "SOURCE_NOT_FOUND"
SOURCE_INVALID_REFERENCE = "SOURCE_INVALID_REFERENCE"
SOURCE_READ_ERROR = "SOURCE_READ_ERROR"
SOURCE_PARSE_ERROR = "SOURCE_PARSE_ERROR"
SOURCE_UNEXPECTED_ERROR = "SOURCE_UNEXPECTED_ERROR"


_CODES_BY_EXCEPTION = (
    (SourceNotFound, SOURCE_NOT_FOUND),
    (InvalidSourceReference, SOURCE_INVALID_REFERENCE),
    (SourceReadError, SOURCE_READ_ERROR),
    (PropertiesParseError, SOURCE_PARSE_ERROR),
)


# ---------------------------------------------------------------------------
# Conversão exceção -> payload
# ---------------------------------------------------------------------------

def payload_from_exception(
    exc: Exception,
    *,
    kind: str,
    location: str,
) -> ExtConfigErrorPayload:
    """
    Converte uma exceção tipada em payload canônico.

    Regras:
    - ExtConfigException: o código (`type`) é escolhido pela classe e
      message/details/hint vêm da própria exceção.
    - Outras exceções: encapsuladas como SOURCE_UNEXPECTED_ERROR, sem
      expor stack trace.

    `kind` e `location` são sempre incluídos em `details`.
    """
    details: Dict[str, Any] = {"kind": kind, "location": location}

    if not isinstance(exc, ExtConfigException):
        details["exception_class"] = exc.__class__.__name__
        details["exc_message"] = str(exc)
        return ExtConfigErrorPayload(
            type=SOURCE_UNEXPECTED_ERROR,
            message="Falha inesperada ao processar fonte de configuração",
            details=details,
            hint="Verifique a entrada da lista e o log técnico do host.",
        )

    code = SOURCE_UNEXPECTED_ERROR
    for exc_type, exc_code in _CODES_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            code = exc_code
            break

    details.update(exc.details)

    return ExtConfigErrorPayload(
        type=code,
        message=exc.message,
        details=details,
        hint=exc.hint,
    )
