# tests/core/test_error_payloads.py
"""
Testes do mapeamento exceção tipada -> payload canônico de erro.

Invariantes:
    - O código (`type`) é estável e escolhido pela classe da exceção
    - `kind` e `location` sempre aparecem em `details`
    - O payload é serializável (to_dict)
"""

import json

import pytest

from extconfig.core.errors import (
    SOURCE_INVALID_REFERENCE,
    SOURCE_NOT_FOUND,
    SOURCE_PARSE_ERROR,
    SOURCE_READ_ERROR,
    SOURCE_UNEXPECTED_ERROR,
    payload_from_exception,
)
from extconfig.core.exceptions import (
    ExtConfigException,
    InvalidSourceReference,
    PropertiesParseError,
    SourceNotFound,
    SourceReadError,
)


@pytest.mark.parametrize(
    "exc_type, code",
    [
        (SourceNotFound, SOURCE_NOT_FOUND),
        (InvalidSourceReference, SOURCE_INVALID_REFERENCE),
        (SourceReadError, SOURCE_READ_ERROR),
        (PropertiesParseError, SOURCE_PARSE_ERROR),
        (ExtConfigException, SOURCE_UNEXPECTED_ERROR),
    ],
)
def test_code_follows_exception_class(exc_type, code):
    exc = exc_type(message="boom", details={})

    payload = payload_from_exception(exc, kind="url", location="http://x")

    assert payload.type == code


def test_details_merge_location_and_exception_details():
    exc = SourceNotFound(
        message="Fonte de configuração não encontrada",
        details={"resolved": "/srv/app/prod.properties"},
        hint="Confira o nome do arquivo",
    )

    payload = payload_from_exception(exc, kind="relative-file", location="/prod.properties")
    data = payload.to_dict()

    assert data == {
        "type": SOURCE_NOT_FOUND,
        "message": "Fonte de configuração não encontrada",
        "details": {
            "kind": "relative-file",
            "location": "/prod.properties",
            "resolved": "/srv/app/prod.properties",
        },
        "hint": "Confira o nome do arquivo",
    }
    json.dumps(data)


def test_foreign_exception_is_wrapped_without_traceback():
    payload = payload_from_exception(RuntimeError("crash"), kind="url", location="http://x")

    assert payload.type == SOURCE_UNEXPECTED_ERROR
    assert payload.details == {
        "kind": "url",
        "location": "http://x",
        "exception_class": "RuntimeError",
        "exc_message": "crash",
    }
