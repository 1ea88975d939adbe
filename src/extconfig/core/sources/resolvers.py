# src/extconfig/core/sources/resolvers.py
"""
Resolução de um único local para um conjunto de propriedades.

Cada função deste módulo recebe um local (nome de arquivo, caminho
absoluto ou URL), abre exatamente um stream, lê o conteúdo como texto
UTF-8, fecha o stream e devolve o conjunto de propriedades já parseado.

Mapeamento de falhas:
    - arquivo/recurso inexistente        → SourceNotFound
    - URL sem esquema http(s)             → InvalidSourceReference
    - permissão, diretório, caminho inválido,
      falha de transporte ou status HTTP  → SourceReadError
    - bytes não-UTF-8 ou escape inválido  → PropertiesParseError

Handles de arquivo e respostas HTTP são sempre liberados antes do
retorno, em qualquer caminho de saída.

Limites explícitos:
    - Não aplica a regra de escopo `%<id>.` (responsabilidade de merge)
    - Não registra eventos (responsabilidade do plugin)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import requests

from extconfig.core.config.keys import PROPERTIES_ENCODING, URL_SCHEMES
from extconfig.core.exceptions import (
    InvalidSourceReference,
    PropertiesParseError,
    SourceNotFound,
    SourceReadError,
)
from extconfig.core.properties.parser import parse_properties


ResourceRoot = Union[str, os.PathLike, Any]


@dataclass(frozen=True)
class LoadedSource:
    """Conteúdo parseado de uma fonte e o local efetivamente aberto."""

    resolved: str
    properties: Dict[str, str]


def is_url(value: Optional[str]) -> bool:
    """Indica se `value` pode ser tratado como URL de fonte (http:// ou https://)."""
    return value is not None and value.startswith(URL_SCHEMES)


def _decode(payload: bytes, resolved: str) -> str:
    try:
        return payload.decode(PROPERTIES_ENCODING)
    except UnicodeDecodeError as exc:
        raise PropertiesParseError(
            message="Conteúdo não é UTF-8 válido",
            details={"resolved": resolved, "position": exc.start},
            hint="Salve o arquivo de propriedades em UTF-8.",
        ) from exc


def _read_resource(resource: Any, resolved: str) -> LoadedSource:
    try:
        with resource.open("rb") as handle:
            payload = handle.read()
    except FileNotFoundError as exc:
        raise SourceNotFound(
            message="Fonte de configuração não encontrada",
            details={"resolved": resolved},
            hint="Confira o nome do arquivo e o diretório base, ou remova a entrada da lista.",
        ) from exc
    except (OSError, ValueError) as exc:
        raise SourceReadError(
            message="Falha ao ler fonte de configuração",
            details={
                "resolved": resolved,
                "exc_type": type(exc).__name__,
                "exc_message": str(exc),
            },
            hint="Verifique permissões e se o caminho aponta para um arquivo regular.",
        ) from exc

    return LoadedSource(resolved=resolved, properties=parse_properties(_decode(payload, resolved)))


def _strip_leading_separator(filename: str) -> str:
    if filename.startswith(("/", os.sep)):
        return filename[1:]
    return filename


def load_relative_file(
    filename: str,
    *,
    resource_root: Optional[ResourceRoot] = None,
    absolute_prefix: Optional[str] = None,
) -> LoadedSource:
    """
    Resolve um nome de arquivo da lista `externalConfig.fileName`.

    Com `absolute_prefix` não vazio, o arquivo é aberto em
    `<absolute_prefix><os.sep><filename>` (sem a primeira barra do nome).
    Sem prefixo, o nome é resolvido como recurso sob `resource_root`
    (diretório ou `importlib.resources` traversable; padrão: diretório
    de trabalho atual). Uma barra inicial indica a raiz dos recursos.

    Raises:
        SourceNotFound: Se o arquivo/recurso não existir.
        InvalidSourceReference: Se o nome não designar nenhum recurso ou
            tiver componentes `..`.
        SourceReadError: Se a abertura ou leitura falhar por outro motivo.
        PropertiesParseError: Se o conteúdo for inválido.
    """
    if absolute_prefix:
        resolved = absolute_prefix + os.sep + _strip_leading_separator(filename)
        return _read_resource(Path(resolved), resolved)

    root = Path.cwd() if resource_root is None else resource_root
    if isinstance(root, (str, os.PathLike)):
        root = Path(root)

    parts = [part for part in filename.split("/") if part]
    if not parts:
        raise InvalidSourceReference(
            message="Nome de recurso vazio",
            details={"resolved": str(root)},
            hint="Informe o nome do arquivo relativo à raiz dos recursos.",
        )
    if ".." in parts:
        raise InvalidSourceReference(
            message="Nome de recurso sai da raiz dos recursos",
            details={"resolved": str(root), "filename": filename},
            hint="Use nomes sem `..`; para arquivos fora da raiz use externalConfig.fileNameAbsolute.",
        )

    resource = root.joinpath(*parts)
    return _read_resource(resource, str(resource))


def load_absolute_file(path: str) -> LoadedSource:
    """
    Abre um caminho da lista `externalConfig.fileNameAbsolute`, literalmente.

    Raises:
        SourceNotFound: Se o arquivo não existir.
        SourceReadError: Se a abertura ou leitura falhar por outro motivo.
        PropertiesParseError: Se o conteúdo for inválido.
    """
    return _read_resource(Path(path), path)


def load_url(
    url: str,
    *,
    session: Optional[Any] = None,
    timeout: Optional[float] = None,
) -> LoadedSource:
    """
    Busca via HTTP GET um arquivo de propriedades da lista `externalConfig.URL`.

    Apenas valores iniciados por `http://` ou `https://` são aceitos.
    `session` pode ser um `requests.Session` (ou qualquer objeto com
    `get(url, timeout=...)`); sem ela, `requests.get` é usado. Sem
    `timeout`, vale o comportamento padrão do transporte.

    Raises:
        InvalidSourceReference: Se o valor não for uma URL http(s).
        SourceReadError: Em falha de transporte ou status HTTP de erro.
        PropertiesParseError: Se o conteúdo for inválido.
    """
    if not is_url(url):
        raise InvalidSourceReference(
            message="Referência não é uma URL http(s)",
            details={"accepted_schemes": list(URL_SCHEMES)},
            hint="Use uma URL iniciada por http:// ou https://.",
        )

    http = session if session is not None else requests

    try:
        with http.get(url, timeout=timeout) as response:
            response.raise_for_status()
            payload = response.content
    except (requests.RequestException, ValueError) as exc:
        raise SourceReadError(
            message="Falha ao buscar fonte de configuração remota",
            details={
                "resolved": url,
                "exc_type": type(exc).__name__,
                "exc_message": str(exc),
            },
            hint="Verifique se a URL está acessível a partir deste host.",
        ) from exc

    return LoadedSource(resolved=url, properties=parse_properties(_decode(payload, url)))
