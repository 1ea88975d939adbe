# src/extconfig/core/config/loader.py
"""
Loader da configuração base do host.

O plugin de fontes externas opera sobre um mapa plano `str -> str` que
pertence ao host. Este módulo produz esse mapa a partir de arquivos,
para hosts que não possuem loader próprio (e para testes ponta a ponta).

A configuração base é resolvida a partir de:
    - um arquivo de defaults (obrigatório)
    - um arquivo local de overrides (opcional)

Formatos suportados:
    - YAML (.yaml, .yml) via PyYAML
    - JSON (.json)
    - Java properties (.properties)

Política de achatamento:
    - seções aninhadas viram chaves pontuadas (`db: {host: x}` → `db.host`)
    - booleanos viram `true` / `false`
    - null vira string vazia
    - listas viram listas separadas por vírgula (formato das chaves
      `externalConfig.*`)
    - demais escalares via `str()`

Invariantes:
    - O arquivo de defaults é obrigatório
    - O resultado é sempre um dict plano de strings
    - Erros estruturais são fatais (ao contrário das fontes externas)
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml  # PyYAML

from extconfig.core.properties.parser import parse_properties

from .errors import (
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .keys import LIST_SEPARATOR, PROPERTIES_ENCODING
from .merge import deep_merge


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um documento de configuração e valida o tipo raiz.

    Arquivos vazios são interpretados como dicionários vazios.

    Raises:
        DefaultsNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se a extensão não for suportada.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
        PropertiesParseError: Se um `.properties` tiver escape inválido.
    """
    if not path.exists():
        raise DefaultsNotFoundError(f"Arquivo de configuração não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding=PROPERTIES_ENCODING) as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding=PROPERTIES_ENCODING) as f:
            data = json.load(f)

    elif suffix == ".properties":
        data = parse_properties(path.read_text(encoding=PROPERTIES_ENCODING))

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def _render(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return LIST_SEPARATOR.join(_render(item) for item in value)
    return str(value)


def flatten_config(document: Dict[str, Any], prefix: str = "") -> Dict[str, str]:
    """
    Achata um documento aninhado em um mapa plano `str -> str`.

    Exemplo:
        {"db": {"host": "x", "port": 5432}} → {"db.host": "x", "db.port": "5432"}
    """
    flat: Dict[str, str] = {}

    for key, value in document.items():
        name = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(flatten_config(value, prefix=name + "."))
        else:
            flat[name] = _render(value)

    return flat


def load_host_configuration(
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
) -> Dict[str, str]:
    """
    Carrega a configuração base do host como mapa plano.

    Quando `local_path` aponta para um arquivo existente, ele é aplicado
    sobre os defaults via `deep_merge` antes do achatamento. Um
    `local_path` inexistente é ignorado.

    Args:
        defaults_path (str): Arquivo base obrigatório.
        local_path (Optional[str]): Overrides locais opcionais.

    Returns:
        Dict[str, str]: Mapa plano, pronto para o `ConfigMerger`.

    Raises:
        DefaultsNotFoundError: Se o arquivo de defaults não existir.
        UnsupportedConfigFormatError: Se o formato não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo não for um dicionário.
        ConfigTypeConflictError: Se houver conflito estrutural no merge.
    """
    effective = _load_file(Path(defaults_path))

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = deep_merge(effective, _load_file(local_file))

    return flatten_config(effective)
