# src/extconfig/core/config/merge.py
"""
Políticas de merge de configuração do extconfig.

Este módulo concentra as duas regras de merge do projeto:

1. `merge_properties` — regra aplicada a cada conjunto de propriedades
   lido de uma fonte externa (arquivo ou URL) sobre o mapa do host:
       - chave comum        → sobrescrita incondicional
       - chave `%<id>.x`    → reescrita para `x` quando `<id>` é o
                              deployment ativo
       - outra chave `%...` → descartada, nunca chega ao mapa

2. `deep_merge` — merge determinístico entre documentos aninhados
   (defaults + local) usado pelo loader da configuração base do host:
       - dict + dict         → merge recursivo por chave
       - dict vs não-dict    → erro estrutural explícito
       - qualquer outro caso → sobrescrita direta

Invariantes:
    - O mapa do host é plano (sem aninhamento)
    - Nenhuma chave iniciada por `%` é inserida como está
    - A última escrita vence
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, MutableMapping, Optional

from .errors import ConfigTypeConflictError
from .keys import SCOPE_PREFIX, SCOPE_SEPARATOR


@dataclass
class MergeOutcome:
    """Chaves efetivamente escritas e chaves descartadas em um merge."""

    merged_keys: List[str] = field(default_factory=list)
    dropped_keys: List[str] = field(default_factory=list)


def resolve_scoped_key(key: str, deployment_id: str) -> Optional[str]:
    """
    Resolve o nome final de uma chave lida de uma fonte externa.

    Chaves sem o prefixo `%` são retornadas inalteradas. Chaves com `%`
    só sobrevivem quando o deployment está definido e a chave começa com
    `%<deployment_id>.`; nesse caso o prefixo é removido. Em qualquer
    outro caso retorna None (a chave deve ser descartada).

    Args:
        key (str): Chave como aparece no arquivo de propriedades.
        deployment_id (str): Identificador do deployment ativo (pode ser vazio).

    Returns:
        Optional[str]: Chave a ser escrita no mapa, ou None.
    """
    if not key.startswith(SCOPE_PREFIX):
        return key

    if not deployment_id:
        return None

    scope = SCOPE_PREFIX + deployment_id + SCOPE_SEPARATOR
    if not key.startswith(scope):
        return None

    # `%prod.` sozinho não nomeia nenhuma chave
    return key[len(scope):] or None


def merge_properties(
    configuration: MutableMapping[str, str],
    properties: Mapping[str, str],
    deployment_id: str,
) -> MergeOutcome:
    """
    Aplica um conjunto de propriedades sobre o mapa do host, in place.

    A ordem de iteração de `properties` é irrelevante: cada chave do
    conjunto é única, e o escopo `%<id>.` só colide com uma chave comum
    quando o próprio arquivo declara as duas. Nesse caso vence a que
    aparece por último em `properties`.

    Args:
        configuration (MutableMapping[str, str]): Mapa do host (mutado).
        properties (Mapping[str, str]): Conjunto lido de uma única fonte.
        deployment_id (str): Identificador do deployment ativo.

    Returns:
        MergeOutcome: Chaves escritas (nome final) e chaves descartadas
        (nome original).
    """
    outcome = MergeOutcome()

    for key, value in properties.items():
        target = resolve_scoped_key(key, deployment_id)
        if target is None:
            outcome.dropped_keys.append(key)
            continue

        configuration[target] = value
        outcome.merged_keys.append(target)

    return outcome


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Realiza um deep-merge determinístico entre dois documentos de configuração.

    Nenhum dos inputs é mutado. Como o resultado é achatado em strings
    pelo loader, divergência de tipo entre escalares não é conflito: só
    a troca entre seção (dict) e valor é tratada como erro estrutural.

    Raises:
        ConfigTypeConflictError: Se uma chave for seção em um lado e valor no outro.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    result: Dict[str, Any] = deepcopy(base)

    for key, value in override.items():
        current = result.get(key)

        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
            continue

        if key in result and isinstance(current, dict) != isinstance(value, dict):
            raise ConfigTypeConflictError(
                f"Conflito de estrutura na chave '{key}': "
                f"{type(current).__name__} vs {type(value).__name__}"
            )

        result[key] = deepcopy(value)

    return result
