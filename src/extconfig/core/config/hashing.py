# src/extconfig/core/config/hashing.py
"""
Hashing canônico do mapa de configuração efetivo.

O hash é calculado depois das três passadas e gravado no relatório de
merge. Duas inicializações com o mesmo mapa final produzem o mesmo hash,
independentemente da ordem de inserção das chaves.

Política (v1):
    - Serialização JSON canônica (chaves ordenadas, separadores compactos)
    - Codificação UTF-8
    - SHA-256 hexadecimal
"""

import hashlib
import json
from typing import Mapping


def compute_config_hash(configuration: Mapping[str, str]) -> str:
    """
    Gera o hash SHA-256 determinístico de um mapa de configuração.

    Args:
        configuration (Mapping[str, str]): Mapa plano do host.

    Returns:
        str: Hash hexadecimal de 64 caracteres.

    Raises:
        TypeError: Se o objeto não for um mapeamento.
    """
    if not isinstance(configuration, Mapping):
        raise TypeError(
            f"Config para hashing deve ser um mapeamento, recebido: {type(configuration).__name__}"
        )

    canonical_json = json.dumps(
        dict(configuration),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
