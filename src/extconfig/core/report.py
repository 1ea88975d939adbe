# src/extconfig/core/report.py
"""
Relatório de merge — resultado explícito de uma invocação do plugin.

O merge de fontes externas é best-effort: nenhum item com falha impede
os demais. Em vez de esconder essas falhas em chamadas de log, cada item
produz um `SourceResult`, e o `MergeReport` consolida:

    - o deployment ativo
    - os resultados por item, na ordem de precedência real
    - o log estruturado de eventos (debug/info/warning/error)
    - o hash do mapa efetivo após as três passadas

Decisões arquiteturais:
    - UTC é o timezone canônico dos timestamps
    - A ordem de `results` e `events` é a ordem de execução
    - O relatório é serializável em JSON determinístico
    - O chamador decide se e como expor falhas parciais

Limites explícitos:
    - Não executa merge
    - Não decide políticas de precedência
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union


DEBUG = "debug"
INFO = "info"
WARNING = "warning"
ERROR = "error"


class SourceStatus(str, Enum):
    LOADED = "loaded"
    NOT_FOUND = "not_found"
    ERROR = "error"
    REJECTED = "rejected"


@dataclass
class SourceResult:
    """
    Resultado do processamento de um único local de uma passada.

    `merged_keys` traz o nome final das chaves escritas no mapa (já sem
    o escopo `%<id>.`); `dropped_keys` traz o nome original das chaves
    descartadas por pertencerem a outro deployment.
    """

    kind: str
    location: str
    status: SourceStatus
    resolved: Optional[str] = None
    merged_keys: List[str] = field(default_factory=list)
    dropped_keys: List[str] = field(default_factory=list)
    error: Optional[Dict[str, Any]] = None

    @property
    def ok(self) -> bool:
        return self.status is SourceStatus.LOADED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "location": self.location,
            "status": self.status.value,
            "resolved": self.resolved,
            "merged_keys": list(self.merged_keys),
            "dropped_keys": list(self.dropped_keys),
            "error": self.error,
        }


@dataclass
class MergeReport:
    """
    Relatório consolidado de uma invocação de `on_configuration_read`.

    Invariantes:
        - `results` segue a precedência (arquivo relativo, arquivo
          absoluto, URL; cada lista da esquerda para a direita)
        - Todo evento inclui `level`, `message` e `timestamp`
        - `config_hash` só é definido ao fim das três passadas
    """

    deployment_id: str
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    results: List[SourceResult] = field(default_factory=list)
    events: List[Dict[str, Any]] = field(default_factory=list)
    config_hash: Optional[str] = None

    # -----------------------------
    # Logging
    # -----------------------------
    def log(self, *, level: str, message: str, **extra: Any) -> None:
        event = {
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def events_at(self, level: str) -> List[Dict[str, Any]]:
        return [event for event in self.events if event["level"] == level]

    # -----------------------------
    # Resultados
    # -----------------------------
    def record(self, result: SourceResult) -> None:
        self.results.append(result)

    @property
    def loaded(self) -> List[SourceResult]:
        return [result for result in self.results if result.ok]

    @property
    def failures(self) -> List[SourceResult]:
        return [result for result in self.results if not result.ok]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "deployment_id": self.deployment_id,
            "started_at": self.started_at.astimezone(timezone.utc).isoformat(),
            "config_hash": self.config_hash,
            "results": [result.to_dict() for result in self.results],
            "events": list(self.events),
        }


def save_report(report: MergeReport, path: Union[str, Path]) -> Path:
    """
    Persiste o relatório em JSON determinístico (chaves ordenadas, UTF-8).

    Diretórios intermediários são criados quando necessário.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(
        json.dumps(report.to_dict(), ensure_ascii=False, indent=2, sort_keys=True),
        encoding="utf-8",
    )
    return target
