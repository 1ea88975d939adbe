# src/extconfig/plugin.py
"""
Plugin de fontes externas de configuração.

Este módulo define o `ConfigMerger`, o único ponto de entrada chamado
pelo framework host depois que a configuração base foi lida. Ele lê
fontes adicionais de propriedades e as aplica sobre o mapa do host.

Passadas (ordem fixa; a posterior sobrescreve a anterior):
    1. `externalConfig.fileName` — arquivos relativos à raiz de recursos,
       ou a `externalConfig.fileAbsolutePath` quando definido
       (padrão quando a chave não existe: `/<deployment_id>.properties`);
       sem prefixo, entradas `http(s)://` são buscadas como URL
    2. `externalConfig.fileNameAbsolute` — caminhos absolutos literais
    3. `externalConfig.URL` — URLs http(s)

Política de falhas:
    - Passada sem chave (ou com lista vazia) é no-op (evento DEBUG)
    - Fonte inexistente → WARNING, item ignorado
    - Referência inválida, falha de leitura ou de parse → ERROR, item ignorado
    - Nenhuma falha de item interrompe a lista, as passadas seguintes
      ou a inicialização do host
    - Falha ao calcular o hash final vira evento ERROR (`config_hash` = None)

Limites explícitos:
    - Não decide quando é invocado (responsabilidade do host)
    - Não valida nem tipa valores (tudo é `str`)
    - Não recarrega configuração após a inicialização
"""

from __future__ import annotations

from typing import Any, Callable, MutableMapping, Optional, Tuple

from extconfig.core.config import keys
from extconfig.core.config.hashing import compute_config_hash
from extconfig.core.config.loader import load_host_configuration
from extconfig.core.config.merge import merge_properties
from extconfig.core.errors import payload_from_exception
from extconfig.core.exceptions import (
    InvalidSourceReference,
    SourceNotFound,
)
from extconfig.core.report import (
    DEBUG,
    ERROR,
    INFO,
    WARNING,
    MergeReport,
    SourceResult,
    SourceStatus,
)
from extconfig.core.sources.descriptors import (
    PASS_ORDER,
    SourceDescriptor,
    SourceKind,
    read_descriptor,
)
from extconfig.core.sources.resolvers import (
    LoadedSource,
    ResourceRoot,
    is_url,
    load_absolute_file,
    load_relative_file,
    load_url,
)


class ConfigMerger:
    """
    Aplica fontes externas de propriedades sobre o mapa de configuração do host.

    O mapa é recebido explicitamente, pertence ao host e é mutado in
    place. Cada invocação de `on_configuration_read` produz um novo
    `MergeReport`; o último fica disponível em `last_report`.

    Args:
        configuration: Mapa plano do host (mutado).
        deployment_id: Identificador do deployment ativo (pode ser vazio).
        resource_root: Raiz de recursos para nomes relativos
            (diretório ou `importlib.resources` traversable).
        url_timeout: Timeout repassado ao transporte HTTP; None mantém o
            padrão do transporte.
        session: Objeto com `get(url, timeout=...)`, ex.: `requests.Session`.
    """

    def __init__(
        self,
        configuration: MutableMapping[str, str],
        deployment_id: str = "",
        *,
        resource_root: Optional[ResourceRoot] = None,
        url_timeout: Optional[float] = None,
        session: Optional[Any] = None,
    ) -> None:
        self.configuration = configuration
        self.deployment_id = deployment_id or ""
        self.resource_root = resource_root
        self.url_timeout = url_timeout
        self.session = session
        self.last_report: Optional[MergeReport] = None

    # -----------------------------
    # Ponto de entrada
    # -----------------------------
    def on_configuration_read(self) -> MergeReport:
        """
        Executa as três passadas e devolve o relatório da invocação.

        Nunca levanta exceção por falha de um item: o resultado de cada
        item fica registrado no relatório.
        """
        report = MergeReport(deployment_id=self.deployment_id)

        for kind in PASS_ORDER:
            descriptor = read_descriptor(self.configuration, kind, self.deployment_id)
            self._run_pass(descriptor, report)

        try:
            report.config_hash = compute_config_hash(self.configuration)
        except (TypeError, ValueError) as exc:
            report.log(
                level=ERROR,
                message=f"Unable to hash effective configuration: {exc}",
                exc_type=type(exc).__name__,
            )

        report.log(
            level=INFO,
            message="External configuration merge finished",
            loaded=len(report.loaded),
            failed=len(report.failures),
            config_hash=report.config_hash,
        )

        self.last_report = report
        return report

    onConfigurationRead = on_configuration_read

    # -----------------------------
    # Passadas
    # -----------------------------
    def _run_pass(self, descriptor: SourceDescriptor, report: MergeReport) -> None:
        kind = descriptor.kind.value

        if descriptor.is_empty:
            report.log(
                level=DEBUG,
                message=f"No sources declared under {descriptor.key}, skipping",
                kind=kind,
            )
            return

        loader = self._loader_for(descriptor.kind)

        for location in descriptor.locations:
            report.log(
                level=INFO,
                message=f"Loading configuration from {location}",
                kind=kind,
                location=location,
                defaulted=descriptor.defaulted,
            )
            report.record(self._process(kind, location, loader, report))

    def _loader_for(self, kind: SourceKind) -> Callable[[str], LoadedSource]:
        if kind is SourceKind.RELATIVE_FILE:
            # prefixo lido uma vez por passada, como as listas
            prefix = self.configuration.get(keys.FILE_ABSOLUTE_PATH) or None

            def _relative(location: str) -> LoadedSource:
                if not prefix and is_url(location):
                    return load_url(location, session=self.session, timeout=self.url_timeout)
                return load_relative_file(
                    location,
                    resource_root=self.resource_root,
                    absolute_prefix=prefix,
                )

            return _relative

        if kind is SourceKind.ABSOLUTE_FILE:
            return load_absolute_file

        def _url(location: str) -> LoadedSource:
            return load_url(location, session=self.session, timeout=self.url_timeout)

        return _url

    def _process(
        self,
        kind: str,
        location: str,
        loader: Callable[[str], LoadedSource],
        report: MergeReport,
    ) -> SourceResult:
        try:
            loaded = loader(location)
            outcome = merge_properties(self.configuration, loaded.properties, self.deployment_id)
        except SourceNotFound as exc:
            return self._failed(report, WARNING, SourceStatus.NOT_FOUND, exc, kind, location)
        except InvalidSourceReference as exc:
            return self._failed(report, ERROR, SourceStatus.REJECTED, exc, kind, location)
        except Exception as exc:
            # item nunca derruba a inicialização do host
            return self._failed(report, ERROR, SourceStatus.ERROR, exc, kind, location)

        report.log(
            level=INFO,
            message=f"Loaded {len(outcome.merged_keys)} keys from {loaded.resolved}",
            kind=kind,
            location=location,
            dropped=len(outcome.dropped_keys),
        )

        return SourceResult(
            kind=kind,
            location=location,
            status=SourceStatus.LOADED,
            resolved=loaded.resolved,
            merged_keys=outcome.merged_keys,
            dropped_keys=outcome.dropped_keys,
        )

    @staticmethod
    def _failed(
        report: MergeReport,
        level: str,
        status: SourceStatus,
        exc: Exception,
        kind: str,
        location: str,
    ) -> SourceResult:
        payload = payload_from_exception(exc, kind=kind, location=location).to_dict()

        report.log(
            level=level,
            message=f"Unable to load properties from {location}: {payload['message']}",
            kind=kind,
            location=location,
            error_type=payload["type"],
        )

        return SourceResult(
            kind=kind,
            location=location,
            status=status,
            resolved=payload["details"].get("resolved"),
            error=payload,
        )


def apply_external_configuration(
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
    deployment_id: str = "",
    resource_root: Optional[ResourceRoot] = None,
    url_timeout: Optional[float] = None,
) -> Tuple[dict, MergeReport]:
    """
    Carrega a configuração base do host e aplica as fontes externas.

    Atalho para hosts sem loader próprio: equivale a
    `load_host_configuration` seguido de `ConfigMerger(...).on_configuration_read()`.

    Returns:
        Tuple[dict, MergeReport]: Mapa efetivo e relatório do merge.

    Raises:
        ConfigError: Se a configuração base for inválida (fatal).
    """
    configuration = load_host_configuration(defaults_path=defaults_path, local_path=local_path)

    merger = ConfigMerger(
        configuration,
        deployment_id,
        resource_root=resource_root,
        url_timeout=url_timeout,
    )
    report = merger.on_configuration_read()

    return configuration, report
