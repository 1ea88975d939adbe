# src/extconfig/__init__.py
"""
extconfig — fontes externas de configuração para aplicações web.

Este pacote raiz define o namespace público do extconfig, uma extensão
executada uma única vez na inicialização do framework host: depois que
o host lê a própria configuração, o extconfig lê fontes adicionais de
propriedades (arquivos relativos, arquivos absolutos e URLs) e aplica
suas entradas sobre o mapa de configuração do host.

Arquitetura em alto nível:
    - core.config     → chaves fixas, regra de merge, hashing e loader base
    - core.properties → parser do formato `.properties`
    - core.sources    → descritores e resolução de cada local
    - core.report     → relatório por item e log estruturado
    - plugin          → ConfigMerger, o ponto de entrada do host

Limites explícitos:
    - Não decide quando é invocado
    - Não recarrega configuração em runtime
    - Não tipa valores (tudo é `str`)
"""
from .plugin import ConfigMerger, apply_external_configuration
from .core.report import MergeReport, SourceResult, SourceStatus, save_report

__all__ = [
    "ConfigMerger",
    "apply_external_configuration",
    "MergeReport",
    "SourceResult",
    "SourceStatus",
    "save_report",
]
