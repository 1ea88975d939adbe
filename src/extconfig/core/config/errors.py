# src/extconfig/core/config/errors.py
"""
Exceções da configuração base do host.

Ao contrário das fontes externas (best-effort, nunca fatais), a
configuração base do host é obrigatória: sem ela não há mapa sobre o
qual aplicar o merge. Por isso estas exceções interrompem o carregamento.

Invariantes:
    - Todas herdam de `ConfigError`
    - Nenhuma é levantada durante o merge de fontes externas
"""


class ConfigError(Exception):
    """Exceção base para erros da configuração base do host."""


class DefaultsNotFoundError(ConfigError):
    """
    Arquivo de configuração base (defaults) não encontrado.

    O arquivo de defaults é obrigatório; o arquivo local não.
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Extensão de arquivo não suportada pelo loader.

    Formatos suportados:
        - YAML (.yaml, .yml)
        - JSON (.json)
        - Java properties (.properties)
    """


class InvalidConfigRootTypeError(ConfigError):
    """Conteúdo raiz do documento não é um mapa chave-valor."""


class ConfigTypeConflictError(ConfigError):
    """
    Conflito estrutural durante o deep-merge.

    Exemplo:
        - base:     {"db": {"host": "localhost"}}
        - override: {"db": "postgres://..."}
    """
