# src/extconfig/core/config/__init__.py
"""
Camada de configuração do extconfig.

Responsabilidades do pacote:
    - Chaves fixas lidas do mapa do host (`keys`)
    - Regra de merge com escopo por deployment (`merge`)
    - Hash canônico do mapa efetivo (`hashing`)
    - Carregamento da configuração base do host (`loader`)

Invariantes:
    - O mapa de configuração é plano (`str -> str`)
    - A última escrita vence
    - Chaves `%<id>.` nunca são inseridas como estão
"""
