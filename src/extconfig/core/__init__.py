# src/extconfig/core/__init__.py
"""
Core do extconfig.

Reúne as peças independentes do ponto de entrada do host: parser de
propriedades, resolução de fontes, regra de merge e relatório.

Princípios fundamentais:
    - Nenhuma falha de item é fatal
    - O mapa do host é recebido explicitamente (sem estado global)
    - Precedência explícita e testada
"""
