# tests/conftest.py
"""
Fixtures compartilhados para testes do extconfig.

Este módulo define fixtures reutilizáveis que fornecem:
- um diretório de recursos isolado por teste (raiz para nomes relativos)
- uma fábrica de arquivos `.properties` em disco
- o conteúdo de exemplo canônico (deployment `prod`)

Decisões:
    - Todo I/O de arquivo acontece sob `tmp_path`
    - Nenhuma fixture acessa rede; URLs usam `tests.fixtures.fake_http`

Invariantes:
    - Fixtures são determinísticas e isoladas por teste
"""

from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def resource_root(tmp_path: Path) -> Path:
    """Diretório usado como raiz de recursos (equivalente ao classpath)."""
    root = tmp_path / "resources"
    root.mkdir()
    return root


@pytest.fixture
def write_properties() -> Callable[..., Path]:
    """
    Fábrica de arquivos de propriedades.

    Uso:
        path = write_properties(directory, "app.properties", "a=1\\n")

    O conteúdo é gravado em UTF-8; diretórios intermediários são criados.
    """

    def _write(directory: Path, name: str, content: str) -> Path:
        path = directory / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def app_properties_text() -> str:
    """
    Arquivo de exemplo com chaves comuns e chaves com escopo de deployment.

    Com deployment `prod`, o resultado esperado é:
        - db.host = localhost
        - db.port = 5432 (a entrada `%dev.` é descartada)
    """
    return """\
# application defaults
db.host=localhost
%prod.db.port=5432
%dev.db.port=5433
"""
