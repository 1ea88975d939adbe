# tests/core/config/test_host_config_loader.py
"""
Testes do loader da configuração base do host (load_host_configuration).

Este módulo valida o comportamento do loader responsável por:
- carregar o arquivo de defaults (YAML, JSON ou .properties)
- aplicar o arquivo local opcional via deep-merge
- achatar o resultado em um mapa plano `str -> str`
- rejeitar formatos e estados inválidos

Decisões arquiteturais:
    - A configuração base é obrigatória e fatal quando inválida
    - Configuração local atua apenas como override explícito

Invariantes:
    - O resultado é sempre um dict plano de strings
    - Nenhuma configuração parcial é retornada em caso de erro
"""

import pytest
from pathlib import Path

try:
    from extconfig.core.config.loader import flatten_config, load_host_configuration
    from extconfig.core.config.errors import (
        DefaultsNotFoundError,
        InvalidConfigRootTypeError,
        UnsupportedConfigFormatError,
    )
except Exception as e:  # noqa: BLE001
    load_host_configuration = None
    flatten_config = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que o loader e suas exceções tipadas estejam disponíveis.

    Falha imediatamente, com mensagem direcionada, quando o módulo
    `loader` ou as exceções de `errors` não podem ser importados.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing loader/errors modules. Implement:\n"
            "- src/extconfig/core/config/loader.py (load_host_configuration)\n"
            "- src/extconfig/core/config/errors.py (typed exceptions)\n"
            f"Import error: {_IMPORT_ERR}"
        )


DEFAULTS_YAML = """\
application:
  name: shop
externalConfig:
  fileName:
    - /common.properties
    - /prod.properties
db:
  pool: 5
  ssl: true
  password:
"""

LOCAL_YAML = """\
db:
  pool: 20
externalConfig:
  URL: https://config.internal/shop.properties
"""


def test_missing_defaults_raises(tmp_path: Path):
    _require_imports()
    with pytest.raises(DefaultsNotFoundError):
        load_host_configuration(defaults_path=str(tmp_path / "application.yaml"))


def test_yaml_defaults_are_flattened(tmp_path: Path):
    """
    Verifica o achatamento da configuração base YAML.

    Seções aninhadas viram chaves pontuadas; booleanos, null e listas
    seguem a política de renderização do loader.
    """
    _require_imports()
    defaults = tmp_path / "application.yaml"
    defaults.write_text(DEFAULTS_YAML, encoding="utf-8")

    out = load_host_configuration(defaults_path=str(defaults))

    assert out == {
        "application.name": "shop",
        "externalConfig.fileName": "/common.properties,/prod.properties",
        "db.pool": "5",
        "db.ssl": "true",
        "db.password": "",
    }


def test_local_overrides_defaults(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "application.yaml"
    defaults.write_text(DEFAULTS_YAML, encoding="utf-8")
    local = tmp_path / "application.local.yml"
    local.write_text(LOCAL_YAML, encoding="utf-8")

    out = load_host_configuration(defaults_path=str(defaults), local_path=str(local))

    assert out["db.pool"] == "20"
    assert out["db.ssl"] == "true"
    assert out["externalConfig.URL"] == "https://config.internal/shop.properties"
    assert out["externalConfig.fileName"] == "/common.properties,/prod.properties"


def test_missing_local_is_ok(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "application.yaml"
    defaults.write_text(DEFAULTS_YAML, encoding="utf-8")

    out = load_host_configuration(
        defaults_path=str(defaults),
        local_path=str(tmp_path / "missing.yaml"),
    )

    assert out["db.pool"] == "5"


def test_json_and_properties_formats(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "application.json"
    defaults.write_text('{"app": {"id": "shop", "debug": false}}', encoding="utf-8")
    local = tmp_path / "application.properties"
    local.write_text("app.owner=payments\n", encoding="utf-8")

    out = load_host_configuration(defaults_path=str(defaults), local_path=str(local))

    assert out == {"app.id": "shop", "app.debug": "false", "app.owner": "payments"}


def test_empty_yaml_is_empty_config(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "application.yaml"
    defaults.write_text("", encoding="utf-8")

    assert load_host_configuration(defaults_path=str(defaults)) == {}


def test_unsupported_format_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "application.toml"
    defaults.write_text("a = 1\n", encoding="utf-8")

    with pytest.raises(UnsupportedConfigFormatError):
        load_host_configuration(defaults_path=str(defaults))


def test_non_mapping_root_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "application.yaml"
    defaults.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(InvalidConfigRootTypeError):
        load_host_configuration(defaults_path=str(defaults))


def test_flatten_config_nested_lists_and_scalars():
    _require_imports()
    out = flatten_config({"a": {"b": {"c": 1.5}}, "hosts": ["x", "y"], "on": True})

    assert out == {"a.b.c": "1.5", "hosts": "x,y", "on": "true"}
