# tests/core/sources/test_source_descriptors.py
"""
Testes dos descritores de fontes externas.

Os testes garantem que:
- listas separadas por vírgula são aparadas e entradas vazias ignoradas
- `externalConfig.fileName` ausente usa `/<deployment_id>.properties`
- chave presente porém vazia é no-op (sem nome padrão)
- a ordem das passadas é fixa
"""

from extconfig.core.sources.descriptors import (
    PASS_ORDER,
    SourceKind,
    read_descriptor,
    split_locations,
)


def test_split_locations_trims_and_skips_blanks():
    assert split_locations(" a.properties , ,b.properties,") == ("a.properties", "b.properties")
    assert split_locations("") == ()
    assert split_locations(None) == ()


def test_pass_order_is_relative_absolute_url():
    assert PASS_ORDER == (SourceKind.RELATIVE_FILE, SourceKind.ABSOLUTE_FILE, SourceKind.URL)


def test_missing_file_name_defaults_to_deployment_file():
    descriptor = read_descriptor({}, SourceKind.RELATIVE_FILE, "prod")

    assert descriptor.locations == ("/prod.properties",)
    assert descriptor.defaulted is True
    assert descriptor.key == "externalConfig.fileName"


def test_empty_file_name_is_not_defaulted():
    descriptor = read_descriptor({"externalConfig.fileName": ""}, SourceKind.RELATIVE_FILE, "prod")

    assert descriptor.is_empty
    assert descriptor.defaulted is False


def test_absolute_and_url_descriptors_have_no_default():
    assert read_descriptor({}, SourceKind.ABSOLUTE_FILE, "prod").is_empty
    assert read_descriptor({}, SourceKind.URL, "prod").is_empty


def test_url_descriptor_reads_its_key():
    configuration = {"externalConfig.URL": "https://a/x.properties,http://b/y.properties"}

    descriptor = read_descriptor(configuration, SourceKind.URL, "prod")

    assert descriptor.locations == ("https://a/x.properties", "http://b/y.properties")
