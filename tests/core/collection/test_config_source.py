# tests/core/collection/test_config_source.py
"""
Testes da fonte de itens baseada em exports YAML (FileConfigSource).

Este módulo valida:
- listagem e leitura de exports `<nome>.yml`
- classificação de itens em configuração simples e tipos de entidade
- ordenação dos tipos de configuração
- carga da coleção com dependentes calculados
- rejeição explícita de exports inválidos

Decisões arquiteturais:
    - Exports são materializados em `tmp_path`, nunca em diretórios reais
"""

from pathlib import Path

import pytest

try:
    from config_packager.core.collection.loader import (
        EntityTypeDefinition,
        FileConfigSource,
        entity_types_from_settings,
    )
    from config_packager.core.exceptions import InvalidConfigItemError
    from config_packager.core.types import SYSTEM_SIMPLE_CONFIG
except Exception as e:  # noqa: BLE001
    EntityTypeDefinition = None
    FileConfigSource = None
    entity_types_from_settings = None
    InvalidConfigItemError = None
    SYSTEM_SIMPLE_CONFIG = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que o loader da coleção esteja disponível para os testes.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing collection loader. Implement:\n"
            "- src/config_packager/core/collection/loader.py (FileConfigSource)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def _export(directory: Path, name: str, body: str) -> None:
    (directory / f"{name}.yml").write_text(body, encoding="utf-8")


@pytest.fixture
def export_dir(tmp_path: Path) -> Path:
    _export(tmp_path, "node.type.article", "type: article\nname: Article\nlabel: Article\n")
    _export(
        tmp_path,
        "field.field.node.article.body",
        "label: Body\ndependencies:\n  config:\n    - node.type.article\n  module:\n    - text\n",
    )
    _export(tmp_path, "system.site", "name: Example\n")
    _export(tmp_path, "system.empty", "")
    return tmp_path


@pytest.fixture
def source(export_dir, packager_settings):
    return FileConfigSource(export_dir, entity_types_from_settings(packager_settings))


def test_list_all_is_sorted(source):
    _require_imports()
    assert source.list_all() == [
        "field.field.node.article.body",
        "node.type.article",
        "system.empty",
        "system.site",
    ]


def test_config_types_simple_first_then_natural_label_order(tmp_path: Path):
    """
    Verifica a ordem dos tipos de configuração.

    Invariantes:
        - Configuração simples sempre primeiro
        - Tipos de entidade ordenados por label, de forma natural e
          sem diferenciar maiúsculas
    """
    _require_imports()
    source = FileConfigSource(
        tmp_path,
        [
            EntityTypeDefinition("b", "item 10", "b"),
            EntityTypeDefinition("a", "Item 2", "a"),
            EntityTypeDefinition("c", "apple", "c"),
        ],
    )
    assert list(source.get_config_types()) == [SYSTEM_SIMPLE_CONFIG, "c", "a", "b"]


def test_get_config_by_type(source):
    _require_imports()
    assert source.get_config_by_type("node_type") == {"article": "Article"}
    assert source.get_config_by_type("field_storage_config") == {}
    assert source.get_config_by_type(SYSTEM_SIMPLE_CONFIG) == {
        "system.empty": "system.empty",
        "system.site": "system.site",
    }


def test_load_collection_builds_items_and_dependents(source):
    """
    Verifica a carga completa da coleção.

    Invariantes:
        - Nome de entidade = `<config_prefix>.<id>`
        - `short_name` de entidade exclui o prefixo
        - Dependentes calculados a partir de `dependencies.config`
        - Export vazio vira dados vazios
    """
    _require_imports()
    collection = source.load_collection()

    assert set(collection) == {
        "node.type.article",
        "field.field.node.article.body",
        "system.site",
        "system.empty",
    }
    article = collection["node.type.article"]
    assert article.type == "node_type"
    assert article.short_name == "article"
    assert article.label == "Article"
    assert article.dependents == ["field.field.node.article.body"]

    body = collection["field.field.node.article.body"]
    assert body.short_name == "node.article.body"
    assert body.label == "Body"
    assert body.declared_dependencies("module") == ["text"]

    assert collection["system.site"].type == SYSTEM_SIMPLE_CONFIG
    assert collection["system.empty"].data == {}
    assert all(item.package is None for item in collection.values())


def test_source_is_callable(source):
    _require_imports()
    assert source() == source.load_collection()


def test_non_mapping_root_raises(tmp_path: Path):
    _require_imports()
    _export(tmp_path, "system.broken", "- a\n- b\n")
    source = FileConfigSource(tmp_path)
    with pytest.raises(InvalidConfigItemError):
        source.read("system.broken")


def test_unreadable_yaml_raises(tmp_path: Path):
    _require_imports()
    _export(tmp_path, "system.broken", "a: [unclosed\n")
    with pytest.raises(InvalidConfigItemError):
        FileConfigSource(tmp_path).read("system.broken")


def test_missing_directory_lists_nothing(tmp_path: Path):
    _require_imports()
    assert FileConfigSource(tmp_path / "nope").list_all() == []


def test_entity_types_from_settings_rejects_non_mappings():
    _require_imports()
    with pytest.raises(ValueError):
        entity_types_from_settings({"entity_types": ["node_type"]})
