# tests/conftest.py
"""
Fixtures compartilhados para testes do Config Packager.

Este módulo define fixtures reutilizáveis que fornecem:
- settings mínimas e determinísticas (já resolvidas)
- contexto de geração controlado (GenerationContext)
- registry de pacotes isolado por teste
- fábrica de itens de configuração e coleções com dependentes calculados

O objetivo destas fixtures é permitir testes do core (registry, motor de
atribuição, renderer e writers) sem depender de exports reais de um site.

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas
    - `run_id` e `created_at` são fixos para garantir determinismo

Invariantes:
    - Nenhuma fixture executa atribuição ou geração
    - Nenhuma fixture realiza I/O
    - Cada teste recebe seu próprio registry

Limites explícitos:
    - Não substituir testes de integração (ver tests/e2e)
    - Não conter lógica de domínio
"""

import pytest
from datetime import datetime, timezone


# =====================================================
# Settings
# =====================================================

@pytest.fixture
def packager_settings_yaml() -> str:
    """
    YAML de settings semelhante a um arquivo de defaults real.

    Usado por:
        - Testes do loader de settings
        - Testes de deep-merge (defaults + local)

    Returns:
        str: Conteúdo YAML representando settings padrão.
    """
    return """\
profile:
  machine_name: custom
  name: Custom
  use_base_profile: false
output:
  format: yml
  archive_directory: null
assignment:
  enabled: [core, base, dependency]
  core:
    types: [field_storage_config]
"""


@pytest.fixture
def packager_settings() -> dict:
    """
    Settings mínimas e válidas, já resolvidas.

    Decisões arquiteturais:
        - Apenas chaves efetivamente utilizadas pelo core são incluídas
        - Perfil com machine name e nome explícitos para facilitar asserts
          de prefixação

    Returns:
        dict: Settings prontas para GenerationContext e PackageRegistry.
    """
    return {
        "profile": {
            "machine_name": "my_profile",
            "name": "My Profile",
            "description": "",
            "use_base_profile": False,
        },
        "core": "8.x",
        "output": {"format": "yml", "archive_directory": None, "write_root": "."},
        "assignment": {
            "enabled": ["core", "base", "dependency"],
            "base": {"types": ["node_type"]},
            "core": {"types": ["field_storage_config"]},
        },
        "entity_types": [
            {"id": "node_type", "label": "Content type", "config_prefix": "node.type"},
            {"id": "field_config", "label": "Field", "config_prefix": "field.field"},
            {"id": "field_storage_config", "label": "Field storage", "config_prefix": "field.storage"},
        ],
    }


# =====================================================
# Contexto + registry
# =====================================================

@pytest.fixture
def ctx(packager_settings):
    """
    GenerationContext determinístico para testes.

    Returns:
        GenerationContext: Contexto isolado, sem eventos prévios.
    """
    from config_packager.core.context import GenerationContext

    return GenerationContext(
        settings=packager_settings,
        run_id="run-test-001",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def registry(packager_settings):
    """Registry de pacotes vazio, com perfil derivado das settings."""
    from config_packager.core.registry import PackageRegistry

    return PackageRegistry(settings=packager_settings)


# =====================================================
# Itens de configuração
# =====================================================

@pytest.fixture
def make_item():
    """
    Fixture factory que cria `ConfigurationItem` com defaults convenientes.

    `config_deps` e `module_deps` são gravados em `data.dependencies`,
    exatamente como em um export real.

    Returns:
        Callable[..., ConfigurationItem]
    """
    from config_packager.core.types import SYSTEM_SIMPLE_CONFIG, ConfigurationItem

    def _make(
        name,
        *,
        short_name=None,
        label=None,
        type=SYSTEM_SIMPLE_CONFIG,
        data=None,
        config_deps=None,
        module_deps=None,
    ):
        payload = dict(data or {})
        dependencies = {}
        if config_deps:
            dependencies["config"] = list(config_deps)
        if module_deps:
            dependencies["module"] = list(module_deps)
        if dependencies:
            payload["dependencies"] = dependencies
        return ConfigurationItem(
            name=name,
            short_name=short_name if short_name is not None else name,
            label=label if label is not None else name,
            type=type,
            data=payload,
        )

    return _make


@pytest.fixture
def load_items(registry):
    """
    Instala itens no registry, calculando o grafo de dependentes.

    Returns:
        Callable[..., Dict[str, ConfigurationItem]]: coleção instalada.
    """
    from config_packager.core.collection.graph import build_dependents

    def _load(*items):
        collection = build_dependents({item.name: item for item in items})
        registry.set_config_collection(collection)
        return registry.get_config_collection()

    return _load


@pytest.fixture
def article_items(make_item):
    """
    Itens típicos de um tipo de conteúdo `article`:
    node type, field storage compartilhado e instância de campo.
    """
    return [
        make_item(
            "node.type.article",
            short_name="article",
            label="Article",
            type="node_type",
            module_deps=["node"],
            data={"uuid": "1111-aaaa", "type": "article", "name": "Article"},
        ),
        make_item(
            "field.storage.node.body",
            short_name="node.body",
            label="node.body",
            type="field_storage_config",
            module_deps=["node", "text"],
        ),
        make_item(
            "field.field.node.article.body",
            short_name="node.article.body",
            label="Body",
            type="field_config",
            config_deps=["field.storage.node.body", "node.type.article"],
            module_deps=["text"],
        ),
    ]


# =====================================================
# Métodos de atribuição
# =====================================================

@pytest.fixture
def DummyMethod():
    """
    Fixture factory que fornece um método de atribuição mínimo e duck-typed.

    A implementação retornada:
    - respeita o protocolo `AssignmentMethod` (sem herança)
    - registra a própria aplicação no contexto (`applied`)
    - não atribui nenhum item

    Usado por:
        - Testes de planner (ordenação, dependências)
        - Testes do MethodRegistry e do Assigner

    Returns:
        type: Classe _DummyMethod que pode ser instanciada pelos testes.
    """

    class _DummyMethod:
        def __init__(self, method_id: str = "dummy", depends_on=None):
            self.id = method_id
            self.depends_on = depends_on or []

        def apply(self, engine, ctx):
            ctx.log(step_id=self.id, level="info", message="applied")

    return _DummyMethod
