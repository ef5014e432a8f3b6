# src/config_packager/core/collection/loader.py
"""
Fonte de itens de configuração baseada em exports YAML.

Este módulo lê um diretório de exports (`<nome>.yml`, um item por arquivo,
como produzido pela exportação de configuração da plataforma) e monta a
coleção de `ConfigurationItem` consumida pelo registry.

Regras de classificação (v1):
    - Um item pertence a um tipo de entidade quando seu nome começa com
      `<config_prefix>.` de algum `EntityTypeDefinition`
    - Itens sem prefixo conhecido são configuração simple (`system_simple`)
    - Para entidades, `short_name` é o nome sem o prefixo e `label` vem de
      `data.label` (ou do próprio id)
    - Para configuração simples, `short_name` e `label` são o próprio nome

Limites explícitos:
    - Não valida schema de configuração
    - Não atribui itens a pacotes
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import yaml  # PyYAML

from config_packager.core.exceptions import InvalidConfigItemError
from config_packager.core.types import SYSTEM_SIMPLE_CONFIG, ConfigurationItem

from .graph import build_dependents


SIMPLE_CONFIG_LABEL = "Simple configuration"


@dataclass(frozen=True)
class EntityTypeDefinition:
    """Metadados de um tipo de entidade de configuração."""
    id: str
    label: str
    config_prefix: str


def entity_types_from_settings(settings: Dict[str, Any]) -> List[EntityTypeDefinition]:
    raw = settings.get("entity_types") or []
    definitions: List[EntityTypeDefinition] = []
    for entry in raw:
        if not isinstance(entry, dict):
            raise ValueError("entity_types entries must be mappings")
        definitions.append(
            EntityTypeDefinition(
                id=str(entry["id"]),
                label=str(entry.get("label") or entry["id"]),
                config_prefix=str(entry["config_prefix"]),
            )
        )
    return definitions


def _natural_key(text: str) -> List[Any]:
    # ordenação natural, case-insensitive ("Item 2" < "item 10")
    return [int(part) if part.isdigit() else part for part in re.split(r"(\d+)", text.lower())]


class FileConfigSource:
    """
    Carrega a coleção de configuração a partir de um diretório de exports.

    Decisões arquiteturais:
        - Cada arquivo `*.yml` é um item; o nome do item é o nome do arquivo
          sem a extensão
        - Arquivos vazios são tratados como dados vazios
        - Raiz que não é mapa é erro explícito (`InvalidConfigItemError`)
    """

    def __init__(self, directory: Path | str, entity_types: Iterable[EntityTypeDefinition] = ()):
        self.directory = Path(directory)
        self.entity_types: Dict[str, EntityTypeDefinition] = {d.id: d for d in entity_types}

    def list_all(self) -> List[str]:
        if not self.directory.is_dir():
            return []
        return sorted(p.stem for p in self.directory.glob("*.yml"))

    def read(self, name: str) -> Dict[str, Any]:
        path = self.directory / f"{name}.yml"
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise InvalidConfigItemError(
                message=f"Falha ao ler item de configuração {name}",
                details={"name": name, "path": str(path), "error": str(e)},
            ) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise InvalidConfigItemError(
                message=f"Item de configuração {name} deve ser um mapa",
                details={"name": name, "received": type(data).__name__},
            )
        return data

    def get_config_types(self) -> Dict[str, str]:
        """Tipos de configuração: simples primeiro, depois entidades por label (natural)."""
        entity_types = sorted(self.entity_types.values(), key=lambda d: _natural_key(d.label))
        types = {SYSTEM_SIMPLE_CONFIG: SIMPLE_CONFIG_LABEL}
        types.update({d.id: d.label for d in entity_types})
        return types

    def _entity_type_for(self, name: str) -> Optional[EntityTypeDefinition]:
        for definition in self.entity_types.values():
            if name.startswith(definition.config_prefix + "."):
                return definition
        return None

    def get_config_by_type(self, config_type: str) -> Dict[str, str]:
        """Retorna `{short_name: label}` para um tipo de configuração."""
        names: Dict[str, str] = {}
        if config_type and config_type != SYSTEM_SIMPLE_CONFIG:
            definition = self.entity_types[config_type]
            prefix = definition.config_prefix + "."
            for name in self.list_all():
                if name.startswith(prefix):
                    entity_id = name[len(prefix):]
                    label = self.read(name).get("label") or entity_id
                    names[entity_id] = str(label)
        else:
            for name in self.list_all():
                if self._entity_type_for(name) is None:
                    names[name] = name
        return names

    def load_collection(self) -> Dict[str, ConfigurationItem]:
        """Carrega todos os itens e calcula as arestas reversas de dependência."""
        collection: Dict[str, ConfigurationItem] = {}
        for config_type in self.get_config_types():
            for short_name, label in self.get_config_by_type(config_type).items():
                if config_type != SYSTEM_SIMPLE_CONFIG:
                    name = self.entity_types[config_type].config_prefix + "." + short_name
                else:
                    name = short_name
                collection[name] = ConfigurationItem(
                    name=name,
                    short_name=short_name,
                    label=label,
                    type=config_type,
                    data=self.read(name),
                )
        return build_dependents(collection)

    def __call__(self) -> Dict[str, ConfigurationItem]:
        return self.load_collection()
