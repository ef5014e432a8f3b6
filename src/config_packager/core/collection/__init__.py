"""
Coleção de configuração: carga a partir de exports, inventário de
extensões e cálculo do grafo de dependentes.
"""

from .extensions import list_extension_config, list_modules
from .graph import build_dependents
from .loader import EntityTypeDefinition, FileConfigSource, entity_types_from_settings

__all__ = [
    "build_dependents",
    "EntityTypeDefinition",
    "FileConfigSource",
    "entity_types_from_settings",
    "list_extension_config",
    "list_modules",
]
