# src/config_packager/core/collection/extensions.py
"""Utilitários de inventário de módulos/extensões instalados."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Mapping, Optional, TypeVar

from config_packager.core.types import CONFIG_INSTALL_DIRECTORY


T = TypeVar("T")


def list_modules(
    modules: Mapping[str, T],
    name: Optional[str] = None,
    namespace: Optional[str] = None,
) -> Dict[str, T]:
    """
    Filtra a lista de módulos por nome exato e/ou prefixo de namespace.

    Sem filtros, retorna todos os módulos.
    """
    if not name and not namespace:
        return dict(modules)

    selected: Dict[str, T] = {}
    if name and name in modules:
        selected[name] = modules[name]
    if namespace:
        for module_name, extension in modules.items():
            if module_name.startswith(namespace):
                selected[module_name] = extension
    return selected


def list_extension_config(extension_path: Path | str) -> List[str]:
    """Nomes dos itens fornecidos por uma extensão em `config/install`."""
    config_path = Path(extension_path) / CONFIG_INSTALL_DIRECTORY
    if not config_path.is_dir():
        return []
    return sorted(p.stem for p in config_path.glob("*.yml"))
