# src/config_packager/core/render/manifest.py
"""
Estratégias de manifest por variante de pacote.

O manifest (`<machine_name>.info.yml`) descreve identidade e dependências
de um pacote. Seu conteúdo comum é restrito às chaves:

    name, description, type, core, dependencies, themes

mais `package` (rótulo de agrupamento = nome do perfil) e, quando houver
itens atribuídos, `config_devel` (lista de itens, para ferramentas que
observam esses arquivos).

A parte específica de cada variante é resolvida por estratégia:
    - ModuleManifest  → prefixa machine name e nome com os do perfil
    - ProfileManifest → mescla dependências/temas do perfil base, se habilitado

Invariantes:
    - Chaves com valor vazio são removidas antes da serialização
    - Listas mescladas com o perfil base são ordenadas; `config_devel`
      preserva a ordem de atribuição
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Protocol, Tuple

from config_packager.core.types import Package, PackageType

from .serialization import decode_file


INFO_KEYS = ("name", "description", "type", "core", "dependencies", "themes")


@dataclass(frozen=True)
class BaseProfile:
    """Perfil base opcional cujos dados são incorporados ao perfil gerado."""
    machine_name: str
    name: str
    path: Path

    def file(self, extension: str) -> Path:
        return self.path / f"{self.machine_name}.{extension}"

    @property
    def info_file(self) -> Path:
        return self.file("info.yml")


def base_info(package: Package, profile: Package) -> Dict[str, Any]:
    info: Dict[str, Any] = {
        "name": package.name,
        "description": package.description,
        "type": package.type.value,
        "core": package.core,
        "dependencies": list(package.dependencies),
        "themes": list(package.themes),
    }
    info["package"] = profile.name
    if package.config:
        info["config_devel"] = list(package.config)
    return info


def drop_empty(info: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in info.items() if v}


class ManifestStrategy(Protocol):
    def apply(
        self, info: Dict[str, Any], package: Package, profile: Package
    ) -> Tuple[str, Dict[str, Any]]:
        """Retorna o machine name efetivo e o manifest ajustado."""
        ...


class ModuleManifest:
    def apply(self, info, package, profile):
        info["name"] = f"{profile.name} {info['name']}"
        return f"{profile.machine_name}_{package.machine_name}", info


class ProfileManifest:
    def __init__(self, base_profile: Optional[BaseProfile] = None):
        self.base_profile = base_profile

    def apply(self, info, package, profile):
        if self.base_profile is not None and self.base_profile.info_file.exists():
            base = decode_file(self.base_profile.info_file)
            for key in ("dependencies", "themes"):
                merged = set(info.get(key) or []) | set(base.get(key) or [])
                info[key] = sorted(merged)
        return package.machine_name, info


def strategies(base_profile: Optional[BaseProfile] = None) -> Dict[PackageType, ManifestStrategy]:
    return {
        PackageType.MODULE: ModuleManifest(),
        PackageType.PROFILE: ProfileManifest(base_profile),
    }
