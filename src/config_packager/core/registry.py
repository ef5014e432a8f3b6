# src/config_packager/core/registry.py
"""
Registro de pacotes e do estado de atribuição da coleção de configuração.

Este módulo define o `PackageRegistry`, o objeto de contexto explícito e de
dono único que mantém, durante uma geração:
    - a coleção de itens de configuração (com seu estado de atribuição)
    - o conjunto de pacotes a gerar (em ordem de criação)
    - o perfil de instalação (sempre presente)

Responsabilidades do módulo:
    - Inicializar pacotes de forma idempotente (`init_package`)
    - Inicializar o pacote `core` bem conhecido
    - Limpar atribuições sem recarregar a coleção (`reset`)
    - Expor acesso em massa à coleção e aos pacotes

Decisões arquiteturais:
    - Não existe estado global; cada geração possui seu próprio registry
    - A coleção é carregada sob demanda a partir de uma fonte opcional,
      apenas quando está vazia (carga única por geração)
    - Atualizações de itens reconstroem a entrada (`collection[name] = ...`)

Invariantes:
    - Um pacote inicializado nunca é sobrescrito por `init_package`
    - O perfil é sempre um `Package` com `type == PROFILE`

Limites explícitos:
    - Não decide atribuição (responsabilidade do AssignmentEngine)
    - Não renderiza arquivos
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Callable, Dict, Mapping, Optional

from .exceptions import UnknownPackageError
from .types import (
    DEFAULT_CORE_COMPATIBILITY,
    ConfigurationItem,
    Package,
    PackageType,
    make_package,
)


CORE_PACKAGE = "core"

ConfigSource = Callable[[], Mapping[str, ConfigurationItem]]


class PackageRegistry:
    """
    Registro canônico de pacotes, perfil e coleção de configuração.

    Decisões arquiteturais:
        - O perfil é inicializado a partir da seção `profile` das settings
        - A ordem de inserção dos pacotes é preservada
        - A fonte da coleção é injetável (loader externo ou testes)
    """

    def __init__(self, settings: Optional[Dict[str, Any]] = None, source: Optional[ConfigSource] = None):
        self.settings: Dict[str, Any] = settings or {}
        self._source = source
        self._collection: Dict[str, ConfigurationItem] = {}
        self._packages: Dict[str, Package] = {}
        self._profile: Package = self._init_profile()

    @property
    def core_compatibility(self) -> str:
        return str(self.settings.get("core") or DEFAULT_CORE_COMPATIBILITY)

    def _init_profile(self) -> Package:
        profile = self.settings.get("profile") or {}
        return make_package(
            profile.get("machine_name") or "custom",
            profile.get("name"),
            profile.get("description") or "",
            package_type=PackageType.PROFILE,
            core=self.core_compatibility,
        )

    # -----------------------------
    # Pacotes
    # -----------------------------
    def init_package(self, machine_name: str, name: Optional[str] = None, description: str = "") -> None:
        if machine_name not in self._packages:
            self._packages[machine_name] = make_package(
                machine_name, name, description, core=self.core_compatibility
            )

    def init_core_package(self) -> None:
        self.init_package(
            CORE_PACKAGE,
            "Core",
            "Provide core components required by other configuration modules.",
        )

    def has_package(self, machine_name: str) -> bool:
        return machine_name in self._packages

    def get_package(self, machine_name: str) -> Package:
        if machine_name not in self._packages:
            raise UnknownPackageError(
                message=f"Pacote não inicializado: {machine_name}",
                details={"package": machine_name},
                hint="Chame init_package() antes de atribuir itens ao pacote.",
            )
        return self._packages[machine_name]

    def get_packages(self) -> Dict[str, Package]:
        return self._packages

    def set_packages(self, packages: Mapping[str, Package]) -> None:
        self._packages = dict(packages)

    def get_profile(self) -> Package:
        return self._profile

    def set_profile(self, profile: Package) -> None:
        self._profile = profile

    # -----------------------------
    # Coleção de configuração
    # -----------------------------
    def set_source(self, source: Optional[ConfigSource]) -> None:
        """Troca a fonte da coleção; pacotes e coleção carregada são descartados."""
        self._source = source
        self._collection = {}
        self.reset()

    def get_config_collection(self) -> Dict[str, ConfigurationItem]:
        if not self._collection and self._source is not None:
            self._collection = dict(self._source())
        return self._collection

    def set_config_collection(self, collection: Mapping[str, ConfigurationItem]) -> None:
        self._collection = dict(collection)

    def get_item(self, name: str) -> Optional[ConfigurationItem]:
        return self.get_config_collection().get(name)

    def mark_assigned(self, name: str, package_name: str) -> None:
        collection = self.get_config_collection()
        collection[name] = replace(collection[name], package=package_name)

    def reset(self) -> None:
        """Remove todos os pacotes e limpa atribuições, sem recarregar a coleção."""
        self._packages = {}
        # acesso direto: reset não deve disparar a carga da coleção
        for name, item in list(self._collection.items()):
            if item.package is not None:
                self._collection[name] = replace(item, package=None)
