# src/config_packager/core/render/renderer.py
"""
Renderer de artefatos: transforma pacotes e perfil em arquivos nomeados.

Layout gerado (formato `yml`):
    - pacote:  `<perfil>_<pacote>/<perfil>_<pacote>.info.yml`
               `<perfil>_<pacote>/config/install/<item>.yml`
    - perfil:  `<perfil>/<perfil>.info.yml`
               `<perfil>/<perfil>.install`, `<perfil>/<perfil>.profile` (opcionais)
    - com perfil, arquivos de pacote são aninhados em
      `<perfil>/modules/custom/...`

Decisões arquiteturais:
    - Arquivos de pacote são renderizados antes dos do perfil, pois o perfil
      reescreve os caminhos já produzidos (dependência de correção)
    - Cada renderização parte de `files` vazio; repetir `prepare_files`
      produz o mesmo resultado (sem aninhamento duplo)
    - O identificador único de instância (`uuid`) é removido apenas de
      itens baseados em entidade

Limites explícitos:
    - Não grava arquivos (responsabilidade dos writers)
    - Não altera atribuições
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, Optional

from config_packager.core.context import GenerationContext
from config_packager.core.registry import PackageRegistry
from config_packager.core.types import CONFIG_INSTALL_DIRECTORY, FileArtifact, Package

from .manifest import BaseProfile, base_info, drop_empty, strategies
from .serialization import encode


STEP_ID = "render"

PROFILE_FILE_EXTENSIONS = ("install", "profile")


class ArtifactRenderer:
    """Renderiza manifests e arquivos de configuração dos pacotes do registry."""

    def __init__(self, *, registry: PackageRegistry, ctx: GenerationContext):
        self.registry = registry
        self.ctx = ctx
        self.format = str(ctx.section("output").get("format") or "yml")
        self.base_profile = self._base_profile()
        self.strategies = strategies(self.base_profile)

    def _base_profile(self) -> Optional[BaseProfile]:
        if not self.ctx.section("profile").get("use_base_profile"):
            return None
        base = self.ctx.section("base_profile")
        machine_name = base.get("machine_name") or "standard"
        return BaseProfile(
            machine_name=machine_name,
            name=base.get("name") or machine_name.capitalize(),
            path=Path(base.get("path") or "."),
        )

    @property
    def profile(self) -> Package:
        return self.registry.get_profile()

    # -----------------------------
    # Manifest
    # -----------------------------
    def add_info_file(self, package: Package) -> None:
        info = base_info(package, self.profile)
        machine_name, info = self.strategies[package.type].apply(info, package, self.profile)
        package.files["info"] = FileArtifact(
            filename=f"{machine_name}/{machine_name}.info.{self.format}",
            contents=encode(drop_empty(info)),
        )

    # -----------------------------
    # Pacotes
    # -----------------------------
    def _item_data(self, name: str) -> Dict[str, Any]:
        item = self.registry.get_config_collection()[name]
        data = dict(item.data or {})
        if item.is_entity:
            # uuid é específico da instância do site
            data.pop("uuid", None)
        return data

    def add_package_files(self) -> None:
        profile_mn = self.profile.machine_name
        for package in self.registry.get_packages().values():
            package.files = {}
            if not package.config:
                continue
            self.add_info_file(package)
            for name in package.config:
                package.files[name] = FileArtifact(
                    filename=(
                        f"{profile_mn}_{package.machine_name}/"
                        f"{CONFIG_INSTALL_DIRECTORY}/{name}.{self.format}"
                    ),
                    contents=encode(self._item_data(name)),
                )
            self.ctx.log(
                step_id=STEP_ID,
                level="info",
                message="package files rendered",
                package=package.machine_name,
                files=len(package.files),
            )

    # -----------------------------
    # Perfil
    # -----------------------------
    def add_profile_files(self) -> None:
        profile = self.profile
        prefix = f"{profile.machine_name}/modules/custom/"

        packages = self.registry.get_packages()
        for package in packages.values():
            package.files = {
                file_key: replace(artifact, filename=prefix + artifact.filename)
                for file_key, artifact in package.files.items()
            }

        profile.files = {}
        self.add_info_file(profile)

        if self.base_profile is not None:
            for extension in PROFILE_FILE_EXTENSIONS:
                source = self.base_profile.file(extension)
                if not source.exists():
                    continue
                contents = source.read_text(encoding="utf-8")
                contents = contents.replace(self.base_profile.machine_name, profile.machine_name)
                contents = contents.replace(self.base_profile.name, profile.name)
                profile.files[extension] = FileArtifact(
                    filename=f"{profile.machine_name}/{profile.machine_name}.{extension}",
                    contents=contents,
                )

        self.registry.set_profile(profile)
        self.ctx.log(
            step_id=STEP_ID,
            level="info",
            message="profile files rendered",
            profile=profile.machine_name,
            files=sorted(profile.files),
        )

    def prepare_files(self, add_profile: bool = False) -> None:
        # pacotes primeiro: o perfil reescreve seus caminhos
        self.add_package_files()
        if add_profile:
            self.add_profile_files()
