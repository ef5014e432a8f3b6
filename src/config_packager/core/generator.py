# src/config_packager/core/generator.py
"""
Geração de pacotes e perfil: renderização + escrita + relatório.

Fluxo:
    1. `ArtifactRenderer.prepare_files(add_profile)` (pacotes antes do perfil)
    2. filtro opcional de pacotes por machine name
    3. escrita via `ArchiveWriter` ou `FilesystemWriter`
    4. cada resultado é registrado no log estruturado do contexto

Decisões arquiteturais:
    - Um filtro que não seleciona nenhum pacote equivale a "todos os pacotes"
    - Pacotes sem arquivos (sem itens atribuídos) não são escritos; um
      warning é registrado para cada um
    - O arquivo compactado é `<archive_directory>/<perfil>.tar.gz`
      (diretório temporário do sistema quando não configurado)
    - Na escrita em disco, o diretório base é `<write_root>/profiles` quando
      há perfil e `<write_root>/modules/custom` caso contrário

Limites explícitos:
    - Não executa métodos de atribuição
    - Não exibe mensagens ao usuário; apenas retorna e registra resultados
"""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from .context import GenerationContext
from .output.writers import ArchiveWriter, FilesystemWriter
from .registry import PackageRegistry
from .render.renderer import ArtifactRenderer
from .types import GenerateMethod, GenerationResult, Package


STEP_ID = "generate"


class PackageGenerator:
    """Gera pacotes (e opcionalmente o perfil) a partir do estado do registry."""

    def __init__(self, *, registry: PackageRegistry, ctx: GenerationContext):
        self.registry = registry
        self.ctx = ctx
        self.renderer = ArtifactRenderer(registry=registry, ctx=ctx)

    @property
    def archive_path(self) -> Path:
        directory = self.ctx.section("output").get("archive_directory") or tempfile.gettempdir()
        return Path(directory) / f"{self.registry.get_profile().machine_name}.tar.gz"

    def base_directory(self, add_profile: bool) -> Path:
        root = Path(self.ctx.section("output").get("write_root") or ".")
        return root / ("profiles" if add_profile else "modules/custom")

    def generate_packages(
        self,
        method: Union[GenerateMethod, str],
        package_names: Optional[Iterable[str]] = None,
    ) -> List[GenerationResult]:
        return self.generate(method, add_profile=False, package_names=package_names)

    def generate_profile(
        self,
        method: Union[GenerateMethod, str],
        package_names: Optional[Iterable[str]] = None,
    ) -> List[GenerationResult]:
        return self.generate(method, add_profile=True, package_names=package_names)

    def _select(self, package_names: Optional[Iterable[str]]) -> List[Package]:
        packages: Dict[str, Package] = self.registry.get_packages()
        names = list(package_names or [])
        selected = [packages[n] for n in packages if n in names] if names else []
        if not selected:
            selected = list(packages.values())

        writable: List[Package] = []
        for package in selected:
            if not package.files:
                self.ctx.add_warning(
                    step_id=STEP_ID,
                    message=f"Pacote {package.machine_name} sem configuração atribuída; ignorado",
                )
                continue
            writable.append(package)
        return writable

    def generate(
        self,
        method: Union[GenerateMethod, str],
        *,
        add_profile: bool = False,
        package_names: Optional[Iterable[str]] = None,
    ) -> List[GenerationResult]:
        """
        Gera a representação em arquivos dos pacotes e, opcionalmente, do perfil.

        Args:
            method: `archive` (tarball) ou `write` (sistema de arquivos).
            add_profile: Se o perfil de instalação deve ser gerado.
            package_names: Pacotes a gerar; vazio significa todos.

        Returns:
            List[GenerationResult]: Um resultado por perfil/pacote processado.

        Raises:
            ValueError: Se `method` não for um método de geração conhecido.
        """
        method = GenerateMethod(method)

        self.renderer.prepare_files(add_profile)
        packages = self._select(package_names)
        profile = self.registry.get_profile() if add_profile else None

        if method is GenerateMethod.ARCHIVE:
            results = ArchiveWriter(self.archive_path).write(packages, profile)
        else:
            results = FilesystemWriter(self.base_directory(add_profile)).write(packages, profile)

        for result in results:
            self.ctx.log(
                step_id=STEP_ID,
                level="notice" if result.success else "error",
                message=result.format_message(),
                method=method.value,
                template=result.message,
                variables=dict(result.variables),
            )
        return results
