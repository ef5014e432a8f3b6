# src/config_packager/core/output/writers.py
"""
Writers de saída: arquivo compactado (`.tar.gz`) e sistema de arquivos.

Ambos consomem a mesma estrutura renderizada (pacote → arquivos) e
retornam um `GenerationResult` por pacote/perfil, na ordem processada.

Política de falhas (v1):
    - Uma falha em um arquivo interrompe os arquivos restantes daquele
      pacote e produz um resultado de falha para o pacote inteiro
    - Arquivos já gravados do pacote não são revertidos (entrada parcial
      no tarball ou arquivos soltos no disco são risco aceito)
    - Nenhuma falha de I/O atravessa a fronteira do writer; sucesso parcial
      entre pacotes é esperado e reportado item a item

Limites explícitos:
    - Não renderiza arquivos
    - Não filtra pacotes
"""

from __future__ import annotations

import io
import tarfile
import time
from pathlib import Path
from typing import Iterable, List, Optional

from config_packager.core.exceptions import (
    ArchiveWriteError,
    DirectoryCreateError,
    FileWriteError,
)
from config_packager.core.results import (
    archive_failure,
    archive_success,
    write_failure,
    write_success,
)
from config_packager.core.types import FileArtifact, GenerationResult, Package


class ArchiveWriter:
    """Grava pacotes em um único arquivo `.tar.gz` (truncado a cada escrita)."""

    def __init__(self, archive_path: Path | str):
        self.archive_path = Path(archive_path)

    def _add_file(self, archive: tarfile.TarFile, artifact: FileArtifact) -> None:
        payload = artifact.contents.encode("utf-8")
        info = tarfile.TarInfo(name=artifact.filename)
        info.size = len(payload)
        info.mtime = int(time.time())
        info.mode = 0o644
        try:
            archive.addfile(info, io.BytesIO(payload))
        except (OSError, tarfile.TarError, ValueError) as e:
            raise ArchiveWriteError(
                message=f"Falha ao arquivar {Path(artifact.filename).name}",
                details={"filename": artifact.filename, "error": str(e)},
            ) from e

    def _archive_package(self, archive: tarfile.TarFile, package: Package) -> GenerationResult:
        try:
            for artifact in package.files.values():
                self._add_file(archive, artifact)
        except ArchiveWriteError as e:
            return archive_failure(package=package, error=e)
        return archive_success(package=package)

    def write(self, packages: Iterable[Package], profile: Optional[Package] = None) -> List[GenerationResult]:
        ordered = ([profile] if profile is not None else []) + list(packages)

        try:
            self.archive_path.parent.mkdir(parents=True, exist_ok=True)
            # remove a versão anterior do arquivo exportado
            if self.archive_path.exists():
                self.archive_path.unlink()
            archive = tarfile.open(self.archive_path, "w:gz")
        except (OSError, tarfile.TarError) as e:
            error = ArchiveWriteError(
                message=f"Falha ao abrir {self.archive_path}",
                details={"archive": str(self.archive_path), "error": str(e)},
            )
            return [archive_failure(package=p, error=error) for p in ordered]

        with archive:
            return [self._archive_package(archive, package) for package in ordered]


class FilesystemWriter:
    """Grava arquivos de pacotes sob um diretório base, criando a árvore necessária."""

    def __init__(self, base_directory: Path | str):
        self.base_directory = Path(base_directory)

    def _write_file(self, artifact: FileArtifact) -> None:
        target = self.base_directory / artifact.filename
        directory = target.parent
        if not directory.is_dir():
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise DirectoryCreateError(
                    message=f"Falha ao criar diretório {directory}",
                    details={"directory": str(directory), "error": str(e)},
                    hint="Verifique as permissões do diretório base de escrita.",
                ) from e
        try:
            target.write_text(artifact.contents, encoding="utf-8")
        except OSError as e:
            raise FileWriteError(
                message=f"Falha ao gravar arquivo {target.name}",
                details={"filename": artifact.filename, "error": str(e)},
            ) from e

    def _package_directory(self, package: Package) -> str:
        info = package.files.get("info")
        relative = Path(info.filename).parent if info is not None else Path(package.machine_name)
        return (self.base_directory / relative).as_posix()

    def _write_package(self, package: Package) -> GenerationResult:
        directory = self._package_directory(package)
        try:
            for artifact in package.files.values():
                self._write_file(artifact)
        except (DirectoryCreateError, FileWriteError) as e:
            return write_failure(package=package, directory=directory, error=e, hint=e.hint)
        return write_success(package=package, directory=directory)

    def write(self, packages: Iterable[Package], profile: Optional[Package] = None) -> List[GenerationResult]:
        ordered = ([profile] if profile is not None else []) + list(packages)
        return [self._write_package(package) for package in ordered]

