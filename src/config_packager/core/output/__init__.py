"""Writers de saída (arquivo compactado e sistema de arquivos)."""

from .writers import ArchiveWriter, FilesystemWriter

__all__ = ["ArchiveWriter", "FilesystemWriter"]
