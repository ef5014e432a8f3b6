"""
Renderização de pacotes e perfil em artefatos de arquivo (manifest +
dados de configuração), prontos para os writers de saída.
"""

from .manifest import BaseProfile
from .renderer import ArtifactRenderer

__all__ = ["ArtifactRenderer", "BaseProfile"]
