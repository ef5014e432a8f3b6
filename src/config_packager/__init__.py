# src/config_packager/__init__.py
"""
Config Packager — particionamento de configuração em pacotes instaláveis.

Este pacote raiz define o namespace público do Config Packager, que divide
uma coleção plana de itens de configuração de uma plataforma de conteúdo
em pacotes coesos e instaláveis de forma independente, e os serializa em
manifests e arquivos de dados gravados em disco ou em um arquivo compactado.

Arquitetura em alto nível:
    - core.config     → carregamento, merge e validação de settings
    - core.collection → carga de exports e grafo de dependentes
    - core.registry   → pacotes, perfil e estado de atribuição
    - core.assignment → motor e métodos de atribuição
    - core.render     → manifests e arquivos de configuração
    - core.output     → writers (tarball e sistema de arquivos)
    - core.generator  → orquestração da geração

Limites explícitos:
    - Não valida schema de configuração
    - Não resolve conflitos entre instalações
    - Não instala nem ativa os pacotes gerados
"""

from .core.context import GenerationContext
from .core.generator import PackageGenerator
from .core.registry import PackageRegistry
from .core.types import GenerateMethod, PackageType

__all__ = [
    "GenerationContext",
    "GenerateMethod",
    "PackageGenerator",
    "PackageRegistry",
    "PackageType",
]
