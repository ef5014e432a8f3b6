# src/config_packager/core/types.py
"""
Tipos canônicos do Config Packager.

Este módulo define os registros e enums fundamentais que padronizam a
comunicação entre o registry de pacotes, o motor de atribuição, o renderer
de artefatos e os writers de saída.

Os tipos aqui definidos representam:
    - itens de configuração e seu estado de atribuição
    - pacotes (módulos) e o perfil de instalação
    - artefatos de arquivo renderizados
    - resultados de geração reportados ao chamador

Componentes principais:
    - PackageType       → enum de variantes de pacote (MODULE, PROFILE)
    - GenerateMethod    → enum de destinos de saída (ARCHIVE, WRITE)
    - ConfigurationItem → registro imutável de um item de configuração
    - FileArtifact      → arquivo renderizado (nome + conteúdo)
    - Package           → agregado mutável de metadados + itens + arquivos
    - GenerationResult  → resultado estruturado por pacote/perfil

Invariantes:
    - Enums possuem valores textuais canônicos
    - ConfigurationItem é imutável; atualizações reconstroem a entrada
    - `Package.config` nunca contém o mesmo nome duas vezes

Limites explícitos:
    - Não executa atribuição
    - Não renderiza arquivos
    - Não realiza I/O

Este módulo existe para garantir consistência e clareza semântica
entre as camadas do Config Packager.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


# Tipo sentinela para configuração simples (não associada a entidade).
SYSTEM_SIMPLE_CONFIG = "system_simple"

# Diretório canônico de instalação de configuração dentro de um módulo.
CONFIG_INSTALL_DIRECTORY = "config/install"

# Compatibilidade de core padrão declarada nos manifests.
DEFAULT_CORE_COMPATIBILITY = "8.x"


class PackageType(str, Enum):
    """
    Variantes de pacote gerado.

    Tipos definidos:
        - MODULE: pacote instalável comum (um módulo de configuração)
        - PROFILE: perfil de instalação, raiz do produto gerado

    Decisões arquiteturais:
        - A variante seleciona a estratégia de renderização do manifest
        - O valor textual é usado diretamente no manifest (`type`)
    """
    MODULE = "module"
    PROFILE = "profile"


class GenerateMethod(str, Enum):
    """Destinos de saída suportados pela geração."""
    ARCHIVE = "archive"
    WRITE = "write"


@dataclass(frozen=True)
class ConfigurationItem:
    """
    Item de configuração carregado da plataforma.

    Campos:
        - name: identificador global único
        - short_name: sufixo local usado em casamento de padrões
        - label: nome legível
        - type: id do tipo de entidade ou `SYSTEM_SIMPLE_CONFIG`
        - data: payload opaco (pode conter `dependencies.module/config`)
        - dependents: nomes dos itens que declararam dependência deste
        - package: machine name do pacote dono (None = não atribuído)

    Decisões arquiteturais:
        - O registro é imutável; o registry reconstrói a entrada via
          `dataclasses.replace` em vez de mutar aliases
        - `dependents` é calculado uma vez por carga da coleção

    Invariantes:
        - `package`, uma vez definido, só volta a None via reset
    """
    name: str
    short_name: str = ""
    label: str = ""
    type: str = SYSTEM_SIMPLE_CONFIG
    data: Dict[str, Any] = field(default_factory=dict)
    dependents: List[str] = field(default_factory=list)
    package: Optional[str] = None

    @property
    def is_assigned(self) -> bool:
        return bool(self.package)

    @property
    def is_entity(self) -> bool:
        return self.type != SYSTEM_SIMPLE_CONFIG

    def declared_dependencies(self, kind: str) -> List[str]:
        """Retorna `data.dependencies.<kind>` como lista (vazia se ausente)."""
        deps = (self.data or {}).get("dependencies") or {}
        if not isinstance(deps, dict):
            return []
        values = deps.get(kind) or []
        return list(values) if isinstance(values, (list, tuple)) else []


@dataclass(frozen=True)
class FileArtifact:
    """Arquivo renderizado pronto para saída."""
    filename: str
    contents: str


@dataclass
class Package:
    """
    Agregado de um pacote (ou do perfil) a ser gerado.

    Campos:
        - machine_name: identificador curto único
        - name, description: textos legíveis
        - type: variante (`PackageType`)
        - core: compatibilidade de core declarada no manifest
        - dependencies: módulos requeridos (ordenados, sem duplicatas)
        - themes: temas (apenas perfil)
        - config: nomes de itens atribuídos, em ordem de atribuição
        - files: artefatos renderizados, por chave lógica

    Decisões arquiteturais:
        - O pacote é mutável durante atribuição e renderização
        - `files` é reconstruído a cada renderização

    Limites explícitos:
        - Não decide atribuição
        - Não serializa a si mesmo
    """
    machine_name: str
    name: str
    description: str
    type: PackageType = PackageType.MODULE
    core: str = DEFAULT_CORE_COMPATIBILITY
    dependencies: List[str] = field(default_factory=list)
    themes: List[str] = field(default_factory=list)
    config: List[str] = field(default_factory=list)
    files: Dict[str, FileArtifact] = field(default_factory=dict)

    def add_dependencies(self, modules: List[str]) -> None:
        for module in modules:
            if module not in self.dependencies:
                self.dependencies.append(module)


def default_package_name(machine_name: str, name: Optional[str] = None) -> str:
    """Nome legível padrão derivado do machine name (`my_pkg` → `My Pkg`)."""
    if name:
        return name
    words = machine_name.replace("_", " ").split(" ")
    return " ".join(w[:1].upper() + w[1:] for w in words)


def make_package(
    machine_name: str,
    name: Optional[str] = None,
    description: str = "",
    package_type: PackageType = PackageType.MODULE,
    core: str = DEFAULT_CORE_COMPATIBILITY,
) -> Package:
    """Cria um pacote (ou perfil) com nome e descrição padrão quando ausentes."""
    name = default_package_name(machine_name, name)
    description = description or f"{name} configuration."
    return Package(
        machine_name=machine_name,
        name=name,
        description=description,
        type=package_type,
        core=core,
    )


@dataclass(frozen=True)
class GenerationResult:
    """
    Resultado da escrita de um pacote ou perfil.

    Campos:
        - success: indica se todos os arquivos foram gravados
        - message: template da mensagem (placeholders `{nome}`)
        - variables: substituições do template
    """
    success: bool
    message: str
    variables: Dict[str, Any] = field(default_factory=dict)

    def format_message(self) -> str:
        return self.message.format(**self.variables)
