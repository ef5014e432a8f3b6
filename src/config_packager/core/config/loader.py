# src/config_packager/core/config/loader.py
"""
Loader canônico de settings do Config Packager.

Este módulo é responsável por carregar, validar estruturalmente e resolver
as settings efetivas utilizadas em uma geração de pacotes.

As settings são resolvidas a partir de:
    - um arquivo de defaults (por padrão, o `packager.defaults.yaml` empacotado)
    - um arquivo local de overrides (opcional)

Responsabilidades do módulo:
    - Carregar arquivos de settings em YAML ou JSON
    - Validar requisitos estruturais mínimos (tipo raiz)
    - Resolver as settings finais via deep-merge determinístico
    - Validar as seções exigidas pela geração (perfil e saída)

Princípios fundamentais:
    - Settings são declarativas e explícitas
    - Erros estruturais são tratados como falhas fatais
    - A mesma entrada sempre produz as mesmas settings finais

Invariantes:
    - O arquivo de defaults é obrigatório
    - O resultado é sempre um dicionário puro (`dict`)
    - Overrides nunca mutam os defaults

Limites explícitos:
    - Não carrega itens de configuração da plataforma
    - Não interage com registry, renderer ou writers
"""

from pathlib import Path
from typing import Any, Dict, Optional
import json

import yaml  # PyYAML

from .merge import deep_merge
from .errors import (
    DefaultsNotFoundError,
    InvalidSettingsError,
    InvalidSettingsRootTypeError,
    UnsupportedSettingsFormatError,
)


DEFAULTS_PATH = Path(__file__).with_name("packager.defaults.yaml")

SUPPORTED_OUTPUT_FORMATS = {"yml"}


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de settings e valida sua estrutura básica.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)

    Decisões arquiteturais:
        - O arquivo deve existir no momento do carregamento
        - O conteúdo raiz deve ser um dicionário (`dict`)
        - Arquivos vazios são interpretados como dicionários vazios

    Args:
        path (Path): Caminho para o arquivo de settings.

    Returns:
        Dict[str, Any]: Conteúdo do arquivo carregado como dicionário.

    Raises:
        DefaultsNotFoundError: Se o arquivo não existir.
        UnsupportedSettingsFormatError: Se o formato do arquivo não for suportado.
        InvalidSettingsRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise DefaultsNotFoundError(f"Arquivo de settings não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedSettingsFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidSettingsRootTypeError(
            f"Settings root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def validate_settings(settings: Dict[str, Any]) -> Dict[str, Any]:
    """
    Valida as seções das settings exigidas pela geração.

    Regras (v1):
        - `profile.machine_name` é uma string não vazia
        - `output.format` é um formato de serialização suportado
        - `assignment.enabled` é uma lista de ids de método

    Raises:
        InvalidSettingsError: Se alguma regra for violada.
    """
    profile = settings.get("profile")
    if not isinstance(profile, dict):
        raise InvalidSettingsError("Settings sem seção 'profile'")

    machine_name = profile.get("machine_name")
    if not isinstance(machine_name, str) or not machine_name.strip():
        raise InvalidSettingsError("profile.machine_name deve ser uma string não vazia")

    output = settings.get("output") or {}
    fmt = output.get("format", "yml")
    if fmt not in SUPPORTED_OUTPUT_FORMATS:
        raise InvalidSettingsError(
            f"Formato de saída não suportado: {fmt!r}",
        )

    enabled = (settings.get("assignment") or {}).get("enabled", [])
    if not isinstance(enabled, list) or not all(isinstance(m, str) for m in enabled):
        raise InvalidSettingsError("assignment.enabled deve ser uma lista de strings")

    return settings


def load_settings(
    *,
    defaults_path: Optional[str] = None,
    local_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Carrega e resolve as settings efetivas de uma geração.

    Política de resolução:
        - Sem `defaults_path`, usa o arquivo de defaults empacotado
        - O arquivo local é opcional; quando presente, tem prioridade
        - A resolução utiliza `deep_merge` com política determinística

    Args:
        defaults_path (Optional[str]): Caminho para o arquivo de settings base.
        local_path (Optional[str]): Caminho opcional para overrides locais.

    Returns:
        Dict[str, Any]: Settings finais resolvidas e validadas.

    Raises:
        DefaultsNotFoundError: Se o arquivo de defaults não existir.
        UnsupportedSettingsFormatError: Se o formato do arquivo não for suportado.
        InvalidSettingsRootTypeError: Se o conteúdo não for um dicionário.
        SettingsTypeConflictError: Se ocorrer conflito estrutural durante o merge.
        InvalidSettingsError: Se as settings finais forem inválidas.
    """

    defaults_file = Path(defaults_path) if defaults_path is not None else DEFAULTS_PATH
    defaults = _load_file(defaults_file)

    effective = defaults

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            local = _load_file(local_file)
            effective = deep_merge(defaults, local)

    return validate_settings(effective)
