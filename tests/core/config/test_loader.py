# tests/core/config/test_loader.py
"""
Testes do carregador de settings (load_settings).

Este módulo valida o comportamento do loader responsável por:
- carregar o arquivo de defaults (empacotado ou explícito)
- carregar o arquivo local de override (opcional)
- validar estrutura mínima e seções exigidas pela geração
- rejeitar formatos e estados inválidos

Decisões arquiteturais:
    - Settings são declarativas e baseadas em arquivos
    - Defaults representam a base canônica do sistema
    - Settings locais atuam apenas como override explícito
    - Erros estruturais são tratados como falhas fatais

Invariantes:
    - As settings finais são sempre um dicionário
    - Nenhuma settings parcial é retornada em caso de erro

Limites explícitos:
    - Não valida semântica de atribuição
    - Não carrega itens de configuração
"""

import json
from pathlib import Path

import pytest

try:
    from config_packager.core.config.loader import load_settings, validate_settings
    from config_packager.core.config.errors import (
        DefaultsNotFoundError,
        InvalidSettingsError,
        InvalidSettingsRootTypeError,
        UnsupportedSettingsFormatError,
    )
except Exception as e:  # noqa: BLE001
    load_settings = None
    validate_settings = None
    DefaultsNotFoundError = None
    InvalidSettingsError = None
    InvalidSettingsRootTypeError = None
    UnsupportedSettingsFormatError = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que o loader de settings e suas exceções tipadas estejam disponíveis.

    Decisões arquiteturais:
        - Falha antecipada e explícita quando contratos do loader estão ausentes
        - Não tenta fallback nem implementação alternativa
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing loader/errors modules. Implement:\n"
            "- src/config_packager/core/config/loader.py (load_settings)\n"
            "- src/config_packager/core/config/errors.py (typed exceptions)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_packaged_defaults_are_valid():
    """
    Verifica que os defaults empacotados carregam e validam sem override.

    Invariantes:
        - O perfil padrão é `custom`
        - Os três métodos canônicos vêm habilitados
        - Tipos de entidade conhecidos estão presentes
    """
    _require_imports()
    out = load_settings()
    assert out["profile"]["machine_name"] == "custom"
    assert out["output"]["format"] == "yml"
    assert out["assignment"]["enabled"] == ["core", "base", "dependency"]
    assert "node_type" in out["assignment"]["base"]["types"]
    assert {e["id"] for e in out["entity_types"]} >= {"node_type", "field_config"}


def test_missing_defaults_raises(tmp_path: Path):
    _require_imports()
    with pytest.raises(DefaultsNotFoundError):
        load_settings(defaults_path=str(tmp_path / "missing.yaml"))


def test_missing_local_is_ok(tmp_path: Path, packager_settings_yaml):
    """
    Verifica que a ausência do arquivo local não é erro.

    Usado para garantir:
        - Experiência previsível quando não há overrides locais
    """
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text(packager_settings_yaml, encoding="utf-8")

    out = load_settings(defaults_path=str(defaults), local_path=str(tmp_path / "local.yaml"))
    assert out["profile"]["machine_name"] == "custom"
    assert out["assignment"]["core"]["types"] == ["field_storage_config"]


def test_load_defaults_and_local_yaml(tmp_path: Path, packager_settings_yaml):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    local = tmp_path / "local.yaml"
    defaults.write_text(packager_settings_yaml, encoding="utf-8")
    local.write_text(
        "profile:\n  machine_name: acme\n  name: Acme\nassignment:\n  enabled: [base]\n",
        encoding="utf-8",
    )

    out = load_settings(defaults_path=str(defaults), local_path=str(local))
    assert out["profile"]["machine_name"] == "acme"
    assert out["profile"]["name"] == "Acme"
    assert out["profile"]["use_base_profile"] is False
    assert out["assignment"]["enabled"] == ["base"]
    assert out["assignment"]["core"]["types"] == ["field_storage_config"]


def test_load_local_json(tmp_path: Path, packager_settings_yaml):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    local = tmp_path / "local.json"
    defaults.write_text(packager_settings_yaml, encoding="utf-8")
    local.write_text(json.dumps({"output": {"archive_directory": "/tmp/exports"}}), encoding="utf-8")

    out = load_settings(defaults_path=str(defaults), local_path=str(local))
    assert out["output"]["archive_directory"] == "/tmp/exports"


def test_invalid_root_type_raises(tmp_path: Path):
    """
    Verifica que o loader rejeita settings cujo conteúdo raiz não é um mapa.
    """
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(InvalidSettingsRootTypeError):
        load_settings(defaults_path=str(defaults))


def test_unsupported_extension_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.toml"
    defaults.write_text("a = 1\n", encoding="utf-8")
    with pytest.raises(UnsupportedSettingsFormatError):
        load_settings(defaults_path=str(defaults))


@pytest.mark.parametrize(
    "settings",
    [
        {},
        {"profile": {"machine_name": ""}},
        {"profile": {"machine_name": "custom"}, "output": {"format": "json"}},
        {"profile": {"machine_name": "custom"}, "assignment": {"enabled": "core"}},
    ],
)
def test_validate_settings_rejects_invalid_sections(settings):
    _require_imports()
    with pytest.raises(InvalidSettingsError):
        validate_settings(settings)
