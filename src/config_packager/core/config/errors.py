# src/config_packager/core/config/errors.py
"""
Exceções canônicas da camada de settings do Config Packager.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento, validação estrutural e resolução das settings de geração
(perfil, perfil base, saída e métodos de atribuição).

As exceções aqui definidas representam **violações estruturais
explícitas**, e não falhas de escrita de pacotes.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Mensagens de erro são claras e direcionadas ao usuário

Invariantes:
    - Todas as exceções de settings herdam de `SettingsError`
    - Nenhuma exceção aqui representa falha de I/O de pacote

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende de registry, renderer ou writers
"""


class SettingsError(Exception):
    """
    Exceção base para erros relacionados às settings do Config Packager.

    Todas as exceções levantadas durante carregamento, validação estrutural
    e resolução de settings devem herdar desta classe.
    """


class DefaultsNotFoundError(SettingsError):
    """
    Exceção levantada quando o arquivo de settings base (defaults)
    não é encontrado no caminho especificado.

    Decisões arquiteturais:
        - O arquivo de defaults é obrigatório
        - Não há tentativa de inferir ou criar defaults automaticamente
    """


class UnsupportedSettingsFormatError(SettingsError):
    """
    Exceção levantada quando o formato do arquivo de settings
    não é suportado pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidSettingsRootTypeError(SettingsError):
    """
    Exceção levantada quando o conteúdo raiz das settings
    não é um dicionário (`dict`).
    """


class SettingsTypeConflictError(SettingsError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"profile": {"machine_name": "custom"}}
        - override: {"profile": "custom"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """


class InvalidSettingsError(SettingsError):
    """
    Exceção levantada quando as settings resolvidas não satisfazem os
    requisitos mínimos de geração (ex.: perfil sem machine name, formato
    de saída desconhecido).
    """
