# src/config_packager/core/config/__init__.py

"""
Camada de settings do Config Packager.

Este pacote contém as estruturas e utilitários responsáveis por carregar,
mesclar e validar estruturalmente as settings de geração: perfil de
instalação, perfil base, formato/destino de saída, métodos de atribuição
habilitados e tipos de entidade conhecidos.

Princípios fundamentais:
    - Settings não contêm lógica de atribuição
    - Overrides são sempre explícitos
    - A mesma entrada sempre produz as mesmas settings finais

Limites explícitos:
    - Não carrega itens de configuração da plataforma
    - Não executa geração
"""

from .loader import load_settings, validate_settings
from .merge import deep_merge

__all__ = ["load_settings", "validate_settings", "deep_merge"]
