# src/config_packager/core/render/serialization.py
"""Serialização YAML determinística de manifests e dados de configuração."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml  # PyYAML


def encode(data: Any) -> str:
    """Serializa em YAML preservando a ordem de inserção das chaves."""
    return yaml.safe_dump(
        data,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


def decode_file(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data if isinstance(data, dict) else {}
