# src/pipegen/core/config/hashing.py
"""
Hashing canônico de configuração e de saída do Pipegen.

O hash gerado representa a **identidade estrutural** de uma configuração
de pipeline (ou de uma expressão gerada) e é utilizado para:
    - rastreabilidade de traduções
    - associação com o Manifest

Política de hashing (v1):
    - Serialização JSON canônica (chaves ordenadas, separadores compactos)
    - Codificação UTF-8
    - Algoritmo SHA-256

Invariantes:
    - Configurações estruturalmente equivalentes produzem o mesmo hash
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres
"""

import hashlib
import json
from typing import Any, Dict


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera um hash determinístico da configuração de pipeline.

    A ordem original das chaves não afeta o resultado; a ordem das listas
    (ex.: `data_transformations`) afeta, pois é semântica.

    Args:
        config (Dict[str, Any]): Configuração do pipeline em forma de dicionário.

    Returns:
        str: Hash SHA-256 hexadecimal da configuração.

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
    """

    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )

    canonical_json = json.dumps(
        config,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()


def compute_text_hash(text: str) -> str:
    """Hash SHA-256 hexadecimal de uma string (ex.: expressão gerada)."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()
