"""Extracción del code point hexadecimal desde el código de ejemplo."""

from __future__ import annotations

import re

# Compilado una vez; `re.Pattern` es seguro para uso concurrente.
HEX_PATTERN = re.compile(r"0x[0-9a-fA-F]+")


def extract_hex(text: str) -> str | None:
    """Devuelve el primer literal `0x...` de `text` tal cual, o `None`."""

    match = HEX_PATTERN.search(text)
    return match.group(0) if match else None
