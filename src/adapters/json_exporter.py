"""Exportación JSON de los iconos resueltos.

Por qué JSON:
- Es el formato que consumen los generadores de código del lado Flutter.
- Con indentación fija y sin reordenar claves, dos ejecuciones con los mismos
  iconos producen ficheros idénticos byte a byte.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path

from core.domain.models import Icon
from core.errors import SerializationError, WriteError

logger = logging.getLogger(__name__)


def render_icons_json(*, icons: Sequence[Icon], output_path: Path) -> str:
    payload = [icon.model_dump(mode="json") for icon in icons]
    try:
        return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"
    except (TypeError, ValueError) as exc:
        raise SerializationError(output_path, exc) from exc


def export_icons_json(*, icons: Sequence[Icon], output_path: Path) -> int:
    """Exporta `icons` a JSON UTF-8, sobrescribiendo `output_path`.

    Devuelve el número de iconos escritos.
    """

    text = render_icons_json(icons=icons, output_path=output_path)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise WriteError(output_path, exc) from exc

    logger.info("Wrote %d icons to %s", len(icons), output_path)
    return len(icons)
