"""Extracción HTML de la documentación de la API de Flutter (dartdoc).

Estructura esperada:
- Índice: `<section id="constants">` con un `<dt class="constant">` por icono,
  cuyo primer `<a>` lleva el nombre y el enlace relativo al detalle.
- Detalle: `<code class="language-dart">` con el `IconData(0x...)` de ejemplo.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterator

from bs4 import BeautifulSoup, Tag

from core.domain.models import ConstantNode
from core.errors import StructuralMismatch

logger = logging.getLogger(__name__)

CONSTANTS_ANCHOR = "#constants"
CONSTANT_NODE_SELECTOR = ".constant"
CODE_SAMPLE_SELECTOR = "code.language-dart"


def parse_document(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def list_constant_nodes(
    doc: BeautifulSoup,
    *,
    exclude: Collection[str] = (),
    url: str | None = None,
) -> Iterator[ConstantNode]:
    """Enumera las constantes del índice.

    Lanza `StructuralMismatch` de inmediato si falta el contenedor, para que
    "la web cambió" no se confunda con "cero constantes". El iterador devuelto
    es perezoso; volver a llamar con el mismo documento da la misma secuencia.

    Un nodo sin enlace se omite con un warning en vez de abortar el índice.
    """

    container = doc.select_one(CONSTANTS_ANCHOR)
    if container is None:
        raise StructuralMismatch(f"anchor '{CONSTANTS_ANCHOR}' not found", url=url)
    return _iter_constant_nodes(container, exclude=frozenset(exclude))


def _iter_constant_nodes(container: Tag, *, exclude: frozenset[str]) -> Iterator[ConstantNode]:
    for node in container.select(CONSTANT_NODE_SELECTOR):
        link = node.find("a")
        href = link.get("href") if isinstance(link, Tag) else None
        name = link.get_text(strip=True) if isinstance(link, Tag) else ""
        if not name or not isinstance(href, str) or not href:
            logger.warning("Skipping constant node without a usable link: %s", node.get("id") or node.name)
            continue
        if name in exclude:
            continue
        yield ConstantNode(name=name, href=href)


def find_code_sample(doc: BeautifulSoup) -> str | None:
    code = doc.select_one(CODE_SAMPLE_SELECTOR)
    if code is None:
        return None
    return code.get_text()
