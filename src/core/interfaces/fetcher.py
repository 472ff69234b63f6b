"""Contrato del descargador de páginas.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que los resolvers usen `adapters.http_client.fetch_page` en
  producción y un stub en tests sin acoplar el Core a httpx.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import httpx


@runtime_checkable
class PageFetcher(Protocol):
    """Contrato mínimo para descargar una página.

    Reglas de diseño:
    - Es asíncrono porque hace I/O (HTTP) y es el único punto de suspensión.
    - Devuelve el cuerpo completo o lanza `core.errors.FetchError`.
    """

    async def __call__(self, client: httpx.AsyncClient, url: str) -> str:
        ...
