"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y política de redirects para todas las páginas.
- Facilita testeo: se puede sustituir por un cliente con `httpx.MockTransport`.
"""

from __future__ import annotations

import logging

import httpx

from core.config import AppSettings
from core.errors import FetchError

logger = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que índice y detalles se comporten igual.
    - El cliente resultante se comparte (solo lectura) entre todas las tareas.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
    )


async def fetch_page(client: httpx.AsyncClient, url: str) -> str:
    """GET de `url` y devuelve el cuerpo como texto.

    Cualquier status final fuera de 2xx es un fallo; no hay reintentos aquí.
    """

    try:
        resp = await client.get(url)
    except httpx.HTTPError as exc:
        raise FetchError(url, f"{exc.__class__.__name__}: {exc}") from exc

    if not resp.is_success:
        raise FetchError(url, f"status {resp.status_code}", status_code=resp.status_code)

    logger.debug("Fetched %s (%d bytes)", url, len(resp.content))
    return resp.text
