"""Icon scraping orchestration.

Two navigation levels only: the index page enumerates candidates, then every
candidate's detail page is fetched concurrently and reduced to an `Icon`.
Per-item failures are collected, never raised; only an empty batch is fatal.
Side-effects (printing, progress bars) stay out of this module and are driven
through `PipelineHooks`.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Callable
from urllib.parse import urljoin

import httpx

from adapters.html_extractor import find_code_sample, list_constant_nodes, parse_document
from adapters.http_client import build_async_client, fetch_page
from core.code_parser import extract_hex
from core.config import RESERVED_NAMES, AppSettings
from core.domain.models import BatchResult, Candidate, Icon, ResolutionFailure
from core.errors import CodeBlockNotFound, HexNotParsed, IconScraperError, NoIconsFound
from core.interfaces.fetcher import PageFetcher

logger = logging.getLogger(__name__)


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers (progress, counters)."""

    candidates_found: Callable[[int], None] | None = None
    icon_resolved: Callable[[Icon], None] | None = None
    icon_failed: Callable[[ResolutionFailure], None] | None = None


def join_detail_url(base_url: str, href: str) -> str:
    """Resolve `href` under `base_url`, keeping the base path even for root-relative links."""

    if not base_url.endswith("/"):
        base_url += "/"
    return urljoin(base_url, href.lstrip("/"))


async def resolve_index(
    client: httpx.AsyncClient,
    settings: AppSettings,
    *,
    fetch: PageFetcher = fetch_page,
) -> list[Candidate]:
    """Fetch the index page and return the non-reserved constants with absolute URLs."""

    body = await fetch(client, settings.index_url)
    doc = parse_document(body)
    nodes = list_constant_nodes(doc, exclude=RESERVED_NAMES, url=settings.index_url)
    candidates = [
        Candidate(name=node.name, detail_url=join_detail_url(settings.detail_base_url, node.href))
        for node in nodes
    ]
    logger.info("Found %d icon candidates on %s", len(candidates), settings.index_url)
    return candidates


async def resolve_icon(
    client: httpx.AsyncClient,
    candidate: Candidate,
    *,
    fetch: PageFetcher = fetch_page,
) -> Icon:
    url = candidate.detail_url
    body = await fetch(client, url)

    sample = find_code_sample(parse_document(body))
    if sample is None:
        raise CodeBlockNotFound(url)

    code = extract_hex(sample)
    if code is None:
        raise HexNotParsed(url)

    logger.debug("Resolved %s -> %s", candidate.name, code)
    return Icon(icon_name=candidate.name, icon_code=code)


async def resolve_icons(
    client: httpx.AsyncClient,
    candidates: Sequence[Candidate],
    *,
    max_concurrency: int = 16,
    fetch: PageFetcher = fetch_page,
    hooks: PipelineHooks | None = None,
) -> BatchResult:
    """Resolve every candidate concurrently and partition the outcomes.

    At most `max_concurrency` detail pages are in flight. Every task runs to
    completion; icons are appended in completion order.
    """

    hooks = hooks or PipelineHooks()
    sem = asyncio.Semaphore(max(1, max_concurrency))

    async def resolve_one(candidate: Candidate) -> Icon | ResolutionFailure:
        async with sem:
            try:
                return await resolve_icon(client, candidate, fetch=fetch)
            except IconScraperError as exc:
                return ResolutionFailure(
                    name=candidate.name,
                    url=candidate.detail_url,
                    reason=f"Failed to load icon '{candidate.name}': {exc}",
                )

    tasks = {
        asyncio.create_task(resolve_one(candidate), name=f"icon:{candidate.name}"): candidate
        for candidate in candidates
    }

    icons: list[Icon] = []
    failures: list[ResolutionFailure] = []
    pending = set(tasks)
    try:
        while pending:
            done, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)
            for task in done:
                outcome = _task_outcome(task, tasks[task])
                if isinstance(outcome, Icon):
                    icons.append(outcome)
                    if hooks.icon_resolved:
                        hooks.icon_resolved(outcome)
                    continue

                failures.append(outcome)
                if hooks.icon_failed:
                    hooks.icon_failed(outcome)
    finally:
        # A raising hook leaves tasks behind; do not leak them past this call.
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

    logger.info("Resolved %d/%d icons (%d failed)", len(icons), len(tasks), len(failures))
    return BatchResult(icons=icons, failures=failures)


def _task_outcome(task: asyncio.Task, candidate: Candidate) -> Icon | ResolutionFailure:
    # Resolution failures come back as values; anything raised means the task itself broke.
    if task.cancelled():
        reason = f"Task failed to execute: '{candidate.name}' was cancelled"
    elif task.exception() is not None:
        exc = task.exception()
        reason = f"Task failed to execute: {exc.__class__.__name__}: {exc}"
    else:
        outcome = task.result()
        if isinstance(outcome, ResolutionFailure):
            logger.warning(outcome.reason)
        return outcome

    logger.error(reason)
    return ResolutionFailure(name=candidate.name, url=candidate.detail_url, reason=reason)


async def fetch_icons(
    settings: AppSettings,
    *,
    client: httpx.AsyncClient | None = None,
    fetch: PageFetcher = fetch_page,
    hooks: PipelineHooks | None = None,
) -> BatchResult:
    """Run index enumeration plus detail resolution.

    Raises `NoIconsFound` when nothing resolved; index-level errors
    (`FetchError`, `StructuralMismatch`) propagate untouched.
    """

    hooks = hooks or PipelineHooks()
    owns_client = client is None
    if client is None:
        client = build_async_client(settings)

    try:
        candidates = await resolve_index(client, settings, fetch=fetch)
        if hooks.candidates_found:
            hooks.candidates_found(len(candidates))
        batch = await resolve_icons(
            client,
            candidates,
            max_concurrency=settings.max_concurrency,
            fetch=fetch,
            hooks=hooks,
        )
    finally:
        if owns_client:
            await client.aclose()

    if not batch.succeeded:
        raise NoIconsFound(failures=len(batch.failures))
    return batch
