"""Shared fixtures: stub dartdoc pages and an httpx client backed by MockTransport."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

from core.config import AppSettings

INDEX_URL = "https://docs.test/flutter/cupertino/CupertinoIcons-class.html"
DETAIL_BASE_URL = "https://docs.test/flutter/"

Route = httpx.Response | Exception


def render_index(entries: list[tuple[str, str]], *, anchor: bool = True) -> str:
    """Build an index page shaped like the dartdoc `CupertinoIcons` class page."""

    rows = "\n".join(
        f"""
        <dt id="{name}" class="constant">
          <span class="name"><a href="{href}">{name}</a></span>
          <span class="signature">&#8594; const IconData</span>
        </dt>
        <dd><p>A {name} icon.</p></dd>
        """
        for name, href in entries
    )
    section_id = "constants" if anchor else "properties"
    return f"""
    <html><body>
      <section class="summary offset-anchor" id="instance-properties">
        <dl class="properties"><dt class="property"><a href="x.html">hashCode</a></dt></dl>
      </section>
      <section class="summary offset-anchor" id="{section_id}">
        <h2>Constants</h2>
        <dl class="properties">{rows}</dl>
      </section>
    </body></html>
    """


def render_detail(code: str | None, *, with_block: bool = True) -> str:
    """Build a detail page; `with_block=False` drops the Dart code sample."""

    block = ""
    if with_block:
        literal = code if code is not None else "iconFont"
        block = (
            '<pre class="language-dart"><code class="language-dart">'
            f"static const IconData sample = IconData({literal}, fontFamily: iconFont);"
            "</code></pre>"
        )
    return f"""
    <html><body>
      <section class="multi-line-signature"><span class="name">sample</span></section>
      <section class="summary source-code" id="source">
        <h2><span>Implementation</span></h2>
        {block}
      </section>
    </body></html>
    """


def html_response(body: str, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, text=body, headers={"Content-Type": "text/html; charset=utf-8"})


class StubSite:
    """Routes keyed by URL path; records every requested path."""

    def __init__(self, routes: dict[str, Route]) -> None:
        self.routes = routes
        self.calls: list[str] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request.url.path)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, text="not found")
        if isinstance(route, Exception):
            raise route
        return route

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler), follow_redirects=True)


@pytest.fixture
def index_html() -> Callable[..., str]:
    return render_index


@pytest.fixture
def detail_html() -> Callable[..., str]:
    return render_detail


@pytest.fixture
def make_site() -> Callable[[dict[str, Route]], StubSite]:
    return StubSite


@pytest.fixture
def respond() -> Callable[..., httpx.Response]:
    return html_response


@pytest.fixture
def settings(tmp_path: Path) -> AppSettings:
    return AppSettings(
        index_url=INDEX_URL,
        detail_base_url=DETAIL_BASE_URL,
        output_path=tmp_path / "icons.json",
        max_concurrency=4,
    )


@pytest.fixture
def index_path() -> str:
    return httpx.URL(INDEX_URL).path
