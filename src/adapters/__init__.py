"""Adaptadores de I/O: HTTP (httpx), HTML (BeautifulSoup) y exportación JSON."""
