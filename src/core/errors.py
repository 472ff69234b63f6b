"""Errores del dominio.

Por qué una jerarquía propia:
- El agregador distingue fallos por icono (recuperables) de fallos de ejecución.
- La CLI puede diferenciar "no hubo datos" de "hubo datos pero no se guardaron".
"""

from __future__ import annotations

from pathlib import Path


class IconScraperError(Exception):
    """Base de todos los errores esperados del scraper."""


class FetchError(IconScraperError):
    """Fallo de transporte o respuesta HTTP fuera de 2xx."""

    def __init__(self, url: str, cause: str, *, status_code: int | None = None) -> None:
        self.url = url
        self.cause = cause
        self.status_code = status_code
        super().__init__(f"Failed to fetch URL: {url} ({cause})")


class StructuralMismatch(IconScraperError):
    """El HTML no tiene la estructura esperada (la web probablemente cambió)."""

    def __init__(self, description: str, url: str | None = None) -> None:
        self.description = description
        self.url = url
        message = f"HTML structure mismatch: {description}"
        if url:
            message += f" (URL: {url})"
        super().__init__(message)


class CodeBlockNotFound(IconScraperError):
    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Code sample not found on page: {url}")


class HexNotParsed(IconScraperError):
    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"No hexadecimal code point in code sample: {url}")


class NoIconsFound(IconScraperError):
    """Ningún icono resuelto: se trata como fallo del lote completo."""

    def __init__(self, failures: int = 0) -> None:
        self.failures = failures
        super().__init__(
            "No icons were found. The website structure may have changed again. "
            f"({failures} candidate(s) failed)"
        )


class ExportError(IconScraperError):
    stage = "export"

    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Error {self.stage} {path}: {cause}")


class SerializationError(ExportError):
    stage = "serializing JSON for"


class WriteError(ExportError):
    stage = "writing to file"
