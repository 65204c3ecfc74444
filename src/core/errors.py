"""Errores del dominio.

Por qué una jerarquía propia:
- Los adaptadores traducen excepciones de `httpx`/`json` a estos tipos, así el
  orquestador tiene un único punto de captura (`ApiFetcherError`).
- Cada etapa aporta su prefijo y el mensaje llega tal cual al usuario.
"""

from __future__ import annotations


class ApiFetcherError(Exception):
    """Base de todos los errores que el pipeline sabe reportar."""

    prefix = ""

    def __init__(self, message: str) -> None:
        self.message = f"{self.prefix}{message}"
        super().__init__(self.message)


class InvalidUrlError(ApiFetcherError):
    """La URL no se pudo parsear o usa un esquema no permitido."""

    prefix = "Invalid URL: "


class FetchError(ApiFetcherError):
    """Fallo de transporte, status no-2xx o cuerpo JSON inválido."""

    prefix = "Failed to fetch data: "

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
