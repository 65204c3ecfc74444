"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y traducción de errores para el fetcher.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.

Sin reintentos: cada llamada hace exactamente un intento.
"""

from __future__ import annotations

import asyncio
import logging

import httpx

from core.config import AppSettings
from core.domain.models import JSONValue
from core.errors import FetchError

logger = logging.getLogger(__name__)

JSON_REQUEST_HEADERS = {"Content-Type": "application/json"}


def _reject_constant(token: str) -> None:
    # NaN, Infinity y -Infinity no son JSON válido.
    raise ValueError(f"invalid JSON constant {token!r}")


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que fetcher y doctor se comporten igual.
    - `transport` permite sustituir la red en tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


async def fetch_json(
    url: str,
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> JSONValue:
    """GET único a `url` y decodificación del cuerpo como JSON.

    El intercambio completo está acotado por `http_timeout_seconds` (además de
    los timeouts por fase de httpx). El cliente se cierra en todos los caminos.

    Errores (siempre `FetchError`):
    - timeout o fallo de transporte (DNS, conexión, protocolo);
    - status fuera de 200-299;
    - cuerpo que no es JSON válido (incluye `NaN`/`Infinity` y anidamiento
      más profundo de lo que el decoder soporta).
    """

    settings = settings or AppSettings()
    timeout = settings.http_timeout_seconds
    logger.debug("GET %s (timeout=%ss)", url, timeout)

    try:
        async with build_async_client(
            settings,
            extra_headers=JSON_REQUEST_HEADERS,
            transport=transport,
        ) as client:
            response = await asyncio.wait_for(client.get(url), timeout=timeout)
    except (httpx.TimeoutException, asyncio.TimeoutError) as exc:
        detail = str(exc)
        message = f"Request timed out after {timeout:g}s"
        if detail:
            message = f"{message} ({detail})"
        raise FetchError(message, url=url) from exc
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise FetchError(str(exc) or type(exc).__name__, url=url) from exc

    logger.debug("GET %s -> HTTP %s", url, response.status_code)
    if not response.is_success:
        raise FetchError(
            f"Network response was not ok. Status: {response.status_code}",
            url=url,
            status_code=response.status_code,
        )

    try:
        return response.json(parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        raise FetchError(
            f"Invalid JSON in response body: {exc}",
            url=url,
            status_code=response.status_code,
        ) from exc


class HttpJsonFetcher:
    """Implementación HTTP de `core.interfaces.fetcher.JSONFetcher`."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    async def fetch(self, url: str) -> JSONValue:
        return await fetch_json(url, settings=self._settings, transport=self._transport)
