"""Validación de URLs.

Por qué pydantic `AnyUrl`:
- Usa un parser estilo WHATWG: normaliza esquema y host a minúsculas y añade
  `/` a rutas vacías, así `HTTP://Example.com` y `http://example.com/` dan la
  misma forma canónica.
- Separa "no parsea" de "esquema no permitido" para reportar mensajes claros.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import AnyUrl, TypeAdapter, ValidationError

from core.errors import InvalidUrlError

logger = logging.getLogger(__name__)

ALLOWED_SCHEMES = frozenset({"http", "https"})

_url_adapter: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def validate_url(url: Any) -> str:
    """Parsea `url` y devuelve su forma canónica si el esquema es HTTP(S).

    Lanza `InvalidUrlError` si no parsea como URL absoluta o si el esquema no
    está en `ALLOWED_SCHEMES`. Es idempotente sobre su propia salida.
    """

    try:
        parsed = _url_adapter.validate_python(url)
    except ValidationError as exc:
        errors = exc.errors()
        reason = errors[0]["msg"] if errors else str(exc)
        logger.debug("url rejected as unparseable: %r (%s)", url, reason)
        raise InvalidUrlError(reason) from exc

    if parsed.scheme not in ALLOWED_SCHEMES:
        logger.debug("url rejected for scheme %r: %r", parsed.scheme, url)
        raise InvalidUrlError("Invalid URL protocol. Only HTTP/HTTPS are allowed.")

    normalized = str(parsed)
    logger.debug("validated url %s", normalized)
    return normalized
