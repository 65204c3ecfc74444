"""Contrato del fetcher de datos.

Por qué Protocol:
- El orquestador solo necesita "algo que devuelva JSON para una URL".
- Permite sustituir el adaptador HTTP por un stub en tests sin tocar el Core.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import JSONValue


@runtime_checkable
class JSONFetcher(Protocol):
    """Contrato mínimo para obtener el payload.

    Reglas de diseño:
    - `fetch` es asíncrono porque hace I/O (HTTP).
    - Recibe una URL ya validada y no la vuelve a validar.
    - Falla con `core.errors.FetchError`; no reintenta.
    """

    async def fetch(self, url: str) -> JSONValue:
        """Obtiene y decodifica el JSON de `url`."""

        ...
