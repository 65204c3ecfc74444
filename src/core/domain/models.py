"""Modelos del dominio (Pydantic v2).

Por qué tan laxo:
- El endpoint es externo y no garantiza esquema: el payload se modela como una
  unión etiquetada (`JSONValue`) y se inspecciona la forma antes de leer campos.
- `UserRecord` solo se construye cuando el elemento cumple la regla de
  "registro bien formado" (`id` y `name` presentes).

Nota:
- La regla de presencia es estricta a propósito: `id: 0` o `name: ""` cuentan
  como ausentes, igual que `null`.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

JSONValue = Union[None, bool, int, float, str, list["JSONValue"], dict[str, "JSONValue"]]


def is_present(value: Any) -> bool:
    """Regla explícita de "campo presente".

    Ausentes: `None`, `False`, `""` y el cero numérico. Todo lo demás cuenta
    como presente, incluidas listas y objetos vacíos.
    """

    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value != 0
    return True


def format_value(value: Any) -> str:
    """Render legible de un campo de registro."""

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, dict)):
        return _dumps(value, separators=(",", ":"))
    return str(value)


def describe_item(item: Any) -> str:
    """Representación de un elemento inválido para líneas de diagnóstico."""

    try:
        return json.dumps(item, ensure_ascii=False, separators=(", ", ": "))
    except (TypeError, ValueError):
        return repr(item)
    except RecursionError:
        return _too_deep(item)


def _dumps(value: Any, *, separators: tuple[str, str]) -> str:
    try:
        return json.dumps(value, ensure_ascii=False, separators=separators)
    except RecursionError:
        return _too_deep(value)


def _too_deep(value: Any) -> str:
    return f"<{type(value).__name__} nested too deeply>"


class UserRecord(BaseModel):
    """Registro esperado en la respuesta (p.ej. un usuario de JSONPlaceholder).

    Por qué `extra="allow"`:
    - Los endpoints devuelven muchos más campos (email, address, ...); se
      conservan sin validarlos porque solo `id` y `name` se muestran.
    """

    model_config = ConfigDict(extra="allow")

    id: Any = Field(..., description="Identificador del registro (string o número).")
    name: Any = Field(..., description="Nombre legible del registro.")

    @classmethod
    def from_item(cls, item: Any) -> "UserRecord | None":
        """Devuelve el registro si `item` está bien formado; si no, `None`."""

        if not isinstance(item, Mapping):
            return None
        if not (is_present(item.get("id")) and is_present(item.get("name"))):
            return None
        return cls.model_validate(dict(item))

    def summary_line(self) -> str:
        return f"ID: {format_value(self.id)}, Name: {format_value(self.name)}"
