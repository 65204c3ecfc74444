"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- El presentador imprime líneas planas (sin markup ni resaltado) para que la
  salida sea estable en terminales, pipes y tests.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from core.domain.models import JSONValue, UserRecord, describe_item

NO_DATA_MESSAGE = "No data received or data is not in the expected format."
HEADER_MESSAGE = "Data received:"


def _line(console: Console, text: str) -> None:
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def present_data(data: JSONValue, console: Console) -> None:
    """Imprime un resumen del payload.

    - Si no es una lista: una única línea de diagnóstico, sin cabecera.
    - Si es lista: cabecera y una línea por elemento, en orden. Los elementos
      mal formados generan una línea de diagnóstico, nunca una excepción.
    """

    if data is None or isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
        _line(console, NO_DATA_MESSAGE)
        return

    _line(console, HEADER_MESSAGE)
    for item in data:
        record = UserRecord.from_item(item)
        if record is None:
            _line(console, f"Invalid data item: {describe_item(item)}")
        else:
            _line(console, record.summary_line())


def print_error(console: Console, message: str) -> None:
    """Una sola línea `Error: <message>` (normalmente en stderr)."""

    _line(console, f"Error: {message}")


def print_banner(console: Console) -> None:
    """Imprime el banner del comando doctor.

    Por qué no en la ejecución normal:
    - La salida del fetch debe quedar limpia (solo cabecera y registros).
    """

    title = Text("API-FETCHER", style="bold cyan")
    subtitle = Text("Validate • Fetch • Present", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))
