"""Ejecuta `api-fetcher` desde un checkout sin instalar.

`python -m main` en la raíz del repo: añade `src/` al path y delega en
`cli.main.run`, igual que el script instalado.
"""

from __future__ import annotations

import sys
from pathlib import Path

_SRC = Path(__file__).resolve().parent / "src"


def main() -> None:
    if str(_SRC) not in sys.path:
        sys.path.insert(0, str(_SRC))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
