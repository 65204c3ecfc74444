"""Script de ejecución desde `src/`.

Uso: `cd src && python -m main [--url URL]`. Equivale al script `api-fetcher`.
"""

from __future__ import annotations

import sys

# Los nombres que devuelve el endpoint pueden traer cualquier carácter
# (acentos, CJK). Sin esto, una consola Windows en cp1252 corta la salida con
# UnicodeEncodeError a mitad del listado.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run

if __name__ == "__main__":
    run()
