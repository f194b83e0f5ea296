"""Script de ejecución.

Permite ejecutar la CLI con `python src/main.py` durante desarrollo, además
del script `catr` instalado por pyproject.
"""

from __future__ import annotations

import sys

# stdout/stderr en UTF-8 en terminales Windows (cp1252).
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
