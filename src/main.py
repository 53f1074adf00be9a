"""`python -m main` con `src/` como directorio de trabajo.

La salida del juego es ASCII, así que no hace falta reconfigurar la
codificación de stdout/stderr en ninguna plataforma.
"""

from __future__ import annotations

from cli.main import run

if __name__ == "__main__":
    run()
