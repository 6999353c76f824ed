"""The game board, loaded from a text description."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from laberinto.fichas import Ficha, ficha_desde_simbolo


class Tablero:
    """A grid of tiles; unrecognised symbols leave an empty cell (None)."""

    def __init__(self) -> None:
        self._filas: list[list[Ficha | None]] = []

    def cargar_desde_archivo(self, archivo: str | Path) -> None:
        """Replace the board with the one described in a file."""
        try:
            texto = Path(archivo).read_text(encoding="utf-8")
        except OSError as exc:
            raise OSError(f"No se pudo abrir el archivo: {archivo}") from exc
        self.cargar_desde_texto(texto)

    def cargar_desde_texto(self, texto: str) -> None:
        """Replace the board with the one described in text.

        Each line is a row; each non-blank character is a cell.
        """
        lineas = texto.split("\n")
        if lineas and lineas[-1] == "":
            lineas.pop()
        self._filas = [
            [
                ficha_desde_simbolo(simbolo, fila, columna)
                for columna, simbolo in enumerate(c for c in linea if not c.isspace())
            ]
            for fila, linea in enumerate(lineas)
        ]

    def get_ficha(self, fila: int, columna: int) -> Ficha | None:
        """Return the tile at a position, or None if empty or out of bounds."""
        if not 0 <= fila < len(self._filas):
            return None
        fila_actual = self._filas[fila]
        if not 0 <= columna < len(fila_actual):
            return None
        return fila_actual[columna]

    @property
    def filas(self) -> list[list[Ficha | None]]:
        """The rows of the board, as copies."""
        return [list(fila) for fila in self._filas]

    def __len__(self) -> int:
        return len(self._filas)

    def __iter__(self) -> Iterator[list[Ficha | None]]:
        return iter(self.filas)