"""Board tiles: path, abyss and exit."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Ficha:
    """A tile placed at a row and column, identified by its type symbol."""

    fila: int
    columna: int
    tipo: str


@dataclass(frozen=True)
class Camino(Ficha):
    """A walkable tile."""

    tipo: str = "1"


@dataclass(frozen=True)
class Abismo(Ficha):
    """A tile that makes the player fall and lose."""

    tipo: str = "0"


@dataclass(frozen=True)
class Salida(Ficha):
    """The exit tile that wins the game."""

    tipo: str = "S"


_TIPOS: dict[str, type[Ficha]] = {
    "1": Camino,
    "0": Abismo,
    "S": Salida,
}


def ficha_desde_simbolo(simbolo: str, fila: int, columna: int) -> Ficha | None:
    """Build the tile for a board symbol, or return None if it is not recognised."""
    clase = _TIPOS.get(simbolo)
    if clase is None:
        return None
    return clase(fila, columna)