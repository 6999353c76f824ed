"""Strategies that move a character across the board."""

from __future__ import annotations

import random

from laberinto.personaje import Personaje, desplazamiento


class LogicaDeMovimiento:
    """Moves a character one step in the requested direction."""

    def mover(self, personaje: Personaje, direccion: str) -> None:
        """Move the character; unknown directions leave it where it is."""
        paso = desplazamiento(direccion)
        if paso is None:
            return
        personaje.fila += paso[0]
        personaje.columna += paso[1]


class LogicaMovimientoAleatorio(LogicaDeMovimiento):
    """Ignores the requested direction and moves in a random one."""

    DIRECCIONES = "wasd"

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def mover(self, personaje: Personaje, direccion: str) -> None:
        personaje.mover(self._rng.choice(self.DIRECCIONES))


class LogicaMovimientoInnovador(LogicaDeMovimiento):
    """Ignores the requested direction and alternates right and up."""

    def __init__(self) -> None:
        self._zigzag = False

    def mover(self, personaje: Personaje, direccion: str) -> None:
        personaje.mover("w" if self._zigzag else "d")
        self._zigzag = not self._zigzag