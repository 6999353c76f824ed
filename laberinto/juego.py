"""Game rules: moving the avatar, winning, losing and scoring."""

from __future__ import annotations

import sys
from typing import TextIO

from laberinto.fichas import Abismo, Camino, Salida
from laberinto.movimiento import LogicaDeMovimiento
from laberinto.personaje import Personaje
from laberinto.tablero import Tablero

PUNTAJE_INICIAL = 100
COSTO_MOVIMIENTO = 2
MENSAJE_INICIO = "El juego ha comenzado."
MENSAJE_LLEGADA = "win"


class Juego:
    """One game: a board, an avatar and the strategy that moves it.

    ``estado`` is True while the avatar stands on solid ground and becomes
    False once it falls into an abyss or off the board.
    """

    def __init__(
        self,
        tablero: Tablero,
        avatar: Personaje,
        logica: LogicaDeMovimiento,
        estado: bool = True,
        salida: TextIO | None = None,
    ) -> None:
        self.tablero = tablero
        self.avatar = avatar
        self.logica = logica
        self.estado = estado
        self.puntaje = 0
        self._salida = salida

    @property
    def _out(self) -> TextIO:
        return self._salida if self._salida is not None else sys.stdout

    def _ficha_actual(self):
        return self.tablero.get_ficha(self.avatar.fila, self.avatar.columna)

    def mover_avatar(self, direccion: str) -> None:
        """Move the avatar and update the state from the tile it lands on."""
        self.logica.mover(self.avatar, direccion)
        ficha = self._ficha_actual()
        if isinstance(ficha, Camino):
            self.estado = True
        elif ficha is None or isinstance(ficha, Abismo):
            self.estado = False
        else:
            print(MENSAJE_LLEGADA, file=self._out)

    def iniciar(self) -> None:
        """Announce the start of the game and reset the score."""
        print(MENSAJE_INICIO, file=self._out)
        self.puntaje = PUNTAJE_INICIAL

    def gano(self) -> bool:
        """Whether the avatar stands on the exit."""
        return isinstance(self._ficha_actual(), Salida)

    def puntuar(self) -> None:
        """Charge the cost of one move."""
        self.puntaje -= COSTO_MOVIMIENTO

    def play(self, movimiento: str) -> None:
        """Play one turn: move, then charge for the move."""
        self.mover_avatar(movimiento)
        self.puntuar()