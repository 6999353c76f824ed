"""Console view of the board and the avatar."""

from __future__ import annotations

import os
import random
import subprocess
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

from laberinto.personaje import Personaje
from laberinto.tablero import Tablero

try:
    import termios
    import tty
except ImportError:  # not available on every platform
    termios = None
    tty = None

AVATAR = "🟫🟫🟩🧝🟫🟫"
CAMINOS = ("🟫🟫🟩🟨🟫🟫", "🟫🟫🟨🟩🟫🟫")
ABISMO = "🟫🟫🟦🟦🟫🟫"
SALIDA = "🟫🟫💰💰🟫🟫"

PROMPT = "Ingrese una opción [aA-Izquierda] [wW-Arriba] [sS-Abajo] [dD-Derecha]: "
ENTRADA_INVALIDA = "Entrada inválida. Por favor, introduce wW, aA, sS o dD."
DIRECCIONES_VALIDAS = frozenset("wasd")

_COMANDO_LIMPIAR = ["cmd", "/c", "cls"] if os.name == "nt" else ["clear"]


@contextmanager
def _modo_caracter(entrada: TextIO) -> Iterator[None]:
    """Read single keys without echo or waiting for Enter, when on a terminal."""
    if termios is None or not entrada.isatty():
        yield
        return
    descriptor = entrada.fileno()
    anterior = termios.tcgetattr(descriptor)
    tty.setcbreak(descriptor)
    try:
        yield
    finally:
        termios.tcsetattr(descriptor, termios.TCSANOW, anterior)


class VistaConsola:
    """Draws the game on a text console and reads the player's moves."""

    def __init__(
        self,
        tablero: Tablero,
        avatar: Personaje,
        entrada: TextIO | None = None,
        salida: TextIO | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.tablero = tablero
        self.avatar = avatar
        self._entrada = entrada
        self._salida = salida
        self._rng = rng if rng is not None else random.Random()

    @property
    def entrada(self) -> TextIO:
        return self._entrada if self._entrada is not None else sys.stdin

    @property
    def salida(self) -> TextIO:
        return self._salida if self._salida is not None else sys.stdout

    def limpiar_pantalla(self) -> None:
        """Clear the terminal screen."""
        self.salida.flush()
        try:
            subprocess.run(_COMANDO_LIMPIAR, check=False)
        except OSError:
            pass

    def mostrar_tablero(self) -> None:
        """Print the board's tile symbols with row and column numbers."""
        self.limpiar_pantalla()
        tamano = len(self.tablero)
        partes = ["Fil--Col\t", *(f"{i}\t" for i in range(tamano)), "\n"]
        for fila in range(tamano):
            partes.append(f"{fila}\t\t")
            for columna in range(tamano):
                ficha = self.tablero.get_ficha(fila, columna)
                partes.append(f"{ficha.tipo if ficha is not None else ' '}\t")
            partes.append("\n")
        self.salida.write("".join(partes))
        self.salida.flush()

    def mostrar_juego(self) -> None:
        """Draw the board with the avatar on it."""
        self.limpiar_pantalla()
        camino = self._rng.choice(CAMINOS)
        tamano = len(self.tablero)
        lineas = []
        for fila in range(tamano):
            celdas = []
            for columna in range(tamano):
                if (self.avatar.fila, self.avatar.columna) == (fila, columna):
                    dibujo = AVATAR
                else:
                    ficha = self.tablero.get_ficha(fila, columna)
                    tipo = ficha.tipo if ficha is not None else "0"
                    dibujo = {"1": camino, "0": ABISMO}.get(tipo, SALIDA)
                celdas.append(f"{dibujo}\t")
            lineas.append("".join(celdas) + "\n")
        self.salida.write("".join(lineas))
        self.salida.flush()

    def mostrar_mensaje(self, mensaje: str) -> None:
        """Print a message on its own line."""
        print(mensaje, file=self.salida, flush=True)

    def get_entrada_consola(self) -> str:
        """Read keys until one is a valid direction and return it as typed.

        Raises EOFError when the input runs out.
        """
        while True:
            self.salida.write(PROMPT)
            self.salida.flush()
            with _modo_caracter(self.entrada):
                caracter = self.entrada.read(1)
            if not caracter:
                raise EOFError("No hay más entrada")
            if caracter.lower() in DIRECCIONES_VALIDAS:
                return caracter
            print(ENTRADA_INVALIDA, file=self.salida, flush=True)