"""Command-line entry point: play the maze on the console."""

from __future__ import annotations

import argparse
import sys

from laberinto.juego import Juego
from laberinto.movimiento import (
    LogicaDeMovimiento,
    LogicaMovimientoAleatorio,
    LogicaMovimientoInnovador,
)
from laberinto.personaje import Avatar, AvatarCPU, AvatarInnovador, Personaje
from laberinto.tablero import Tablero
from laberinto.vista import VistaConsola

ARCHIVO_TABLERO = "dataTablero.txt"
FILA_INICIAL = 2
COLUMNA_INICIAL = 2
MENSAJE_TURNO = "Digite su movimiento:"
MENSAJE_VICTORIA = "Ganaste el juego, el total de puntos es:"
MENSAJE_DERROTA = "Perdiste el juego, el total de puntos es:0"

_MODOS = {
    "jugador": (Avatar, LogicaDeMovimiento),
    "cpu": (AvatarCPU, LogicaMovimientoAleatorio),
    "innovador": (AvatarInnovador, LogicaMovimientoInnovador),
}


def jugar(
    tablero: Tablero,
    avatar: Personaje,
    logica: LogicaDeMovimiento,
    vista: VistaConsola,
) -> int:
    """Run a game to its end and return the final score (0 on a loss)."""
    juego = Juego(tablero, avatar, logica, True, salida=vista.salida)
    juego.iniciar()
    while True:
        vista.mostrar_juego()
        vista.mostrar_mensaje(MENSAJE_TURNO)
        juego.play(vista.get_entrada_consola())
        if juego.gano() or not juego.estado:
            break
    if juego.gano():
        vista.mostrar_mensaje(f"{MENSAJE_VICTORIA}{juego.puntaje}")
        return juego.puntaje
    vista.limpiar_pantalla()
    vista.mostrar_mensaje(MENSAJE_DERROTA)
    return 0


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="laberinto", description="Cross the maze to the exit.")
    parser.add_argument("--tablero", default=ARCHIVO_TABLERO, help="board file")
    parser.add_argument("--modo", choices=sorted(_MODOS), default="jugador", help="who moves the avatar")
    parser.add_argument("--fila", type=int, default=FILA_INICIAL, help="starting row")
    parser.add_argument("--columna", type=int, default=COLUMNA_INICIAL, help="starting column")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    tablero = Tablero()
    try:
        tablero.cargar_desde_archivo(args.tablero)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    clase_avatar, clase_logica = _MODOS[args.modo]
    avatar = clase_avatar(args.fila, args.columna)
    vista = VistaConsola(tablero, avatar)
    try:
        jugar(tablero, avatar, clase_logica(), vista)
    except (EOFError, KeyboardInterrupt):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())