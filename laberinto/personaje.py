"""Characters that move across the board."""

from __future__ import annotations

from dataclasses import dataclass

DESPLAZAMIENTOS: dict[str, tuple[int, int]] = {
    "w": (-1, 0),
    "s": (1, 0),
    "a": (0, -1),
    "d": (0, 1),
}


def desplazamiento(direccion: str) -> tuple[int, int] | None:
    """Return the (row, column) step for a direction key, or None if invalid."""
    return DESPLAZAMIENTOS.get(direccion.lower()) if len(direccion) == 1 else None


@dataclass
class Personaje:
    """A character with a position on the board."""

    fila: int = 0
    columna: int = 0

    def mover(self, direccion: str) -> None:
        """Move one step in the given direction; unknown directions are ignored."""
        paso = desplazamiento(direccion)
        if paso is None:
            return
        self.fila += paso[0]
        self.columna += paso[1]


class Avatar(Personaje):
    """The character controlled by the player."""


class AvatarCPU(Avatar):
    """An avatar driven by random moves."""


class AvatarInnovador(Avatar):
    """An avatar driven by zig-zag moves."""