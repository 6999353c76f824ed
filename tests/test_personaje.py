import pytest

from laberinto.personaje import (
    Avatar,
    AvatarCPU,
    AvatarInnovador,
    Personaje,
    desplazamiento,
)


def test_posicion_inicial():
    personaje = Personaje()
    assert (personaje.fila, personaje.columna) == (0, 0)


@pytest.mark.parametrize(
    "direccion, esperado",
    [
        ("w", (1, 2)),
        ("W", (1, 2)),
        ("s", (3, 2)),
        ("S", (3, 2)),
        ("a", (2, 1)),
        ("A", (2, 1)),
        ("d", (2, 3)),
        ("D", (2, 3)),
    ],
)
def test_mover_un_paso(direccion, esperado):
    personaje = Personaje(2, 2)
    personaje.mover(direccion)
    assert (personaje.fila, personaje.columna) == esperado


@pytest.mark.parametrize("direccion", ["x", "", "wd", " "])
def test_direccion_invalida_no_mueve(direccion):
    personaje = Personaje(2, 2)
    personaje.mover(direccion)
    assert (personaje.fila, personaje.columna) == (2, 2)


def test_ida_y_vuelta_regresa_al_origen():
    personaje = Avatar(5, 5)
    for direccion in "wdsa":
        personaje.mover(direccion)
    assert (personaje.fila, personaje.columna) == (5, 5)


@pytest.mark.parametrize("clase", [Avatar, AvatarCPU, AvatarInnovador])
def test_avatares_se_mueven_como_personajes(clase):
    avatar = clase()
    avatar.fila = 2
    avatar.columna = 2
    avatar.mover("d")
    assert (avatar.fila, avatar.columna) == (2, 3)


def test_desplazamiento():
    assert desplazamiento("W") == desplazamiento("w")
    assert desplazamiento("q") is None