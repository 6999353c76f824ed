import pytest

from laberinto.fichas import Abismo, Camino, Salida
from laberinto.tablero import Tablero

TEXTO = "1 1 0\n0 1 S\n1 x 1\n"


@pytest.fixture
def tablero():
    t = Tablero()
    t.cargar_desde_texto(TEXTO)
    return t


def test_tamano(tablero):
    assert len(tablero) == 3
    assert [len(fila) for fila in tablero] == [3, 3, 3]


def test_fichas_en_su_posicion(tablero):
    assert tablero.get_ficha(0, 0) == Camino(0, 0)
    assert tablero.get_ficha(0, 2) == Abismo(0, 2)
    assert tablero.get_ficha(1, 2) == Salida(1, 2)


def test_posiciones_coinciden(tablero):
    for i, fila in enumerate(tablero):
        for j, ficha in enumerate(fila):
            if ficha is not None:
                assert (ficha.fila, ficha.columna) == (i, j)


def test_simbolo_desconocido_es_casilla_vacia(tablero):
    assert tablero.get_ficha(2, 1) is None
    assert tablero.get_ficha(2, 2) == Camino(2, 2)


@pytest.mark.parametrize(
    "fila, columna", [(-1, 0), (0, -1), (3, 0), (0, 3), (100, 100)]
)
def test_fuera_de_limites(tablero, fila, columna):
    assert tablero.get_ficha(fila, columna) is None


def test_sin_espacios_cada_caracter_es_casilla():
    t = Tablero()
    t.cargar_desde_texto("10S")
    assert [f.tipo for f in t.filas[0]] == ["1", "0", "S"]


def test_lineas_vacias_son_filas_vacias():
    t = Tablero()
    t.cargar_desde_texto("1\n\n1\n")
    assert len(t) == 3
    assert t.filas[1] == []
    assert t.get_ficha(2, 0) == Camino(2, 0)


def test_texto_vacio():
    t = Tablero()
    t.cargar_desde_texto("")
    assert len(t) == 0


def test_recargar_reemplaza(tablero):
    tablero.cargar_desde_texto("0\n")
    assert len(tablero) == 1
    assert tablero.get_ficha(0, 0) == Abismo(0, 0)
    assert tablero.get_ficha(1, 2) is None


def test_cargar_desde_archivo(tmp_path):
    ruta = tmp_path / "dataTablero.txt"
    ruta.write_text(TEXTO, encoding="utf-8")
    t = Tablero()
    t.cargar_desde_archivo(ruta)
    otro = Tablero()
    otro.cargar_desde_texto(TEXTO)
    assert t.filas == otro.filas


def test_archivo_inexistente(tmp_path):
    t = Tablero()
    with pytest.raises(OSError, match="No se pudo abrir el archivo"):
        t.cargar_desde_archivo(tmp_path / "no_existe.txt")


def test_filas_es_copia(tablero):
    copia = tablero.filas
    copia[0].clear()
    assert tablero.get_ficha(0, 0) == Camino(0, 0)