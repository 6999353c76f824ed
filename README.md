# laberinto

laberinto is a small maze game that runs in the terminal. The board is read
from a text file. Your avatar moves one cell at a time. You win when the avatar
reaches the exit. You lose if it steps into the abyss or off the edge of the
board.

## Board file

Each line of the file is one row of the board. Each character that is not
whitespace is one cell, so spaces between cells make no difference:

| Character | Cell                      |
|-----------|---------------------------|
| `1`       | path (`Camino`)           |
| `0`       | abyss (`Abismo`)          |
| `S`       | exit (`Salida`)           |

Any other character leaves the cell empty. Stepping onto an empty cell counts
as a fall. The screen draws a square whose side is the number of rows, so the
board should be square.

Example `dataTablero.txt`:

```
0 0 0 0 0
0 1 1 1 0
0 1 1 1 0
0 1 1 S 0
0 0 0 0 0
```

## Installing and playing

```
pip install .
laberinto
```

Options:

| Option         | Default           | Meaning                                    |
|----------------|-------------------|--------------------------------------------|
| `--tablero`    | `dataTablero.txt` | board file                                 |
| `--modo`       | `jugador`         | `jugador`, `cpu` or `innovador`            |
| `--fila`       | `2`               | starting row                               |
| `--columna`    | `2`               | starting column                            |

To move, press `w` (up), `a` (left), `s` (down) or `d` (right). Capital
letters work too. On a terminal each key is read as soon as you press it, so
you do not need to press Enter. Any other key is rejected and the game asks
again.

There are two other modes:

- `cpu`: each key press moves the avatar one step in a random direction.
- `innovador`: the avatar alternates between a step right and a step up.

In both modes the key you press is ignored, but it must still be one of the
move keys.

The screen is cleared before each turn with `clear`, or with `cls` on Windows.

The command exits with status 1 in these cases:

- the board file cannot be opened;
- the input runs out;
- the game is interrupted.

In every other case it exits with status 0, whether you win or lose.

## Scoring

You start with 100 points, and every move costs 2. If you reach the exit, the
points you have left are your final score. If you fall, the score is 0.

## Using it as a library

```python
from laberinto.tablero import Tablero
from laberinto.personaje import Avatar
from laberinto.movimiento import LogicaDeMovimiento
from laberinto.juego import Juego

tablero = Tablero()
tablero.cargar_desde_texto("1 1\n1 S\n")
avatar = Avatar()                      # starts at row 0, column 0
juego = Juego(tablero, avatar, LogicaDeMovimiento())
juego.iniciar()                        # prints "El juego ha comenzado."
juego.play("d")
juego.play("s")                        # lands on the exit and prints "win"
print(juego.gano(), juego.puntaje)     # True 96
```

The library is made of these modules:

- `laberinto.fichas`: the tile classes `Ficha`, `Camino`, `Abismo` and
  `Salida`, and `ficha_desde_simbolo`, which builds a tile from its character.
- `laberinto.tablero`: `Tablero`, with `cargar_desde_archivo`,
  `cargar_desde_texto` and `get_ficha`. `get_ficha` returns `None` for an
  empty cell or a position outside the board. `len(tablero)` is the number of
  rows.
- `laberinto.personaje`: `Personaje` and its subclasses `Avatar`, `AvatarCPU`
  and `AvatarInnovador`. Each holds a `fila` and a `columna`.
- `laberinto.movimiento`: the movement rules `LogicaDeMovimiento`,
  `LogicaMovimientoAleatorio` and `LogicaMovimientoInnovador`.
  `LogicaMovimientoAleatorio` takes an optional `random.Random`.
- `laberinto.juego`: `Juego`, with `iniciar`, `play`, `mover_avatar`,
  `puntuar` and `gano`. Its `estado` attribute turns `False` after a fall.
- `laberinto.vista`: `VistaConsola`, which draws the game, prints messages and
  reads keys. It takes optional input and output streams and a
  `random.Random`.
- `laberinto.cli`: `jugar(tablero, avatar, logica, vista)` runs one game to its
  end and returns the final score.

## What it does not do

- The package comes with no board, so you must provide a board file.
- Scores are not saved between games.