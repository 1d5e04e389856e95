# prglab

A small collection of programs built around boolean grids and a simple
neural network:

- **Game of Life** – a toroidal cellular automaton
  (`prglab.cellular_automaton`, on top of the boolean grid in
  `prglab.matrix`) with an interactive console menu (`prglab.game_of_life`).
- **Visual cryptography** – encrypt, decrypt and overlay black-and-white
  pictures stored as text (`prglab.vis_crypt`).
- **Multi-layer perceptron** – a fully connected network with softmax layers
  (`prglab.layer`, `prglab.multi_layer_perceptron`), a training controller
  that reads event files from a data directory (`prglab.controller`,
  `prglab.fcnn`) and a store for the measurements taken during training
  (`prglab.datastorage`).
- **Flatten** – a small menu that copies a random digit matrix into a
  one-dimensional array (`prglab.flatten`).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

### `game-of-life`

Starts an interactive menu on a 30×30 grid that begins empty: import and
export a grid, print it, compute the next generation, read or toggle a single
cell, or fill the grid at random. Enter `0` to leave.

Grid files hold the number of rows on the first line, the number of columns
on the second, and then one line per row where `*` is a living cell and `o`
a dead one:

```
3
4
o*oo
o*oo
o*oo
```

Each cell has eight neighbours and the grid wraps around at its edges. A cell
with exactly three living neighbours lives in the next generation, one with
exactly two keeps its state, and every other cell dies.

### `visualencrypt`

```
visualencrypt encode <source> <result> <key>
visualencrypt decode <image_a> <image_b> <result>
visualencrypt overlay <image_a> <image_b> <result>
```

With any other number of arguments the usage text is printed. Pictures are
text files with one row per line; a line holding spaces is split into several
rows at each space. On reading, `1` and `A` are set pixels and every other
character an unset one. Plain pictures are written with `1` and `0`; cipher
pictures and keys with `A` and `B`. Encoding, decoding and overlaying combine
two pictures of the same size pixel by pixel with exclusive-or; pictures of
different sizes, or files whose rows differ in length, are rejected with an
error message and exit status 1.

### `fcnn`

```
fcnn <epochs> <epoch_size> <batch_size>
```

Trains a fresh network of layer sizes 224000, 2, 1 on the event files in the
`qgp` and `nqgp` sub-directories of `../materials/dataset_new`, relative to the
current directory. Each event file holds whitespace-separated integers, at
least as many as the network has inputs. At most 10000 events are available
per epoch. Errors, including a wrong number of arguments, are printed and
give exit status 1.

### `prglab-flatten`

A menu that creates a random 30×30 matrix of digits (`1`), copies it into a
one-dimensional array (`3`) and prints the result (`4`); `0` leaves.

## Library use

```python
from prglab.cellular_automaton import CellularAutomaton

automaton = CellularAutomaton(30, 30, 0)   # rows, columns, pause in ms per step
automaton[1][2] = True
automaton.advance(10)
print(automaton)
```

```python
from prglab.vis_crypt import encode_files, decode_files

encode_files("picture.txt", "encrypted.txt", "key.txt")
decode_files("encrypted.txt", "key.txt", "decrypted.txt")
```

A random key of matching size can be made with `CipherPicture.random_image`
and written with `export_file`.

```python
import numpy as np
from prglab.multi_layer_perceptron import MultiLayerPerceptron

network = MultiLayerPerceptron([4, 3, 1], rng=np.random.default_rng(0))
output = network.forward_propagation([1, 0, 1, 0])
```

`prglab.controller.Controller` runs the training loop and tells subscribers
(`subscribe_epoch`, `subscribe_datapoint`) about every finished epoch and
every new `"time"` and `"loss"` measurement. `prglab.fcnn.train` runs it on a
data directory of your choice. `prglab.datastorage.DataStorage` collects such
measurements; its `plot_series` returns the time, loss or accumulated-loss
series to draw, `plot_ranges` the axis limits for them, and
`network_topology` the layer sizes for one, two or three hidden layers.

## What is not included

There is no graphical interface: no windows for the Game of Life or the
picture tools, and no plotting of the training graphs. `DataStorage` and
`plot_ranges` only provide the data and axis limits a plot would use.