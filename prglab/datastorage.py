"""Storage of training measurements and the data behind their plots."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from enum import IntEnum
from itertools import accumulate

TIME = "time"
LOSS = "loss"

DEFAULT_X_MAX = 5.0
DEFAULT_Y_MAX = 2.0

_TOPOLOGIES = {
    0: [224000, 2, 1],
    1: [224000, 64, 2, 1],
    2: [224000, 64, 64, 2, 1],
}


class PlotKind(IntEnum):
    """What a graph shows, in the order of the plot selector."""

    TIME = 0
    LOSS = 1
    ACCUMULATED_LOSS = 2


class DataStorage:
    """Series of (x, y) points by name, with listeners told of every new point."""

    def __init__(self) -> None:
        self.data: dict[str, tuple[list[float], list[float]]] = {}
        self._listeners: list[Callable[[], None]] = []

    def subscribe(self, callback: Callable[[], None]) -> None:
        """Call ``callback`` with no arguments whenever a point is added."""
        self._listeners.append(callback)

    def accept_new_datapoint(self, plot_name: str, x: float, y: float) -> None:
        """Append a point to the series ``plot_name`` and notify listeners."""
        xs, ys = self.data.setdefault(plot_name, ([], []))
        xs.append(x)
        ys.append(y)
        for callback in self._listeners:
            callback()

    def _series(self, name: str) -> tuple[list[float], list[float]]:
        xs, ys = self.data.get(name, ([], []))
        return list(xs), list(ys)

    def plot_series(self, plot_kind: PlotKind | int) -> tuple[list[float], list[float]]:
        """Return the x and y values to draw for ``plot_kind``.

        The accumulated loss at a point is the sum of all earlier losses,
        not including the point itself.
        """
        kind = PlotKind(plot_kind)
        if kind is PlotKind.TIME:
            return self._series(TIME)
        xs, ys = self._series(LOSS)
        if kind is PlotKind.LOSS:
            return xs, ys
        accumulated = list(accumulate(ys, initial=0.0))[: len(xs)]
        return xs, accumulated


def plot_ranges(xs: Sequence[float], ys: Sequence[float]) -> tuple[float, float]:
    """Return the upper ends of the x and y axes; both axes start at zero."""
    x_max, y_max = DEFAULT_X_MAX, DEFAULT_Y_MAX
    if xs and ys:
        last_x = math.ceil(xs[-1])
        top_y = math.ceil(max(ys))
        if x_max <= last_x:
            x_max = float(last_x + 1)
        if y_max < top_y:
            y_max = float(top_y + 1)
    return x_max, y_max


def network_topology(mode: int) -> list[int]:
    """Return the layer sizes for one, two or three hidden layers (modes 0, 1, 2)."""
    try:
        return list(_TOPOLOGIES[mode])
    except KeyError:
        raise ValueError(f"unknown network mode: {mode!r}") from None