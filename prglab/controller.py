"""Training controller that feeds event files through a multi-layer perceptron."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

import numpy as np

from prglab.multi_layer_perceptron import MultiLayerPerceptron

DEFAULT_TOPOLOGY = (224000, 2, 1)
EVENTS_PER_LABEL = 5000
MAX_EVENTS = 10000
DEFAULT_EPOCH_NO = 100
TRAINING_EPOCH_SIZE = 100
TRAINING_BATCH_SIZE = 10
LABEL_DIRECTORIES = ("qgp", "nqgp")

EpochCallback = Callable[[int], None]
DatapointCallback = Callable[[str, float, float], None]


class Controller:
    """Holds the network, the event file lists and the training settings.

    Events are split into two labels: index 0 for ``qgp`` files and index 1
    for ``nqgp`` files. Listeners are told when an epoch finishes and when a
    new measurement (``"time"`` or ``"loss"``) is available.
    """

    def __init__(
        self,
        topology: Sequence[int] = DEFAULT_TOPOLOGY,
        rng: np.random.Generator | None = None,
    ) -> None:
        self._rng = rng if rng is not None else np.random.default_rng()
        self.network = MultiLayerPerceptron(topology, rng=self._rng)
        self.percentage_test = 0
        self.epoch_no = DEFAULT_EPOCH_NO
        self.training_data_path = ""
        self.complete_list = [[], []]
        self._epoch_listeners: list[EpochCallback] = []
        self._datapoint_listeners: list[DatapointCallback] = []

    @property
    def complete_list(self) -> list[list[Path | None]]:
        """Event files per label, padded with ``None`` to at least 5000 entries."""
        return self._complete_list

    @complete_list.setter
    def complete_list(self, lists: Sequence[Iterable[Path | None]]) -> None:
        if len(lists) != len(LABEL_DIRECTORIES):
            raise ValueError("expected one event list per label")
        padded = []
        for entries in lists:
            entries = list(entries)
            entries.extend([None] * (EVENTS_PER_LABEL - len(entries)))
            padded.append(entries)
        self._complete_list = padded

    @property
    def input_size(self) -> int:
        """Number of values the network expects per event."""
        return self.network[0].weights.shape[0]

    def subscribe_epoch(self, callback: EpochCallback) -> None:
        """Call ``callback(epoch_number)`` after every trained epoch."""
        self._epoch_listeners.append(callback)

    def subscribe_datapoint(self, callback: DatapointCallback) -> None:
        """Call ``callback(plot_name, x, y)`` for every new measurement."""
        self._datapoint_listeners.append(callback)

    def _emit_epoch(self, epoch: int) -> None:
        for callback in self._epoch_listeners:
            callback(epoch)

    def _emit_datapoint(self, name: str, x: float, y: float) -> None:
        for callback in self._datapoint_listeners:
            callback(name, x, y)

    def import_file(self, path: str | Path) -> np.ndarray:
        """Read one event file as a column of ``input_size`` integer values."""
        with open(path, encoding="utf-8") as stream:
            tokens = stream.read().split()
        if len(tokens) < self.input_size:
            raise ValueError(
                f"event file {path} holds {len(tokens)} values, "
                f"expected {self.input_size}"
            )
        values = [int(token) for token in tokens[: self.input_size]]
        return np.array(values, dtype=float).reshape(-1, 1)

    def parse_directory(self, input_dir: str | Path) -> list[Path]:
        """Return the entries of ``input_dir`` in name order."""
        return sorted(Path(input_dir).iterdir())

    @staticmethod
    def _batch_cost(events: list[tuple[float, int]]) -> float:
        return sum(abs(label - output) for output, label in events)

    def batch_normalization(
        self, batch_size: int, copied_list: Sequence[Sequence[Path | None]]
    ) -> float:
        """Feed ``batch_size`` randomly labelled events forward, then back-propagate.

        For each event a label is drawn at random and the last file of that
        label in ``copied_list`` is used; the matching list in
        :attr:`complete_list` loses its last entry. The summed absolute
        difference between labels and outputs is propagated back together
        with the mean input, and returned.
        """
        if batch_size <= 0:
            raise ValueError("batch size must be positive")
        mean_inputs = np.zeros((self.input_size, 1))
        events: list[tuple[float, int]] = []
        for _ in range(batch_size):
            label = int(self._rng.integers(2))
            candidates = copied_list[label]
            if not candidates:
                raise ValueError("no events available for training")
            event = candidates[-1]
            if self._complete_list[label]:
                self._complete_list[label].pop()
            if event is None:
                raise ValueError("no event file available for training")
            inputs = self.import_file(event)
            mean_inputs += inputs
            self.network.forward_propagation(inputs)
            events.append((float(self.network[-1].output[0, 0]), label))
        mean_inputs /= batch_size
        total_cost = self._batch_cost(events)
        self.network.back_propagation(np.array([[total_cost]]), mean_inputs)
        return total_cost

    def run_epoch(self, n_epochs: int, epoch_size: int, batch_size: int) -> list[float]:
        """Train ``n_epochs`` epochs and return the loss of each one."""
        if epoch_size > MAX_EVENTS:
            raise ValueError(f"Only {MAX_EVENTS} events available")
        half = epoch_size // 2
        # Test files are skipped by starting the training selection further in.
        first = self.percentage_test // 100 * EVENTS_PER_LABEL
        losses = []
        previous = time.monotonic()
        for epoch in range(1, n_epochs + 1):
            copied_list = [
                [
                    entries[index] if first <= index < len(entries) else None
                    for index in range(half)
                ]
                for entries in self._complete_list
            ]
            loss = self.batch_normalization(batch_size, copied_list)
            losses.append(loss)
            self._emit_epoch(epoch)
            now = time.monotonic()
            self._emit_datapoint("time", epoch, now - previous)
            self._emit_datapoint("loss", epoch, loss)
            previous = now
        return losses

    def set_training_data_directory(self, path: str | Path) -> None:
        """Use ``path``, holding ``qgp`` and ``nqgp`` folders, for training."""
        self.training_data_path = str(path)

    def set_topology(self, topology: Sequence[int]) -> None:
        """Replace the network with a fresh one of the given layer sizes."""
        self.network = MultiLayerPerceptron(topology, rng=self._rng)

    def set_split(self, percentage_test: int) -> None:
        """Set the percentage of events kept back for testing."""
        self.percentage_test = percentage_test

    def set_epoch_no(self, epoch_no: int) -> None:
        """Set the number of epochs :meth:`start_training` runs."""
        self.epoch_no = epoch_no

    def start_training(self) -> list[float]:
        """Load the event lists from the training directory and train on them."""
        base = Path(self.training_data_path)
        self.complete_list = [self.parse_directory(base / name) for name in LABEL_DIRECTORIES]
        return self.run_epoch(self.epoch_no, TRAINING_EPOCH_SIZE, TRAINING_BATCH_SIZE)