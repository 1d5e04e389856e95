"""Command-line training of the event classifier on a directory of event files."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

import numpy as np

from prglab.controller import LABEL_DIRECTORIES, Controller

DEFAULT_TOPOLOGY = (224000, 2, 1)
DEFAULT_DATA_DIR = "../materials/dataset_new"
USAGE = "Usage:\n\tfcnn <epochs> <epoch_size> <batch_size>"


class _ScriptController(Controller):
    """Counts each distinct network output once per batch, the last label winning."""

    @staticmethod
    def _batch_cost(events: list[tuple[float, int]]) -> float:
        by_output = dict(events)
        return sum(abs(label - output) for output, label in by_output.items())


def train(
    data_dir: str | Path,
    n_epochs: int,
    epoch_size: int,
    batch_size: int,
    topology: Sequence[int] = DEFAULT_TOPOLOGY,
    rng: np.random.Generator | None = None,
) -> list[float]:
    """Train a fresh network on ``data_dir/qgp`` and ``data_dir/nqgp``; return the losses."""
    controller = _ScriptController(topology, rng)
    base = Path(data_dir)
    controller.complete_list = [
        controller.parse_directory(base / name) for name in LABEL_DIRECTORIES
    ]
    return controller.run_epoch(n_epochs, epoch_size, batch_size)


def main(argv: Sequence[str] | None = None) -> int:
    """Train with ``<epochs> <epoch_size> <batch_size>`` from the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if len(args) != 3:
            raise ValueError(USAGE)
        n_epochs, epoch_size, batch_size = (int(arg) for arg in args)
        train(DEFAULT_DATA_DIR, n_epochs, epoch_size, batch_size)
    except Exception as exc:  # noqa: BLE001 - report and signal failure
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())