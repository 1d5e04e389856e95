from pathlib import Path

import numpy as np
import pytest

from prglab.controller import EVENTS_PER_LABEL, Controller


def _make_dataset(root: Path, count: int, size: int = 4) -> Path:
    for label in ("qgp", "nqgp"):
        directory = root / label
        directory.mkdir(parents=True)
        for index in range(count):
            values = " ".join(str(index % 3 + value + 1) for value in range(size))
            (directory / f"event_{index:03d}.txt").write_text(values + "\n")
    return root


def _controller(seed: int = 0) -> Controller:
    return Controller([4, 2, 1], rng=np.random.default_rng(seed))


def test_import_file_reads_column(tmp_path):
    path = tmp_path / "event.txt"
    path.write_text("1 2 3\n4\n")
    column = _controller().import_file(path)
    assert column.shape == (4, 1)
    assert column[:, 0].tolist() == [1.0, 2.0, 3.0, 4.0]


def test_import_file_too_short(tmp_path):
    path = tmp_path / "event.txt"
    path.write_text("1 2\n")
    with pytest.raises(ValueError):
        _controller().import_file(path)


def test_import_file_missing(tmp_path):
    with pytest.raises(OSError):
        _controller().import_file(tmp_path / "missing.txt")


def test_parse_directory_sorted(tmp_path):
    for name in ("b.txt", "a.txt", "c.txt"):
        (tmp_path / name).write_text("0")
    entries = _controller().parse_directory(tmp_path)
    assert [entry.name for entry in entries] == ["a.txt", "b.txt", "c.txt"]


def test_complete_list_is_padded():
    controller = _controller()
    controller.complete_list = [[Path("x")], []]
    assert [len(entries) for entries in controller.complete_list] == [
        EVENTS_PER_LABEL,
        EVENTS_PER_LABEL,
    ]
    assert controller.complete_list[0][0] == Path("x")
    assert controller.complete_list[0][1] is None


def test_run_epoch_rejects_too_many_events():
    with pytest.raises(ValueError, match="Only 10000 events available"):
        _controller().run_epoch(1, 10001, 2)


def test_run_epoch_without_events():
    with pytest.raises(ValueError):
        _controller().run_epoch(1, 0, 2)


def test_batch_normalization_pops_and_updates(tmp_path):
    data = _make_dataset(tmp_path, 2)
    controller = _controller()
    files = [sorted((data / name).iterdir()) for name in ("qgp", "nqgp")]
    before = controller.network[0].weights.copy()
    cost = controller.batch_normalization(3, files)
    after = controller.network[0].weights
    assert 0.0 <= cost <= 3.0
    assert sum(len(entries) for entries in controller.complete_list) == 2 * EVENTS_PER_LABEL - 3
    assert np.all(after < before)


def test_batch_normalization_rejects_empty_batch(tmp_path):
    with pytest.raises(ValueError):
        _controller().batch_normalization(0, [[tmp_path], [tmp_path]])


def test_run_epoch_notifies_listeners(tmp_path):
    data = _make_dataset(tmp_path, 10)
    controller = _controller(1)
    controller.complete_list = [controller.parse_directory(data / name) for name in ("qgp", "nqgp")]
    epochs = []
    points = []
    controller.subscribe_epoch(epochs.append)
    controller.subscribe_datapoint(lambda name, x, y: points.append((name, x, y)))
    losses = controller.run_epoch(3, 20, 4)
    assert epochs == [1, 2, 3]
    assert [(name, x) for name, x, _ in points] == [
        ("time", 1), ("loss", 1), ("time", 2), ("loss", 2), ("time", 3), ("loss", 3),
    ]
    assert [y for name, _, y in points if name == "loss"] == losses
    assert all(y >= 0 for name, _, y in points if name == "time")
    assert all(0 <= loss <= 4 and float(loss).is_integer() for loss in losses)


def test_start_training(tmp_path):
    data = _make_dataset(tmp_path / "data", 50)
    controller = _controller(2)
    controller.set_training_data_directory(data)
    controller.set_epoch_no(2)
    epochs = []
    controller.subscribe_epoch(epochs.append)
    losses = controller.start_training()
    assert len(losses) == 2
    assert epochs == [1, 2]


def test_start_training_without_directory(tmp_path):
    controller = _controller()
    controller.set_training_data_directory(tmp_path / "nowhere")
    with pytest.raises(FileNotFoundError):
        controller.start_training()


def test_full_test_split_leaves_nothing_to_train(tmp_path):
    data = _make_dataset(tmp_path / "data", 50)
    controller = _controller()
    controller.set_training_data_directory(data)
    controller.set_epoch_no(1)
    controller.set_split(100)
    with pytest.raises(ValueError):
        controller.start_training()


def test_set_topology_replaces_network():
    controller = _controller()
    controller.set_topology([4, 3, 2, 1])
    assert len(controller.network) == 3
    assert controller.network[0].weights.shape == (4, 3)