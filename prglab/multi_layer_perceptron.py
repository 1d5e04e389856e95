"""A multi-layer perceptron built from :class:`~prglab.layer.Layer` objects."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

import numpy as np

from prglab.layer import Layer


class MultiLayerPerceptron:
    """A stack of layers; layer ``i`` maps ``topology[i]`` values to ``topology[i + 1]``."""

    def __init__(
        self, topology: Sequence[int], rng: np.random.Generator | None = None
    ) -> None:
        sizes = list(topology)
        if len(sizes) < 2:
            raise ValueError("a topology needs at least an input and an output size")
        rng = rng if rng is not None else np.random.default_rng()
        self._layers = [
            Layer(size, next_size, rng=rng) for size, next_size in zip(sizes, sizes[1:])
        ]

    def __getitem__(self, index: int) -> Layer:
        return self._layers[index]

    def __len__(self) -> int:
        return len(self._layers)

    def __iter__(self) -> Iterator[Layer]:
        return iter(self._layers)

    def __repr__(self) -> str:
        return f"MultiLayerPerceptron({self._layers!r})"

    def forward_propagation(self, inputs: object) -> np.ndarray:
        """Feed ``inputs`` through every layer and return the last layer's output."""
        values = np.asarray(inputs, dtype=float)
        for layer in self._layers:
            layer.feed_forward(values)
            values = layer.output
        return values.copy()

    def back_propagation(self, mean_cost: object, inputs: object) -> None:
        """Propagate ``mean_cost`` backwards and update every layer's weights.

        ``inputs`` is the input column that was used for the forward pass.
        """
        cost = np.asarray(mean_cost, dtype=float)
        for layer in reversed(self._layers[1:]):
            layer.calculate_gradients(cost)
            cost = layer.weights @ layer.output
        for previous, layer in reversed(list(zip(self._layers, self._layers[1:]))):
            layer.update_weights(previous.output)
        input_layer = self._layers[0]
        column = np.asarray(inputs, dtype=float)
        if column.ndim == 1:
            column = column.reshape(-1, 1)
        input_layer.weights = input_layer.weights - (input_layer.output @ column.T).T