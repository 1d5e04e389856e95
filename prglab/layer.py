"""One layer of a fully connected network with a softmax activation."""

from __future__ import annotations

from collections.abc import Callable

import numpy as np

Activation = Callable[[np.ndarray], np.ndarray]
Derivative = Callable[["Layer", np.ndarray], np.ndarray]


def _as_column(values: object) -> np.ndarray:
    array = np.asarray(values, dtype=float)
    if array.ndim == 1:
        array = array.reshape(-1, 1)
    if array.ndim != 2:
        raise ValueError("expected a column vector or a two-dimensional matrix")
    return array


def softmax(values: object) -> np.ndarray:
    """Return the softmax of the first column of ``values``, as a matrix of the same shape.

    The maximum is subtracted before exponentiating so large inputs do not overflow.
    """
    array = _as_column(values)
    if array.size == 0:
        raise ValueError("softmax of an empty input")
    column = array[:, 0]
    exps = np.exp(column - column.max())
    result = np.zeros_like(array)
    result[:, 0] = exps / exps.sum()
    return result


def softmax_derivative(layer: Layer, values: object) -> np.ndarray:
    """Return ``a * (1 - a)`` where ``a`` is the layer's activation of ``values``."""
    activated = layer.activation(_as_column(values))
    return activated * (1.0 - activated)


class Layer:
    """A layer holding a weight matrix of shape ``(size, prev_size)``.

    :meth:`feed_forward` takes a column of ``size`` rows and produces an
    output column of ``prev_size`` rows. Weights start uniformly random in
    ``[0, 1)``.
    """

    def __init__(
        self,
        size: int,
        prev_size: int,
        activation: Activation = softmax,
        derivative: Derivative = softmax_derivative,
        rng: np.random.Generator | None = None,
    ) -> None:
        if size < 0 or prev_size < 0:
            raise ValueError("layer sizes must not be negative")
        rng = rng if rng is not None else np.random.default_rng()
        self.activation = activation
        self.derivative = derivative
        self.output = np.zeros((size, 1))
        self.sum_z = np.zeros((size, 1))
        self.weights = rng.random((size, prev_size))

    def __repr__(self) -> str:
        rows, cols = self.weights.shape
        return f"Layer({rows}, {cols})"

    def feed_forward(self, inputs: object) -> None:
        """Store the weighted sums of ``inputs`` and their activation."""
        self.sum_z = self.weights.T @ _as_column(inputs)
        self.output = self.activation(self.sum_z)

    def calculate_gradients(self, target: object) -> None:
        """Replace the output with ``target`` times the derivative at the output."""
        derivative = self.derivative(self, self.output)
        target_array = _as_column(target)
        if target_array.shape != derivative.shape:
            raise ValueError(
                f"target shape {target_array.shape} does not match {derivative.shape}"
            )
        self.output = target_array * derivative

    def update_weights(self, prev_output: object) -> None:
        """Subtract the outer product of ``prev_output`` and the stored gradients."""
        self.weights = self.weights - _as_column(prev_output) @ self.output.T