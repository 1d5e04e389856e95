"""Game of Life, visual cryptography on bit pictures and a small multi-layer perceptron trainer."""

__version__ = "0.1.0"