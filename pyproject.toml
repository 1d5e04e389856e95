[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "prglab"
version = "0.1.0"
description = "Game of Life, visual cryptography on bit pictures and a small multi-layer perceptron trainer"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "game-of-life",
    "cellular-automaton",
    "visual-cryptography",
    "neural-network",
    "perceptron",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
prglab-flatten = "prglab.flatten:main"
game-of-life = "prglab.game_of_life:main"
visualencrypt = "prglab.vis_crypt:main"
fcnn = "prglab.fcnn:main"

[tool.hatch.build.targets.wheel]
packages = ["prglab"]

[tool.pytest.ini_options]
addopts = "-ra"
