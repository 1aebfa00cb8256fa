"""Core pieces of a small 2D game engine: vectors, matrices, camera, timers, models, terrain, sprites, resources, chunks and input."""

__version__ = "0.1.0"