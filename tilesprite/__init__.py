"""Sprite animation, tile maps, 2D collision tests and vector, matrix and quaternion helpers."""

__version__ = "0.1.0"