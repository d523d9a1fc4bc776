"""Spinning torus rasterizer with a PySide6 viewer."""
