"""Recursive Division Maze Generator.

This package splits a rectangular grid into chambers with the recursive
division algorithm and opens connectors between them, with an optional
PySide6 viewer that reveals the result tile by tile.
"""

__version__ = "1.0.0"
__author__ = "Recursive Division Maze Demo"
