"""Tile graphics items for maze visualization."""

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QBrush, QColor, QPen
from PySide6.QtWidgets import QGraphicsRectItem

from ..domain.types import Material


class MazeTile(QGraphicsRectItem):
    """Graphics item representing a single maze cell."""

    # Color scheme for different materials
    COLORS = {
        "floor": QColor(240, 240, 240),      # Light gray
        "wall": QColor(64, 64, 64),          # Dark gray
        "corner": QColor(255, 255, 255),     # White
        "empty": QColor(200, 230, 200),      # Pale green
    }

    def __init__(self, row: int, column: int, size: float, flip_height: int):
        super().__init__(0, 0, size, size)
        self.grid_row = row
        self.grid_column = column
        self.size = size
        self.material: Optional[Material] = None
        self.tag: Optional[str] = None

        # Scene y grows downwards while maze columns grow upwards
        self.setPos(row * size, (flip_height - 1 - column) * size)
        self.setPen(QPen(Qt.NoPen))
        self.setVisible(False)

    def set_material(self, material: Material, tag: Optional[str] = None):
        """Update the tile appearance for a material and optional debug tag."""
        self.material = material
        self.tag = tag

        color = self.COLORS.get(material, self.COLORS["floor"])
        if material == "wall" and tag:
            color = QColor(tag)
        self.setBrush(QBrush(color))

        if material in ("wall", "corner"):
            self.setPen(QPen(Qt.black, 0.5))
        else:
            self.setPen(QPen(Qt.gray, 0.25))
        self.setVisible(True)
