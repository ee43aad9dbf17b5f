"""Grid view that paints generated mazes."""

from typing import Dict, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QPainter
from PySide6.QtWidgets import QGraphicsScene, QGraphicsView

from ..app.controller import MazeController
from ..domain.types import Coord, MazeDescription, Material
from .tiles import MazeTile


class GridView(QGraphicsView):
    """Graphics view displaying the maze; acts as the controller's paint sink."""

    def __init__(self, controller: MazeController):
        super().__init__()

        self.controller = controller
        self.scene = QGraphicsScene()
        self.setScene(self.scene)

        self.tiles: Dict[Coord, MazeTile] = {}
        self.tile_size = 12.0
        self._extent = (0, 0)

        self.setRenderHint(QPainter.Antialiasing, False)
        self.setDragMode(QGraphicsView.ScrollHandDrag)

        self.controller.maze_generated.connect(self._on_maze_generated)
        self.controller.reveal_finished.connect(self.fit_in_view)
        self.controller.set_paint_sink(self)

    def _on_maze_generated(self, description: MazeDescription):
        """Rebuild tiles for a new extent and frame the maze."""
        if description.floor_extent != self._extent:
            self._build_tiles(*description.floor_extent)
        self.fit_in_view()

    def _build_tiles(self, width: int, height: int):
        self.scene.clear()
        self.tiles.clear()
        self._extent = (width, height)
        self.scene.setSceneRect(0, 0, width * self.tile_size, height * self.tile_size)

        for row in range(width):
            for column in range(height):
                tile = MazeTile(row, column, self.tile_size, height)
                self.scene.addItem(tile)
                self.tiles[(row, column)] = tile

    # Paint sink

    def clear_all(self):
        for tile in self.tiles.values():
            tile.setVisible(False)

    def paint(self, cell: Coord, material: Material, tag: Optional[str] = None):
        tile = self.tiles.get(cell)
        if tile:
            tile.set_material(material, tag)

    # Camera

    def wheelEvent(self, event):
        """Handle mouse wheel for zooming."""
        zoom_factor = 1.15
        if event.angleDelta().y() > 0:
            self.scale(zoom_factor, zoom_factor)
        else:
            self.scale(1 / zoom_factor, 1 / zoom_factor)

    def fit_in_view(self):
        """Fit the entire maze in the view."""
        if self.tiles:
            self.fitInView(self.scene.sceneRect(), Qt.KeepAspectRatio)
