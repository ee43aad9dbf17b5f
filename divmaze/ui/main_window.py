"""Main window for the recursive division maze generator."""

from PySide6.QtCore import Qt
from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QCheckBox, QGroupBox, QHBoxLayout, QLabel, QMainWindow, QProgressBar,
    QPushButton, QSlider, QStatusBar, QVBoxLayout, QWidget
)

from ..app.controller import MazeController
from ..domain.types import MAX_DIMENSION, MIN_DIMENSION, MazeDescription
from .grid_view import GridView


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, controller: MazeController):
        super().__init__()
        self.controller = controller

        self.setWindowTitle("Recursive Division Maze Generator")
        self.setMinimumSize(900, 650)

        self._create_ui()
        self._setup_connections()
        self._setup_shortcuts()
        self._update_dimension_labels()

    def _create_ui(self):
        """Create the user interface."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QHBoxLayout(central_widget)

        self.grid_view = GridView(self.controller)
        main_layout.addWidget(self.grid_view, 3)

        main_layout.addWidget(self._create_controls(), 1)

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)
        self.status_bar.showMessage("Ready - choose dimensions and press Generate | Press 'Q' to quit, Enter to generate")

    def _create_controls(self) -> QGroupBox:
        """Create the control panel."""
        group = QGroupBox("Maze")
        layout = QVBoxLayout(group)

        # Dimension sliders
        self.width_label = QLabel()
        self.width_slider = QSlider(Qt.Horizontal)
        self.width_slider.setRange(MIN_DIMENSION, MAX_DIMENSION)
        self.width_slider.setValue(self.controller.width)

        self.height_label = QLabel()
        self.height_slider = QSlider(Qt.Horizontal)
        self.height_slider.setRange(MIN_DIMENSION, MAX_DIMENSION)
        self.height_slider.setValue(self.controller.height)

        for widget in [self.width_label, self.width_slider, self.height_label, self.height_slider]:
            layout.addWidget(widget)

        # Reveal speed
        layout.addWidget(QLabel("Reveal interval (ms)"))
        self.speed_slider = QSlider(Qt.Horizontal)
        self.speed_slider.setRange(1, 250)
        self.speed_slider.setValue(self.controller.speed)
        layout.addWidget(self.speed_slider)

        # Toggles
        self.debug_cb = QCheckBox("Debug visuals")
        self.debug_cb.setChecked(self.controller.debug_visual)
        self.immediate_cb = QCheckBox("Immediate")
        self.immediate_cb.setChecked(self.controller.immediate)
        layout.addWidget(self.debug_cb)
        layout.addWidget(self.immediate_cb)

        self.generate_btn = QPushButton("Generate")
        layout.addWidget(self.generate_btn)

        self.progress_bar = QProgressBar()
        self.progress_bar.setRange(0, 100)
        layout.addWidget(self.progress_bar)

        self.state_label = QLabel(self.controller.state_description)
        layout.addWidget(self.state_label)

        self.summary_label = QLabel("No maze generated")
        self.summary_label.setWordWrap(True)
        layout.addWidget(self.summary_label)

        layout.addStretch()
        return group

    def _setup_connections(self):
        """Setup signal connections."""
        self.width_slider.valueChanged.connect(self._on_width_changed)
        self.height_slider.valueChanged.connect(self._on_height_changed)
        self.speed_slider.valueChanged.connect(self._on_speed_changed)
        self.debug_cb.toggled.connect(self._on_debug_toggled)
        self.immediate_cb.toggled.connect(self._on_immediate_toggled)
        self.generate_btn.clicked.connect(self.controller.generate)

        self.controller.maze_generated.connect(self._on_maze_generated)
        self.controller.generation_rejected.connect(self._on_generation_rejected)
        self.controller.reveal_progress.connect(self._on_reveal_progress)
        self.controller.error_occurred.connect(self._on_error)
        self.controller.state_changed.connect(self.state_label.setText)
        self.controller.config_changed.connect(self._update_dimension_labels)

    def _setup_shortcuts(self):
        """Setup keyboard shortcuts."""
        QShortcut(QKeySequence("Q"), self, self.close)
        QShortcut(QKeySequence("Return"), self, self.controller.generate)

    def _update_dimension_labels(self):
        self.width_label.setText(f"Width: {self.controller.width}")
        self.height_label.setText(f"Height: {self.controller.height}")

    def _on_width_changed(self, value: int):
        self.controller.width = value

    def _on_height_changed(self, value: int):
        self.controller.height = value

    def _on_speed_changed(self, value: int):
        self.controller.speed = value

    def _on_debug_toggled(self, checked: bool):
        self.controller.debug_visual = checked

    def _on_immediate_toggled(self, checked: bool):
        self.controller.immediate = checked

    def _on_maze_generated(self, description: MazeDescription):
        self.summary_label.setText(
            f"Chambers: {len(description.chambers)}\n"
            f"Wall cells: {len(description.wall_cells)}\n"
            f"Openings: {len(description.opening_cells)}\n"
            f"Connectors corrected: {description.relocated_count}"
        )
        if description.warnings:
            self.status_bar.showMessage(f"Generated with {len(description.warnings)} warning(s): {description.warnings[0]}")
        else:
            self.status_bar.showMessage(f"Generated {description.width}x{description.height} maze")

    def _on_generation_rejected(self, reason: str):
        self.status_bar.showMessage(reason)

    def _on_reveal_progress(self, fraction: float):
        self.progress_bar.setValue(int(fraction * 100))

    def _on_error(self, message: str):
        self.status_bar.showMessage(message)

    def closeEvent(self, event):
        """Stop any running reveal before closing."""
        self.controller.cleanup()
        super().closeEvent(event)
