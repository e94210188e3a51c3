from __future__ import annotations

import sys

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QApplication,
    QCheckBox,
    QComboBox,
    QFrame,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from app.adaptivegrid.layout.geometry import ALIGNMENT_NAMES, Alignment
from native.adaptivegrid_app.grid_layout import AdaptiveGridLayout

SAMPLE_TEXTS = [
    "Short",
    "Medium Text",
    "Very Long Label Here",
    "Tiny",
    "Another One",
    "X",
    "This one is rather quite long",
    "123",
]

CELL_STYLE = (
    "QLabel { padding: 8px; background: rgba(0, 122, 255, 40);"
    " border: 1px solid rgba(0, 122, 255, 128); border-radius: 4px; }"
)


class GridDemoWindow(QMainWindow):
    """Resizable window showing the grid reflow as its width changes."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("AdaptiveGrid")
        self.resize(500, 320)

        self.equal_width_box = QCheckBox("Equal width")
        self.alignment_combo = QComboBox()
        self.alignment_combo.addItems(list(ALIGNMENT_NAMES))
        self.alignment_combo.setCurrentText("center")

        controls = QHBoxLayout()
        controls.addWidget(self.equal_width_box)
        controls.addWidget(QLabel("Alignment:"))
        controls.addWidget(self.alignment_combo)
        controls.addStretch(1)

        self.grid_host = QFrame()
        self.grid_host.setFrameShape(QFrame.Shape.StyledPanel)
        self.grid_layout = AdaptiveGridLayout(self.grid_host, horizontal_spacing=8, vertical_spacing=8)
        for text in SAMPLE_TEXTS:
            label = QLabel(text)
            label.setStyleSheet(CELL_STYLE)
            label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            self.grid_layout.addWidget(label)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self.grid_host)

        root = QWidget()
        layout = QVBoxLayout(root)
        layout.addLayout(controls)
        layout.addWidget(scroll, 1)
        self.setCentralWidget(root)

        self.equal_width_box.toggled.connect(self.grid_layout.setEqualWidth)
        self.alignment_combo.currentTextChanged.connect(self._on_alignment_changed)

    def _on_alignment_changed(self, name: str) -> None:
        self.grid_layout.setGridAlignment(Alignment.named(name))


def main() -> None:
    app = QApplication(sys.argv)
    app.setApplicationName("AdaptiveGrid")

    win = GridDemoWindow()
    win.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
