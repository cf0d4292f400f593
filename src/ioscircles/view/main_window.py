"""
Main Application Window
=======================
Shows the scale and, below it, the values a host would record.
"""
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFormLayout, QGroupBox, QLabel, QMainWindow, QVBoxLayout, QWidget

from ioscircles.config import IosConfig
from ioscircles.model.geometry import Measurement
from ioscircles.view.ios_widget import IosWidget

VISIBLE_APP_NAME = "IOS Scale"


class MainWindow(QMainWindow):
    def __init__(self, config: IosConfig, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(f"{VISIBLE_APP_NAME} ({config.mode.value})")

        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        main_layout = QVBoxLayout(main_widget)

        self.ios_widget = IosWidget(config)
        main_layout.addWidget(self.ios_widget, 1, Qt.AlignmentFlag.AlignCenter)

        # --- READOUT ---
        box = QGroupBox("Measurement")
        form = QFormLayout(box)
        self.lbl_distance = QLabel()
        self.lbl_overlap = QLabel()
        self.lbl_proportion_distance = QLabel()
        self.lbl_circle = QLabel()
        form.addRow("Distance [px]:", self.lbl_distance)
        form.addRow("Proportion overlap:", self.lbl_overlap)
        form.addRow("Proportion distance:", self.lbl_proportion_distance)
        if config.uses_steps:
            form.addRow("Current pair:", self.lbl_circle)
        main_layout.addWidget(box)

        self.ios_widget.measurement_changed.connect(self.show_measurement)
        self.show_measurement(self.ios_widget.measurement)

    def show_measurement(self, measurement: Measurement) -> None:
        self.lbl_distance.setText(f"{measurement.distance:.1f}")
        self.lbl_overlap.setText(f"{measurement.proportion_overlap:.3f}")
        self.lbl_proportion_distance.setText(f"{measurement.proportion_distance:.3f}")
        circle = self.ios_widget.ios.current_circle
        self.lbl_circle.setText("-" if circle is None else str(circle))
