"""
IOS Widget
==========
Assembles the Qt controls for the configured scale type around an ``Ios``.

    continuous  one draggable pair
    stepped     previous/next buttons on either side of one pair
    original    one button per pair, stacked by ``layout_direction``

Every input is forwarded to the ``Ios``; the widget only repaints and
re-emits the published measurement.
"""
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, Signal, Slot
from PySide6.QtWidgets import (
    QBoxLayout, QButtonGroup, QHBoxLayout, QPushButton, QVBoxLayout, QWidget
)

from ioscircles.config import IosConfig, LayoutDirection, Mode
from ioscircles.ios import Ios
from ioscircles.model.geometry import Measurement
from ioscircles.view.widgets.circle_pair import CirclePairWidget

BUTTON_PADDING = 8


class IosWidget(QWidget):
    measurement_changed = Signal(object)

    def __init__(self, config: IosConfig, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.config = config
        self.ios = Ios(config)
        self.ios.add_listener(self._on_measurement)

        self.pair_widgets: list[CirclePairWidget] = []
        self.pair_buttons: list[QPushButton] = []
        self.previous_button: Optional[QPushButton] = None
        self.next_button: Optional[QPushButton] = None

        if config.mode == Mode.CONTINUOUS:
            self._build_continuous()
        elif config.mode == Mode.STEPPED:
            self._build_stepped()
        else:
            self._build_original()

    @property
    def measurement(self) -> Measurement:
        return self.ios.measurement

    # ---- construction ----

    def _make_pair(self, index: int, draggable: bool = False) -> CirclePairWidget:
        widget = CirclePairWidget(
            self.ios.layouts[index],
            left_label=self.config.left_label,
            right_label=self.config.right_label,
            draggable=draggable,
        )
        self.pair_widgets.append(widget)
        return widget

    def _make_button(self, object_name: str, text: str = "") -> QPushButton:
        button = QPushButton(text)
        button.setObjectName(object_name)
        if self.config.buttons_extra_class:
            # style sheets can select on it: QPushButton[class~="..."]
            button.setProperty("class", self.config.buttons_extra_class)
        return button

    def _build_continuous(self) -> None:
        layout = QHBoxLayout(self)
        pair = self._make_pair(0, draggable=True)
        pair.dragged.connect(self._on_drag)
        layout.addWidget(pair)

    def _build_stepped(self) -> None:
        layout = QHBoxLayout(self)

        self.previous_button = self._make_button("previous-circle", "←")
        self.next_button = self._make_button("next-circle", "→")
        pair = self._make_pair(0)

        layout.addWidget(self.previous_button)
        layout.addWidget(pair)
        layout.addWidget(self.next_button)

        # react on press, not on click
        self.previous_button.pressed.connect(self._on_previous)
        self.next_button.pressed.connect(self._on_next)

    def _build_original(self) -> None:
        direction = (
            QBoxLayout.Direction.TopToBottom
            if self.config.layout_direction == LayoutDirection.COLUMN
            else QBoxLayout.Direction.LeftToRight
        )
        layout = QBoxLayout(direction, self)

        self.button_group = QButtonGroup(self)
        self.button_group.setExclusive(True)

        for pair_number in range(1, self.config.number_circles + 1):
            button = self._make_button(f"ios-{pair_number}")
            button.setCheckable(True)

            pair = self._make_pair(pair_number - 1)
            pair.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)
            inner = QVBoxLayout(button)
            inner.setContentsMargins(BUTTON_PADDING, BUTTON_PADDING, BUTTON_PADDING, BUTTON_PADDING)
            inner.addWidget(pair)
            hint = pair.sizeHint()
            button.setMinimumSize(hint.width() + 2 * BUTTON_PADDING, hint.height() + 2 * BUTTON_PADDING)

            button.pressed.connect(lambda n=pair_number: self.ios.press(n))
            # clicked only fires when the pointer is released over the same button
            button.clicked.connect(lambda _checked=False, n=pair_number: self._on_release(n))

            self.button_group.addButton(button, pair_number)
            self.pair_buttons.append(button)
            layout.addWidget(button)

    # ---- slots ----

    @Slot(float)
    def _on_drag(self, dx: float) -> None:
        if self.ios.drag(dx):
            self.pair_widgets[0].update()

    @Slot()
    def _on_next(self) -> None:
        if self.ios.next():
            self.pair_widgets[0].update()

    @Slot()
    def _on_previous(self) -> None:
        if self.ios.previous():
            self.pair_widgets[0].update()

    def _on_release(self, pair_number: int) -> None:
        self.ios.release(pair_number)
        self._sync_checked()

    def _sync_checked(self) -> None:
        current = self.ios.current_circle
        if current is not None:
            # exclusive group: checking one unchecks the rest
            self.pair_buttons[current - 1].setChecked(True)

    def _on_measurement(self, measurement: Measurement) -> None:
        self.measurement_changed.emit(measurement)
