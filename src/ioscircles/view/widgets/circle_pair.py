"""
Circle Pair Widget
Draws one PairLayout and turns drags of the left circle into pixel deltas.
"""
from __future__ import annotations

import math
from typing import Optional

from PySide6.QtCore import QPointF, QRectF, QSize, Qt, Signal
from PySide6.QtGui import QColor, QMouseEvent, QPainter, QPaintEvent, QPen
from PySide6.QtWidgets import QSizePolicy, QWidget

from ioscircles.model.layout import PairLayout, Side


class CirclePairWidget(QWidget):
    # Horizontal pointer movement while dragging the left group, in pixels
    dragged = Signal(float)

    def __init__(
        self,
        layout: PairLayout,
        left_label: str = "You",
        right_label: str = "Other",
        draggable: bool = False,
        parent: Optional[QWidget] = None
    ) -> None:
        super().__init__(parent)
        self.pair = layout
        self.left_label = left_label
        self.right_label = right_label
        self.draggable = draggable

        self._last_x: Optional[float] = None

        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        if draggable:
            self.setMouseTracking(True)

    def sizeHint(self) -> QSize:
        return QSize(math.ceil(self.pair.box_width), math.ceil(self.pair.box_height))

    def minimumSizeHint(self) -> QSize:
        return self.sizeHint()

    # ---- geometry helpers ----

    def _origin_x(self) -> float:
        """Left edge of the pair box; the box is centred in the widget."""
        return (self.width() - self.pair.box_width) / 2

    def _circle_rect(self, side: Side) -> QRectF:
        r = self.pair.diameter / 2
        cx = self._origin_x() + self.pair.center_x(side)
        cy = self.height() / 2
        return QRectF(cx - r, cy - r, 2 * r, 2 * r)

    def left_group_rect(self) -> QRectF:
        pair = self.pair
        width = pair.left_text_width + pair.text_margin + pair.diameter + 2 * pair.border_width
        x = self._origin_x() + pair.left_translation
        cy = self.height() / 2
        return QRectF(x, cy - pair.diameter / 2 - pair.border_width, width, pair.diameter + 2 * pair.border_width)

    # ---- painting ----

    def paintEvent(self, event: QPaintEvent) -> None:
        pair = self.pair
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        pen = QPen(QColor("black"))
        pen.setWidthF(pair.border_width)
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)

        # right group sits underneath the left one
        right = self._circle_rect(Side.RIGHT)
        painter.drawEllipse(right)
        text_x = right.right() + pair.border_width + pair.text_margin
        painter.drawText(
            QRectF(text_x, 0, max(pair.right_text_width, self.width() - text_x), self.height()),
            Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter,
            self.right_label,
        )

        left = self._circle_rect(Side.LEFT)
        painter.drawEllipse(left)
        text_right = left.left() - pair.border_width - pair.text_margin
        painter.drawText(
            QRectF(text_right - pair.left_text_width, 0, pair.left_text_width, self.height()),
            Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter,
            self.left_label,
        )
        painter.end()

    # ---- dragging ----

    def mousePressEvent(self, event: QMouseEvent) -> None:
        pos: QPointF = event.position()
        if self.draggable and event.button() == Qt.MouseButton.LeftButton and self.left_group_rect().contains(pos):
            self._last_x = pos.x()
            self.setCursor(Qt.CursorShape.ClosedHandCursor)
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        pos = event.position()
        if self._last_x is not None:
            dx = pos.x() - self._last_x
            self._last_x = pos.x()
            if dx:
                self.dragged.emit(dx)
            event.accept()
            return
        if self.draggable:
            over = self.left_group_rect().contains(pos)
            self.setCursor(Qt.CursorShape.OpenHandCursor if over else Qt.CursorShape.ArrowCursor)
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if self._last_x is not None and event.button() == Qt.MouseButton.LeftButton:
            self._last_x = None
            self.setCursor(Qt.CursorShape.OpenHandCursor)
            event.accept()
            return
        super().mouseReleaseEvent(event)
