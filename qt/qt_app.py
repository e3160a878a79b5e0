"""Qt application."""

from __future__ import annotations

APP_TITLE = "Mood Translator"

import sys
from pathlib import Path
from typing import Optional

try:
    from PySide6 import QtCore, QtGui, QtWidgets  # type: ignore
    _BINDING = "PySide6"
except ImportError:  # pragma: no cover
    from PyQt6 import QtCore, QtGui, QtWidgets  # type: ignore
    _BINDING = "PyQt6"

from app.crash_reporter import install_global
from app.log_buffer import log
from params.registry import MOOD_KEYS, PARAMS
from qt.core_bridge import CoreBridge
from runtime.draw_list_v1 import RGBA, Stroke

FRAME_INTERVAL_MS = 16
SLIDER_TICKS = 1000


class QPainterSurface:
    """Surface over an open QPainter; the target image keeps its pixels between frames."""

    def __init__(self, painter: QtGui.QPainter, width: int, height: int):
        self.p = painter
        self.width = int(width)
        self.height = int(height)
        self.p.setBrush(QtCore.Qt.BrushStyle.NoBrush)

    def _pen(self, stroke: Stroke) -> None:
        pen = QtGui.QPen(QtGui.QColor(*stroke.rgba))
        pen.setWidthF(float(stroke.weight))
        pen.setCapStyle(QtCore.Qt.PenCapStyle.RoundCap)
        self.p.setPen(pen)

    def background(self, rgba: RGBA) -> None:
        self.p.fillRect(QtCore.QRectF(0, 0, self.width, self.height), QtGui.QColor(*rgba))

    def line(self, x1: float, y1: float, x2: float, y2: float, stroke: Stroke) -> None:
        self._pen(stroke)
        self.p.drawLine(QtCore.QPointF(x1, y1), QtCore.QPointF(x2, y2))

    def circle(self, cx: float, cy: float, diameter: float, stroke: Stroke) -> None:
        self._pen(stroke)
        r = diameter * 0.5
        self.p.drawEllipse(QtCore.QPointF(cx, cy), r, r)

    def rect(self, x: float, y: float, w: float, h: float, stroke: Stroke, radius: float = 0.0) -> None:
        self._pen(stroke)
        self.p.drawRoundedRect(QtCore.QRectF(x, y, w, h), radius, radius)


class SketchCanvas(QtWidgets.QWidget):
    def __init__(self, core: CoreBridge):
        super().__init__()
        self.core = core
        w, h = core.config.width, core.config.height
        self.setFixedSize(w, h)
        self.setMouseTracking(True)
        self.setFocusPolicy(QtCore.Qt.FocusPolicy.StrongFocus)
        # Reduce flicker: we blit the whole image every paint.
        self.setAttribute(QtCore.Qt.WidgetAttribute.WA_OpaquePaintEvent, True)

        self.image = QtGui.QImage(w, h, QtGui.QImage.Format.Format_ARGB32_Premultiplied)
        self.image.fill(QtGui.QColor(10, 14, 20))

        self._timer = QtCore.QTimer(self)
        self._timer.timeout.connect(self.advance)
        self._timer.start(FRAME_INTERVAL_MS)

    def advance(self):
        p = QtGui.QPainter(self.image)
        try:
            p.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
            self.core.tick(QPainterSurface(p, self.image.width(), self.image.height()))
        finally:
            p.end()
        self.update()

    def paintEvent(self, e):  # noqa: N802
        p = QtGui.QPainter(self)
        p.drawImage(0, 0, self.image)
        p.end()

    @staticmethod
    def _pos(e):
        return (e.position().x(), e.position().y()) if hasattr(e, "position") else (e.x(), e.y())

    def mouseMoveEvent(self, e):  # noqa: N802
        x, y = self._pos(e)
        self.core.pointer_move(x, y)

    def mousePressEvent(self, e):  # noqa: N802
        if e.button() != QtCore.Qt.MouseButton.LeftButton:
            return
        x, y = self._pos(e)
        self.core.pointer_down(x, y)

    def save_png(self, path: Path) -> bool:
        return bool(self.image.save(str(path), "PNG"))


class MoodControls(QtWidgets.QWidget):
    """One labelled slider + readout per mood parameter."""

    def __init__(self, core: CoreBridge):
        super().__init__()
        self.core = core
        self._readouts: dict[str, QtWidgets.QLabel] = {}
        row = QtWidgets.QHBoxLayout(self)
        for key in MOOD_KEYS:
            spec = PARAMS[key]
            box = QtWidgets.QVBoxLayout()
            box.addWidget(QtWidgets.QLabel(spec.get("label", key)))
            s = QtWidgets.QSlider(QtCore.Qt.Orientation.Horizontal)
            s.setRange(0, SLIDER_TICKS)
            s.setValue(int(round(core.get_param(key) * SLIDER_TICKS)))
            s.setFocusPolicy(QtCore.Qt.FocusPolicy.NoFocus)
            s.valueChanged.connect(lambda v, k=key: self._on_slider(k, v))
            box.addWidget(s)
            val = QtWidgets.QLabel("")
            box.addWidget(val)
            self._readouts[key] = val
            row.addLayout(box)
        self.refresh()

    def _on_slider(self, key: str, v: int):
        self.core.set_param(key, v / float(SLIDER_TICKS))
        self.refresh()

    def refresh(self):
        for k, text in self.core.readouts().items():
            self._readouts[k].setText(text)


class MoodWindow(QtWidgets.QWidget):
    def __init__(self, core: CoreBridge):
        super().__init__()
        self.core = core
        self.setWindowTitle(APP_TITLE)
        lay = QtWidgets.QVBoxLayout(self)
        self.canvas = SketchCanvas(core)
        self.controls = MoodControls(core)
        lay.addWidget(self.canvas)
        lay.addWidget(self.controls)
        hint = QtWidgets.QLabel("Move: ripples   Click: lines   R: reset   S: save PNG")
        lay.addWidget(hint)

    def keyPressEvent(self, e):  # noqa: N802
        k = e.key()
        if k == QtCore.Qt.Key.Key_R:
            self.core.reset(reseed=True)
            return
        if k == QtCore.Qt.Key.Key_S:
            self.export_png()
            return
        super().keyPressEvent(e)

    def export_png(self) -> Optional[Path]:
        try:
            path = self.core.export_target()
        except OSError as ex:
            log(f"export failed: {ex}")
            return None
        if not self.canvas.save_png(path):
            log(f"export failed: could not write {path}")
            return None
        log(f"exported {path}")
        return path


def run_qt(core: CoreBridge) -> None:
    app = QtWidgets.QApplication(sys.argv)
    install_global()
    log(f"startup: binding={_BINDING} canvas={core.config.width}x{core.config.height}")
    win = MoodWindow(core)
    win.show()
    app.exec()
