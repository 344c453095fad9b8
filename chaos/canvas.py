from PyQt5.QtCore import Qt, QPointF, QRectF, pyqtSignal
from PyQt5.QtGui import QBrush, QColor, QPainter, QPen, QPixmap
from PyQt5.QtWidgets import QGraphicsScene, QGraphicsView

from chaos.controller import Button

QT_BUTTONS = {
    Qt.LeftButton: Button.LEFT,
    Qt.RightButton: Button.RIGHT,
    Qt.MiddleButton: Button.MIDDLE,
}


def geometry_to_pixmap(geometry, theme, antialiasing=True):
    """Paint a Geometry into a pixmap of the canvas size."""
    width, height = (int(round(s)) for s in geometry.size)
    pixmap = QPixmap(width, height)
    pixmap.fill(QColor(*theme["bg"]))

    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.Antialiasing, antialiasing)

    border = geometry.border
    painter.setPen(QPen(QColor(*theme["border"]), 1))
    painter.drawRect(QRectF(border.x, border.y, border.width - 1, border.height - 1))

    painter.setPen(QPen(QColor(*theme["points"]), 1))
    for rect in geometry.points:
        painter.drawRect(QRectF(rect.x, rect.y, rect.width, rect.height))

    painter.setPen(Qt.NoPen)
    painter.setBrush(QBrush(QColor(*theme["vertices"])))
    for circle in geometry.vertices:
        painter.drawEllipse(QPointF(circle.x, circle.y), circle.radius, circle.radius)

    painter.end()
    return pixmap


class ChaosCanvas(QGraphicsView):
    """Fixed size view showing the current geometry. Emits mouse presses in scene coordinates."""

    pressed = pyqtSignal(float, float, object)

    def __init__(self, width, height, antialiasing=True):
        super().__init__()
        self.canvas_size = (width, height)
        self.antialiasing = antialiasing
        self.theme = None
        self._shown = None

        self.graphics_scene = QGraphicsScene(0, 0, width, height)
        self.setScene(self.graphics_scene)
        self.setFixedSize(width + 2, height + 2)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)

    def set_theme(self, theme):
        self.theme = theme
        self._shown = None

    def show_geometry(self, geometry):
        """Repaint only when the cache handed out a new geometry."""
        if geometry is self._shown:
            return
        pixmap = geometry_to_pixmap(geometry, self.theme, self.antialiasing)
        self.graphics_scene.clear()
        self.graphics_scene.addPixmap(pixmap)
        self._shown = geometry

    def mousePressEvent(self, event):
        button = QT_BUTTONS.get(event.button())
        if button is None:
            return super().mousePressEvent(event)
        scene_pos = self.mapToScene(event.pos())
        self.pressed.emit(scene_pos.x(), scene_pos.y(), button)
