import sys
import logging

import numpy as np
from PyQt5.QtWidgets import (
    QApplication, QMainWindow, QVBoxLayout, QWidget, QPushButton, QHBoxLayout, QLabel, QSlider, QFileDialog
)
from PyQt5.QtCore import Qt, QEvent

from chaos.canvas import ChaosCanvas
from chaos.cli import parse_args
from chaos.controller import (
    ClearVertices, RemoveVertex, SetCurIter, SetMaxIter, create_state, pointer_message, update
)
from chaos.export import export_geometry
from chaos.settings import load_settings, sierpinski_settings
from chaos.styles import stylesheet_for, theme_colors

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logging(log_file):
    logger = logging.getLogger()
    logger.setLevel(logging.INFO)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)
    logger.addHandler(file_handler)


class SierpinskiApp(QMainWindow):
    SLIDER_LABEL_WIDTH = 110
    DEFAULT_EXPORT_PATH = "./exports"

    def __init__(self, settings, rng=None):
        super().__init__()
        self.settings = settings
        self.state = create_state(settings, rng=rng)
        self.theme = theme_colors(settings.colormap, settings.vertex_color)

        self.init_ui()
        self.refresh()

        # Sliders would otherwise consume Home and Backspace once focused
        QApplication.instance().installEventFilter(self)

    def init_ui(self):
        self.setWindowTitle("Sierpinski Triangle Emulator")
        self.setStyleSheet(stylesheet_for(self.theme))

        main_layout = QVBoxLayout()
        main_layout.setAlignment(Qt.AlignHCenter)

        self.canvas = ChaosCanvas(
            self.settings.canvas_width, self.settings.canvas_height, antialiasing=self.settings.antialiasing
        )
        self.canvas.set_theme(self.theme)
        self.canvas.setToolTip("Left click: add vertex. Right click: remove last vertex.")
        self.canvas.pressed.connect(self.on_canvas_pressed)
        main_layout.addWidget(self.canvas, alignment=Qt.AlignHCenter)

        # Sliders stay hidden until a vertex exists
        self.controls = QWidget()
        controls_layout = QVBoxLayout()
        self.max_iter_label, self.max_iter_slider = self.add_slider_row(
            controls_layout, "Number of generated points", lambda value: self.dispatch(SetMaxIter(value))
        )
        self.cur_iter_label, self.cur_iter_slider = self.add_slider_row(
            controls_layout, "Number of drawn points", lambda value: self.dispatch(SetCurIter(value))
        )

        buttons_layout = QHBoxLayout()
        buttons_layout.addWidget(self.create_button("Undo", "Remove last vertex (Shortcut: Backspace)",
                                                    lambda: self.dispatch(RemoveVertex())))
        buttons_layout.addWidget(self.create_button("Clear", "Remove all vertices (Shortcut: Home)",
                                                    lambda: self.dispatch(ClearVertices())))
        buttons_layout.addWidget(self.create_button("Export", "Export as an image (Shortcut: P)", self.export_image))
        controls_layout.addLayout(buttons_layout)

        self.controls.setLayout(controls_layout)
        main_layout.addWidget(self.controls)

        container = QWidget()
        container.setLayout(main_layout)
        self.setCentralWidget(container)

    def add_slider_row(self, layout, tooltip, callback):
        row = QHBoxLayout()
        label = QLabel()
        label.setFixedWidth(self.SLIDER_LABEL_WIDTH)
        slider = QSlider(Qt.Horizontal)
        slider.setRange(0, self.settings.max_slider_value)
        slider.setFixedWidth(self.settings.canvas_width - self.SLIDER_LABEL_WIDTH)
        slider.setToolTip(tooltip)
        slider.valueChanged.connect(callback)
        row.addWidget(label)
        row.addWidget(slider)
        layout.addLayout(row)
        return label, slider

    def create_button(self, label, tooltip, callback):
        """Create a reusable button."""
        button = QPushButton(label)
        button.setToolTip(tooltip)
        button.clicked.connect(callback)
        return button

    def dispatch(self, message):
        update(self.state, message)
        self.refresh()

    def refresh(self):
        """Mirror the state into the widgets and repaint the canvas if needed."""
        geometry = self.state.cache.draw(
            self.canvas.canvas_size, self.state.visible_points(), self.state.store.vertices
        )
        self.canvas.show_geometry(geometry)

        for slider, value in ((self.max_iter_slider, self.state.max_iter), (self.cur_iter_slider, self.state.cur_iter)):
            slider.blockSignals(True)
            slider.setValue(value)
            slider.blockSignals(False)
        self.max_iter_label.setText(f"max iter: {self.state.max_iter}")
        self.cur_iter_label.setText(f"cur iter: {self.state.cur_iter}")
        self.controls.setVisible(self.state.controls_visible)

    def on_canvas_pressed(self, x, y, button):
        message = pointer_message(x, y, button, *self.canvas.canvas_size)
        if message is not None:
            self.dispatch(message)

    def eventFilter(self, source, event):
        """Route key presses inside this window to the shortcuts before any child widget sees them."""
        if (event.type() == QEvent.KeyPress and isinstance(source, QWidget)
                and source.window() is self and self.on_key(event)):
            return True
        return super().eventFilter(source, event)

    def on_key(self, event):
        """Handle key press events. Returns True if the key was a shortcut."""
        if event.key() == Qt.Key_Escape:
            self.close()
        elif event.key() == Qt.Key_Backspace:
            self.dispatch(RemoveVertex())
        elif event.key() == Qt.Key_Home:
            self.dispatch(ClearVertices())
        elif event.key() == Qt.Key_P:
            self.export_image()
        elif event.key() == Qt.Key_F11:
            if self.isFullScreen():
                self.showNormal()
            else:
                self.showFullScreen()
        else:
            return False
        logging.info(f"Key pressed: {event.key()}")
        return True

    def export_image(self):
        """Export the currently drawn points as an image."""
        options = QFileDialog.Options()
        file_path, _ = QFileDialog.getSaveFileName(
            self,
            "Export Image",
            self.DEFAULT_EXPORT_PATH,
            "PNG Files (*.png);;JPEG Files (*.jpg);;All Files (*)",
            options=options,
        )
        if not file_path:
            return
        geometry = self.state.cache.draw(
            self.canvas.canvas_size, self.state.visible_points(), self.state.store.vertices
        )
        try:
            export_geometry(geometry, self.theme, file_path)
        except OSError as error:
            logging.warning(f"Export to {file_path} failed: {error}")


def main(argv=None):
    args = parse_args("Place fixed vertices and watch the chaos game draw a fractal.", argv)
    setup_logging(args.log_file)

    settings = sierpinski_settings
    if args.load:
        try:
            settings = load_settings(args.load, sierpinski_settings)
        except (OSError, ValueError) as error:
            logging.error(f"Could not load settings from {args.load}: {error}")
            return 1
        logging.info(f"Settings loaded from {args.load}")

    app = QApplication(sys.argv[:1])
    main_window = SierpinskiApp(settings, rng=np.random.default_rng(args.seed))
    main_window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
