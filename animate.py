import sys
import logging

import numpy as np
from PyQt5.QtWidgets import QApplication, QMainWindow, QVBoxLayout, QWidget, QLabel, QFileDialog
from PyQt5.QtCore import Qt, QTimer

from chaos.animation import create_animation, tick, toggle_pause
from chaos.canvas import ChaosCanvas
from chaos.cli import parse_args
from chaos.export import export_geometry
from chaos.settings import animation_settings, load_settings
from chaos.styles import stylesheet_for, theme_colors

# Configure logging
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)


class AnimationApp(QMainWindow):
    DEFAULT_EXPORT_PATH = "./exports"

    def __init__(self, settings, rng=None):
        super().__init__()
        self.settings = settings
        self.state = create_animation(settings, rng=rng)
        self.theme = theme_colors(settings.colormap, settings.vertex_color)

        self.init_ui()
        self.refresh()

        self.timer = QTimer(self)
        self.timer.setInterval(settings.tick_interval_ms)
        self.timer.timeout.connect(self.on_tick)
        self.timer.start()

    def init_ui(self):
        self.setWindowTitle("Sierpinski Triangle Animation")
        self.setStyleSheet(stylesheet_for(self.theme))

        layout = QVBoxLayout()
        self.canvas = ChaosCanvas(
            self.settings.canvas_width, self.settings.canvas_height, antialiasing=self.settings.antialiasing
        )
        self.canvas.set_theme(self.theme)
        layout.addWidget(self.canvas, alignment=Qt.AlignHCenter)

        self.status_label = QLabel()
        self.status_label.setToolTip("Space: pause/resume. P: export image.")
        layout.addWidget(self.status_label, alignment=Qt.AlignHCenter)

        container = QWidget()
        container.setLayout(layout)
        self.setCentralWidget(container)

    def on_tick(self):
        tick(self.state)
        if not self.state.running and self.state.store.is_full:
            self.timer.stop()
        self.refresh()

    def refresh(self):
        geometry = self.state.cache.draw(self.canvas.canvas_size, self.state.store.points, self.state.store.vertices)
        self.canvas.show_geometry(geometry)
        if self.state.store.is_full:
            status = " (done)"
        elif not self.state.running:
            status = " (paused)"
        else:
            status = ""
        self.status_label.setText(f"points: {len(self.state.store)}{status}")

    def keyPressEvent(self, event):
        if event.key() == Qt.Key_Escape:
            self.close()
        elif event.key() == Qt.Key_Space:
            toggle_pause(self.state)
            self.refresh()
        elif event.key() == Qt.Key_P:
            self.export_image()
        else:
            super().keyPressEvent(event)

    def export_image(self):
        """Export all points generated so far as an image."""
        file_path, _ = QFileDialog.getSaveFileName(
            self, "Export Image", self.DEFAULT_EXPORT_PATH, "PNG Files (*.png);;All Files (*)"
        )
        if not file_path:
            return
        # Export everything, not just the last refreshed frame
        self.state.cache.invalidate()
        geometry = self.state.cache.draw(self.canvas.canvas_size, self.state.store.points, self.state.store.vertices)
        try:
            export_geometry(geometry, self.theme, file_path)
        except OSError as error:
            logging.warning(f"Export to {file_path} failed: {error}")
        self.refresh()


def main(argv=None):
    args = parse_args("Animate the chaos game on a fixed triangle.", argv)
    file_handler = logging.FileHandler(args.log_file)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.getLogger().addHandler(file_handler)

    settings = animation_settings
    if args.load:
        try:
            settings = load_settings(args.load, animation_settings, require_triangle=True)
        except (OSError, ValueError) as error:
            logging.error(f"Could not load settings from {args.load}: {error}")
            return 1

    app = QApplication(sys.argv[:1])
    main_window = AnimationApp(settings, rng=np.random.default_rng(args.seed))
    main_window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
