import logging

from chaos.datatypes import Circle, Geometry, Rect


def build_geometry(canvas_size, visible_points, vertices, point_size=1.0, vertex_radius=5.0):
    """
    Build the drawing for one frame: the canvas outline, a small square per
    visible point and a circle per fixed vertex.
    """
    width, height = canvas_size
    border = Rect(0.0, 0.0, float(width), float(height))
    points = tuple(Rect(float(x), float(y), point_size, point_size) for x, y in visible_points)
    circles = tuple(Circle(v.x, v.y, vertex_radius) for v in vertices)
    return Geometry(size=(float(width), float(height)), border=border, points=points, vertices=circles)


class RenderCache:
    """Keeps the last geometry until it is invalidated or the canvas is resized."""

    def __init__(self, point_size=1.0, vertex_radius=5.0):
        self.point_size = point_size
        self.vertex_radius = vertex_radius
        self.dirty = True
        self.builds = 0
        self._geometry = None
        self._size = None

    def invalidate(self):
        self.dirty = True

    def draw(self, canvas_size, visible_points, vertices):
        size = (float(canvas_size[0]), float(canvas_size[1]))
        if self.dirty or self._geometry is None or size != self._size:
            self._geometry = build_geometry(
                size, visible_points, vertices,
                point_size=self.point_size,
                vertex_radius=self.vertex_radius,
            )
            self._size = size
            self.dirty = False
            self.builds += 1
            logging.debug(f"Rebuilt geometry with {len(self._geometry.points)} points.")
        return self._geometry
