"""
Interactive explorer state: vertices placed by mouse, two sliders for the
number of generated and drawn points. The window sends messages to `update`
and redraws from the resulting state.
"""
import logging
from dataclasses import dataclass
from enum import Enum

from chaos.cache import RenderCache
from chaos.datatypes import Point
from chaos.game import PointStore


class Button(Enum):
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


@dataclass
class AddVertex:
    point: Point


@dataclass
class RemoveVertex:
    pass


@dataclass
class ClearVertices:
    pass


@dataclass
class SetMaxIter:
    value: int


@dataclass
class SetCurIter:
    value: int


@dataclass
class SierpinskiState:
    store: PointStore
    cache: RenderCache
    max_slider_value: int = 10000
    max_iter: int = 0  # points that exist
    cur_iter: int = 0  # points that are drawn

    @property
    def controls_visible(self):
        return bool(self.store.vertices)

    def visible_points(self):
        return self.store.points[:self.cur_iter]


def create_state(settings, rng=None):
    store = PointStore(rng=rng)
    cache = RenderCache(point_size=settings.point_size, vertex_radius=settings.vertex_radius)
    return SierpinskiState(store=store, cache=cache, max_slider_value=settings.max_slider_value)


def pointer_message(x, y, button, width, height):
    """Map a mouse press on the canvas to a message, or None."""
    if not (0 <= x <= width and 0 <= y <= height):
        return None
    if button == Button.LEFT:
        return AddVertex(Point(float(x), float(y)))
    if button == Button.RIGHT:
        return RemoveVertex()
    return None


def clamp(value, low, high):
    return max(low, min(int(value), high))


def update(state, message):
    """Apply one message to the state and invalidate the render cache."""
    if isinstance(message, AddVertex):
        state.store.add_vertex(message.point)
        reset_iterations(state)
    elif isinstance(message, RemoveVertex):
        state.store.remove_vertex()
        reset_iterations(state)
    elif isinstance(message, ClearVertices):
        logging.info("Clearing all fixed vertices...")
        state.store.clear_vertices()
        reset_iterations(state)
    elif isinstance(message, SetMaxIter):
        if not state.store.vertices:
            logging.warning("Place a fixed vertex before generating points.")
            return state
        max_iter = clamp(message.value, 0, state.max_slider_value)
        added = state.store.grow_to(max_iter)
        if added:
            logging.info(f"Generated {added} points, {len(state.store)} in total.")
        state.max_iter = max_iter
        state.cur_iter = min(state.cur_iter, state.max_iter)
    elif isinstance(message, SetCurIter):
        state.cur_iter = clamp(message.value, 0, state.max_iter)
    else:
        raise TypeError(f"Unknown message: {message!r}")

    state.cache.invalidate()
    return state


def reset_iterations(state):
    state.max_iter = 0
    state.cur_iter = 0
