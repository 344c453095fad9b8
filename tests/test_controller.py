import numpy as np
import pytest

from chaos.controller import (
    AddVertex, Button, ClearVertices, RemoveVertex, SetCurIter, SetMaxIter, create_state, pointer_message, update
)
from chaos.datatypes import Point
from chaos.settings import sierpinski_settings


@pytest.fixture
def state():
    return create_state(sierpinski_settings, rng=np.random.default_rng(0))


def add_triangle(state):
    for point in (Point(100, 100), Point(0, 0), Point(200, 0)):
        update(state, AddVertex(point))


def test_pointer_messages():
    assert pointer_message(10, 20, Button.LEFT, 600, 600) == AddVertex(Point(10.0, 20.0))
    assert pointer_message(600, 600, Button.LEFT, 600, 600) == AddVertex(Point(600.0, 600.0))
    assert pointer_message(10, 20, Button.RIGHT, 600, 600) == RemoveVertex()
    assert pointer_message(10, 20, Button.MIDDLE, 600, 600) is None
    assert pointer_message(-1, 20, Button.LEFT, 600, 600) is None
    assert pointer_message(10, 601, Button.RIGHT, 600, 600) is None


def test_controls_hidden_without_vertices(state):
    assert not state.controls_visible
    update(state, AddVertex(Point(5, 5)))
    assert state.controls_visible
    update(state, RemoveVertex())
    assert not state.controls_visible


def test_max_iter_generates_points(state):
    add_triangle(state)
    update(state, SetMaxIter(500))
    assert state.max_iter == 500
    assert len(state.store) == 500

    update(state, SetMaxIter(200))
    assert state.max_iter == 200
    assert len(state.store) == 500


def test_max_iter_is_clamped_to_slider_range(state):
    add_triangle(state)
    update(state, SetMaxIter(sierpinski_settings.max_slider_value + 50))
    assert state.max_iter == sierpinski_settings.max_slider_value
    update(state, SetMaxIter(-3))
    assert state.max_iter == 0


def test_max_iter_without_vertices_is_ignored(state):
    update(state, SetMaxIter(100))
    assert state.max_iter == 0
    assert len(state.store) == 0


@pytest.mark.parametrize("value, expected", [(-5, 0), (0, 0), (40, 40), (100, 100), (5000, 100)])
def test_cur_iter_is_clamped(state, value, expected):
    add_triangle(state)
    update(state, SetMaxIter(100))
    update(state, SetCurIter(value))
    assert state.cur_iter == expected
    assert 0 <= state.cur_iter <= state.max_iter


def test_lowering_max_iter_clamps_cur_iter(state):
    add_triangle(state)
    update(state, SetMaxIter(100))
    update(state, SetCurIter(80))
    update(state, SetMaxIter(30))
    assert state.cur_iter == 30
    assert len(state.visible_points()) == 30


def test_vertex_changes_reset_iterations(state):
    add_triangle(state)
    for message in (AddVertex(Point(50, 80)), RemoveVertex(), RemoveVertex(), ClearVertices(), RemoveVertex()):
        update(state, SetMaxIter(100))
        update(state, SetCurIter(60))
        update(state, message)
        assert len(state.store) == 0
        assert state.max_iter == 0
        assert state.cur_iter == 0


def test_every_message_invalidates_the_cache(state):
    add_triangle(state)
    size = (600, 600)
    for message in (SetMaxIter(50), SetCurIter(10), SetCurIter(10), AddVertex(Point(1, 1))):
        state.cache.draw(size, state.visible_points(), state.store.vertices)
        assert not state.cache.dirty
        update(state, message)
        assert state.cache.dirty


def test_visible_points_follow_cur_iter(state):
    add_triangle(state)
    update(state, SetMaxIter(100))
    update(state, SetCurIter(25))
    geometry = state.cache.draw((600, 600), state.visible_points(), state.store.vertices)
    assert len(geometry.points) == 25
    assert len(geometry.vertices) == 3


def test_unknown_message(state):
    with pytest.raises(TypeError):
        update(state, "not a message")
