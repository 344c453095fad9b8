from dataclasses import replace

import numpy as np
import pytest

from chaos.animation import create_animation, tick, toggle_pause
from chaos.datatypes import Point
from chaos.settings import animation_settings


def make_state(**overrides):
    settings = replace(animation_settings, **overrides)
    return create_animation(settings, rng=np.random.default_rng(0))


def draw(state):
    return state.cache.draw((400, 400), state.store.points, state.store.vertices)


def test_animation_uses_fixed_triangle():
    state = make_state()
    assert state.store.vertices == tuple(Point(x, y) for x, y in animation_settings.triangle)
    assert len(state.store) == 0


def test_animation_needs_a_triangle():
    with pytest.raises(ValueError):
        make_state(triangle=[[0, 0], [10, 10]])


def test_each_tick_appends_one_point():
    state = make_state()
    for expected in range(1, 11):
        assert tick(state)
        assert len(state.store) == expected
    assert state.ticks == 10


def test_cache_refreshes_on_fixed_cadence():
    state = make_state(refresh_every=5)
    first = draw(state)

    for _ in range(4):
        tick(state)
        assert draw(state) is first

    tick(state)
    refreshed = draw(state)
    assert refreshed is not first
    assert len(refreshed.points) == 5


def test_animation_stops_at_capacity():
    state = make_state(max_points=3, refresh_every=100)
    draw(state)
    results = [tick(state) for _ in range(5)]

    assert results == [True, True, True, False, False]
    assert len(state.store) == 3
    assert not state.running
    assert state.cache.dirty
    assert len(draw(state).points) == 3


def test_paused_animation_does_not_grow():
    state = make_state()
    tick(state)
    assert toggle_pause(state) is False
    assert not tick(state)
    assert len(state.store) == 1
    assert toggle_pause(state) is True
    assert tick(state)
    assert len(state.store) == 2


def test_finished_animation_cannot_resume():
    state = make_state(max_points=1)
    tick(state)
    tick(state)
    assert toggle_pause(state) is False
    assert not state.running
