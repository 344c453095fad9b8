import logging
from dataclasses import dataclass

from chaos.cache import RenderCache
from chaos.game import PointStore
from chaos.settings import validate_triangle


@dataclass
class AnimationState:
    store: PointStore
    cache: RenderCache
    refresh_every: int = 100
    ticks: int = 0
    running: bool = True


def create_animation(settings, rng=None):
    """Set up the fixed triangle animation described by `settings`."""
    validate_triangle(settings.triangle)
    store = PointStore(vertices=settings.triangle, capacity=settings.max_points, rng=rng)
    cache = RenderCache(point_size=settings.point_size, vertex_radius=settings.vertex_radius)
    return AnimationState(store=store, cache=cache, refresh_every=settings.refresh_every)


def tick(state):
    """
    Append one point. The cache is only invalidated every `refresh_every` ticks,
    and once more when the store runs full and the animation stops.
    """
    if not state.running:
        return False

    if not state.store.append_one():
        state.running = False
        state.cache.invalidate()
        logging.info(f"Animation finished after {len(state.store)} points.")
        return False

    state.ticks += 1
    if state.ticks % state.refresh_every == 0:
        state.cache.invalidate()
    return True


def toggle_pause(state):
    if state.store.is_full:
        logging.info("Animation already finished.")
        return state.running
    state.running = not state.running
    logging.info("Animation resumed." if state.running else "Animation paused.")
    return state.running
