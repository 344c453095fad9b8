import logging

import numpy as np
from numba import njit

from chaos.datatypes import Point


DEFAULT_RNG = np.random.default_rng()


class InvalidStateError(RuntimeError):
    """Raised when points are requested without any fixed vertex."""


class EmptyCollectionError(IndexError):
    """Raised by a strict vertex removal on an empty vertex set."""


def generate(vertices, previous=None, rng=None):
    """
    One chaos game step: jump halfway from the previous point towards a random vertex.
    Without a previous point the first vertex is the seed.
    """
    if not vertices:
        raise InvalidStateError("Cannot generate a point without fixed vertices.")
    if rng is None:
        rng = DEFAULT_RNG

    target = vertices[int(rng.integers(0, len(vertices)))]
    base = previous if previous is not None else vertices[0]
    return Point((base.x + target.x) / 2, (base.y + target.y) / 2)


@njit
def chaos_orbit(vertices, choices, start):
    """
    Compute len(choices) consecutive chaos game points starting after `start`.
    """
    count = choices.shape[0]
    orbit = np.empty((count, 2), dtype=np.float64)
    x = start[0]
    y = start[1]

    for i in range(count):
        target = vertices[choices[i]]
        x = (x + target[0]) / 2
        y = (y + target[1]) / 2
        orbit[i, 0] = x
        orbit[i, 1] = y

    return orbit


def to_point(value):
    """Accept a Point or any (x, y) pair."""
    if isinstance(value, Point):
        return Point(float(value.x), float(value.y))
    x, y = value
    return Point(float(x), float(y))


class PointStore:
    """Fixed vertices plus the append-only sequence of generated points."""

    MIN_BUFFER = 256

    def __init__(self, vertices=(), capacity=None, rng=None):
        self.capacity = capacity
        self.rng = rng if rng is not None else np.random.default_rng()
        self._vertices = [to_point(v) for v in vertices]
        self._buffer = np.empty((0, 2), dtype=np.float64)
        self._count = 0

    def __len__(self):
        return self._count

    @property
    def vertices(self):
        return tuple(self._vertices)

    @property
    def points(self):
        """Read-only (n, 2) view of the generated points."""
        view = self._buffer[:self._count]
        view.flags.writeable = False
        return view

    @property
    def last_point(self):
        if not self._count:
            return None
        x, y = self._buffer[self._count - 1]
        return Point(float(x), float(y))

    @property
    def is_full(self):
        return self.capacity is not None and self._count >= self.capacity

    def add_vertex(self, point):
        point = to_point(point)
        self._vertices.append(point)
        logging.info(f"Added fixed vertex ({point.x:.1f}, {point.y:.1f}), {len(self._vertices)} in total.")
        self.clear()

    def remove_vertex(self, strict=False):
        """Remove the last fixed vertex. Returns False if there was none."""
        if not self._vertices:
            if strict:
                raise EmptyCollectionError("No fixed vertex to remove.")
            logging.info("No fixed vertex to remove.")
            return False
        point = self._vertices.pop()
        logging.info(f"Removed fixed vertex ({point.x:.1f}, {point.y:.1f}), {len(self._vertices)} left.")
        self.clear()
        return True

    def clear_vertices(self):
        self._vertices = []
        self.clear()

    def clear(self):
        """Drop all generated points, keeping the buffer for reuse."""
        self._count = 0

    def grow_to(self, target_count):
        """Generate points until there are target_count of them. Returns how many were added."""
        if not self._vertices:
            raise InvalidStateError("Cannot generate points without fixed vertices.")
        if self.capacity is not None:
            target_count = min(target_count, self.capacity)
        missing = target_count - self._count
        if missing <= 0:
            return 0

        self._reserve(target_count)
        vertex_array = np.array([(v.x, v.y) for v in self._vertices], dtype=np.float64)
        if self._count:
            start = self._buffer[self._count - 1].copy()
        else:
            start = vertex_array[0].copy()
        choices = np.asarray(self.rng.integers(0, len(self._vertices), size=missing), dtype=np.int64)

        self._buffer[self._count:target_count] = chaos_orbit(vertex_array, choices, start)
        self._count = target_count
        return missing

    def append_one(self):
        return self.grow_to(self._count + 1)

    def _reserve(self, size):
        if size <= len(self._buffer):
            return
        new_size = max(size, 2 * len(self._buffer), self.MIN_BUFFER)
        if self.capacity is not None:
            new_size = min(new_size, self.capacity)
        buffer = np.empty((new_size, 2), dtype=np.float64)
        buffer[:self._count] = self._buffer[:self._count]
        self._buffer = buffer
