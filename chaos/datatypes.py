from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    x: float  # top left
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class Circle:
    x: float  # center
    y: float
    radius: float


@dataclass(frozen=True)
class Geometry:
    size: tuple  # (width, height) of the canvas
    border: Rect
    points: tuple  # Rect per visible point
    vertices: tuple  # Circle per fixed vertex
