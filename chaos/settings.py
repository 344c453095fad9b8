from dataclasses import dataclass, field, replace

import yaml


@dataclass
class ChaosSettings:
    canvas_width: int
    canvas_height: int
    max_slider_value: int
    tick_interval_ms: int
    refresh_every: int  # animation ticks between redraws
    max_points: int | None  # None means unbounded
    point_size: float
    vertex_radius: float
    colormap: str
    vertex_color: str
    antialiasing: bool
    triangle: list = field(default_factory=list)  # fixed vertices of the animation


sierpinski_settings = ChaosSettings(
    canvas_width=600,
    canvas_height=600,
    max_slider_value=10000,
    tick_interval_ms=50,
    refresh_every=100,
    max_points=None,
    point_size=1.0,
    vertex_radius=5.0,
    colormap="inferno",
    vertex_color="#1293D8",
    antialiasing=True,
)

animation_settings = replace(
    sierpinski_settings,
    canvas_width=400,
    canvas_height=400,
    max_points=50000,
    triangle=[[200.0, 20.0], [20.0, 380.0], [380.0, 380.0]],
)


def settings_to_dict(settings):
    """Convert ChaosSettings to a dictionary for YAML serialization."""
    return {
        "canvas": {
            "width": settings.canvas_width,
            "height": settings.canvas_height,
        },
        "iterations": {
            "slider_max": settings.max_slider_value,
        },
        "animation": {
            "interval_ms": settings.tick_interval_ms,
            "refresh_every": settings.refresh_every,
            "max_points": settings.max_points,
            "triangle": [list(vertex) for vertex in settings.triangle],
        },
        "presentation": {
            "point_size": settings.point_size,
            "vertex_radius": settings.vertex_radius,
            "colormap": settings.colormap,
            "vertex_color": settings.vertex_color,
            "antialiasing": settings.antialiasing,
        },
    }


def read_section(settings_dict, name):
    section = settings_dict.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"Settings section '{name}' must be a mapping, got {type(section).__name__}.")
    return section


def dict_to_settings(settings_dict, defaults=sierpinski_settings, require_triangle=False):
    """
    Convert a dictionary to a ChaosSettings object.
    Missing sections or keys keep the value from `defaults`.
    """
    if settings_dict is None:
        settings_dict = {}
    if not isinstance(settings_dict, dict):
        raise ValueError(f"Settings must be a mapping, got {type(settings_dict).__name__}.")

    canvas = read_section(settings_dict, "canvas")
    iterations = read_section(settings_dict, "iterations")
    animation = read_section(settings_dict, "animation")
    presentation = read_section(settings_dict, "presentation")

    try:
        settings = ChaosSettings(
            canvas_width=int(canvas.get("width", defaults.canvas_width)),
            canvas_height=int(canvas.get("height", defaults.canvas_height)),
            max_slider_value=int(iterations.get("slider_max", defaults.max_slider_value)),
            tick_interval_ms=int(animation.get("interval_ms", defaults.tick_interval_ms)),
            refresh_every=int(animation.get("refresh_every", defaults.refresh_every)),
            max_points=animation.get("max_points", defaults.max_points),
            point_size=float(presentation.get("point_size", defaults.point_size)),
            vertex_radius=float(presentation.get("vertex_radius", defaults.vertex_radius)),
            colormap=str(presentation.get("colormap", defaults.colormap)),
            vertex_color=str(presentation.get("vertex_color", defaults.vertex_color)),
            antialiasing=bool(presentation.get("antialiasing", defaults.antialiasing)),
            triangle=[[float(x), float(y)] for x, y in animation.get("triangle", defaults.triangle)],
        )
        validate_settings(settings, require_triangle=require_triangle)
    except TypeError as error:
        raise ValueError(f"Invalid settings: {error}") from error
    return settings


def validate_triangle(triangle):
    if len(triangle) != 3:
        raise ValueError(f"The animation needs exactly 3 vertices, got {len(triangle)}.")


def validate_settings(settings, require_triangle=False):
    if settings.canvas_width <= 0 or settings.canvas_height <= 0:
        raise ValueError("Canvas size must be positive.")
    if settings.max_slider_value < 0:
        raise ValueError("Slider maximum must not be negative.")
    if settings.tick_interval_ms <= 0:
        raise ValueError("Tick interval must be positive.")
    if settings.refresh_every <= 0:
        raise ValueError("Refresh cadence must be positive.")
    if settings.point_size <= 0 or settings.vertex_radius <= 0:
        raise ValueError("Point size and vertex radius must be positive.")
    if settings.max_points is not None:
        settings.max_points = int(settings.max_points)
        if settings.max_points < 0:
            raise ValueError("Maximum point count must not be negative.")
    if settings.triangle or require_triangle:
        validate_triangle(settings.triangle)


def load_settings(file_path, defaults=sierpinski_settings, require_triangle=False):
    with open(file_path, "r") as file:
        try:
            settings_dict = yaml.safe_load(file)
        except yaml.YAMLError as error:
            raise ValueError(f"Malformed settings file {file_path}: {error}") from error
    return dict_to_settings(settings_dict, defaults, require_triangle=require_triangle)


def save_settings(settings, file_path):
    with open(file_path, "w") as file:
        yaml.dump(settings_to_dict(settings), file, default_flow_style=False)
