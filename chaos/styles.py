from matplotlib import colormaps
from matplotlib.colors import to_rgb


def rgba_to_rgb(color):
    return [int(round(c * 255)) for c in color[:3]]


def theme_colors(colormap_name, vertex_color="#1293D8"):
    """Pick interface and canvas colors from a matplotlib colormap."""
    colormap = colormaps[colormap_name]
    return {
        "bg": rgba_to_rgb(colormap(0.0)),
        "text": rgba_to_rgb(colormap(0.3)),
        "border": rgba_to_rgb(colormap(0.5)),
        "input_bg": rgba_to_rgb(colormap(0.1)),
        "points": rgba_to_rgb(colormap(0.8)),
        "vertices": rgba_to_rgb(to_rgb(vertex_color)),
    }


def get_stylesheet():
    return """
     * {{
        color: rgb({r_text}, {g_text}, {b_text});
        background-color: rgb({r_bg}, {g_bg}, {b_bg});
        border: 1px solid rgb({r_border}, {g_border}, {b_border});
    }}
    QGraphicsView {{
        border: none;
    }}
    QPushButton:hover {{
        background-color: rgb({r_border}, {g_border}, {b_border});
        color: rgb({r_bg}, {g_bg}, {b_bg});
    }}
    QSlider {{
        border: none;
    }}
    QSlider::groove:horizontal {{
        background-color: rgb({r_input_bg}, {g_input_bg}, {b_input_bg});
        height: 6px;
    }}
    QSlider::handle:horizontal {{
        background-color: rgb({r_border}, {g_border}, {b_border});
        width: 12px;
        margin: -4px 0;
    }}
    QToolTip {{
        border: 1px solid rgb({r_text}, {g_text}, {b_text});
    }}
    QLabel {{
        border: none;
    }}
    """


def stylesheet_for(theme):
    variables = {}
    for name in ("bg", "text", "border", "input_bg"):
        r, g, b = theme[name]
        variables.update({f"r_{name}": r, f"g_{name}": g, f"b_{name}": b})
    return get_stylesheet().format(**variables)
