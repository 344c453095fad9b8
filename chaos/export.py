import logging

from PIL import Image, ImageDraw


def geometry_to_image(geometry, theme):
    """Render a Geometry to a Pillow image of the canvas size."""
    width, height = (int(round(s)) for s in geometry.size)
    image = Image.new("RGB", (width, height), tuple(theme["bg"]))
    draw = ImageDraw.Draw(image)

    border = geometry.border
    draw.rectangle(
        [border.x, border.y, border.x + border.width - 1, border.y + border.height - 1],
        outline=tuple(theme["border"]),
    )
    point_color = tuple(theme["points"])
    for rect in geometry.points:
        draw.rectangle([rect.x, rect.y, rect.x + rect.width, rect.y + rect.height], outline=point_color)
    vertex_color = tuple(theme["vertices"])
    for circle in geometry.vertices:
        draw.ellipse(
            [circle.x - circle.radius, circle.y - circle.radius, circle.x + circle.radius, circle.y + circle.radius],
            fill=vertex_color,
        )
    return image


def export_geometry(geometry, theme, file_path):
    """Save the geometry as an image. Paths without an image extension get '.png'."""
    if not file_path.lower().endswith((".png", ".jpg", ".jpeg")):
        file_path += ".png"
    logging.info(f"Exporting {len(geometry.points)} points to {file_path}...")
    geometry_to_image(geometry, theme).save(file_path)
    logging.info(f"Successfully exported to {file_path}.")
    return file_path
