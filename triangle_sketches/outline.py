"""Plain outline drawing of triangles, no stippling."""
import numpy as np


def to_pixels(tri, width, height):
    """Scale a normalized triangle to a (3, 2) array of pixel coordinates"""
    return np.asarray(tri, dtype=float) * np.array([width, height])


def render_triangle(surface, tri):
    """Stroke tri as one closed polygon. surface needs width, height and
    polygon(vertices).
    """
    surface.polygon(to_pixels(tri, surface.width, surface.height))
