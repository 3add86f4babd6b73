"""A small ray tracer: shapes, patterns, lighting, reflection, refraction and PPM output."""

__version__ = "0.1.0"

__all__ = [
    "camera",
    "canvas",
    "cli",
    "intersection",
    "light",
    "material",
    "matrices",
    "patterns",
    "ray",
    "scenes",
    "shape",
    "tuples",
    "world",
]