"""Fixed molecular geometries held as JAX arrays."""

__version__ = "0.1.0"

from .base import CoordinateTable, GeometryError
from .geometries import load_water_geometry, load_formaldehyde_geometry, load_geometries
from .atomic_weights import ATOMIC_WEIGHTS, atomic_weight, weights_for
from .printer import PrintOptions, format_table, format_value, print_geometries
from .main import show_geometries

__all__ = [
    "CoordinateTable",
    "GeometryError",
    "load_water_geometry",
    "load_formaldehyde_geometry",
    "load_geometries",
    "ATOMIC_WEIGHTS",
    "atomic_weight",
    "weights_for",
    "PrintOptions",
    "format_table",
    "format_value",
    "print_geometries",
    "show_geometries",
]
