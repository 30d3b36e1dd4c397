# src/jgeom/geometries.py
import jax.numpy as jnp

from .base import CoordinateTable


def load_water_geometry() -> CoordinateTable:
    # H2O, atomic units
    coords = jnp.array(
        [
            [0.000000000000, 0.000000000000, -0.134503695264],  # O
            [0.000000000000, -1.684916670000, 1.067335684736],  # H
            [0.000000000000, 1.684916670000, 1.067335684736],  # H
        ],
        dtype=jnp.float64,
    )
    return CoordinateTable("water", "Water coordinates", ("O", "H", "H"), coords)


def load_formaldehyde_geometry() -> CoordinateTable:
    # H2CO, atomic units
    coords = jnp.array(
        [
            [0.000025165297, 0.000000000000, 0.144571523302],  # C
            [-0.000038305955, 0.000000000000, 1.343510833886],  # O
            [0.938708677255, 0.000000000000, -0.443151260635],  # H
            [-0.938658598164, 0.000000000000, -0.443084756552],  # H
        ],
        dtype=jnp.float64,
    )
    return CoordinateTable(
        "formaldehyde", "Formaldehyde coordinates", ("C", "O", "H", "H"), coords
    )


def load_geometries():
    """Both predefined tables, water first."""
    return [load_water_geometry(), load_formaldehyde_geometry()]
