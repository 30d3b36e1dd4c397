# src/jgeom/atomic_weights.py
from __future__ import annotations
from types import MappingProxyType
from typing import Optional

import jax.numpy as jnp

from .base import CoordinateTable, GeometryError

# Monoisotopic masses for H and O, standard weights for C and N (amu)
ATOMIC_WEIGHTS = MappingProxyType(
    {
        "H": 1.007825032,
        "C": 12.011,
        "N": 14.007,
        "O": 15.99491462,
    }
)


def atomic_weight(symbol: str) -> Optional[float]:
    """Mass for an element symbol, or None if the symbol is not tabulated."""
    return ATOMIC_WEIGHTS.get(symbol)


def weights_for(table: CoordinateTable) -> jnp.ndarray:
    """Return (N,) masses matching the rows of `table`."""
    missing = sorted({sym for sym in table.atoms if sym not in ATOMIC_WEIGHTS})
    if missing:
        raise GeometryError(
            f"{table.name}: no atomic weight for {', '.join(missing)}"
        )
    return jnp.array([ATOMIC_WEIGHTS[sym] for sym in table.atoms], dtype=jnp.float64)
