# src/jgeom/base.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple

import jax
import jax.numpy as jnp

# Double precision so literal coordinates survive unrounded
jax.config.update("jax_enable_x64", True)


class GeometryError(ValueError):
    """Raised for malformed coordinate tables or unknown elements."""


@dataclass(frozen=True, eq=False)
class CoordinateTable:
    """
    Fixed-size (N,3) table of atomic positions for one molecule.
    Units: Bohr-scale atomic units. Row i is the position of atoms[i].
    """

    name: str
    label: str
    atoms: Tuple[str, ...]
    coords: jnp.ndarray  # (N, 3) float64

    def __post_init__(self):
        coords = jnp.asarray(self.coords, dtype=jnp.float64)
        if coords.ndim != 2 or coords.shape[1] != 3:
            raise GeometryError(
                f"{self.name}: coordinates must have shape (N, 3), got {coords.shape}"
            )
        if coords.shape[0] == 0:
            raise GeometryError(f"{self.name}: coordinate table is empty")
        atoms = tuple(self.atoms)
        if len(atoms) != coords.shape[0]:
            raise GeometryError(
                f"{self.name}: {len(atoms)} atom symbols for {coords.shape[0]} rows"
            )
        # frozen dataclass, so bypass __setattr__ for the normalised fields
        object.__setattr__(self, "coords", coords)
        object.__setattr__(self, "atoms", atoms)

    @property
    def n_atoms(self) -> int:
        return int(self.coords.shape[0])

    def rows(self) -> List[Tuple[float, ...]]:
        """Rows as tuples of Python floats, in table order."""
        return [tuple(float(v) for v in row) for row in self.coords.tolist()]
