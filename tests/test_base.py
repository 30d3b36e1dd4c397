import pytest

import jax.numpy as jnp

import jgeom.base


class TestCoordinateTable:

    def test___init__(self):
        table = jgeom.base.CoordinateTable(
            "h2", "Hydrogen coordinates", ["H", "H"], [[0, 0, 0], [0, 0, 1.4]]
        )
        assert table.n_atoms == 2, "wrong number of atoms"
        assert table.atoms == ("H", "H"), "atoms not stored as a tuple"
        assert table.coords.dtype == jnp.float64, "coordinates not double precision"
        return

    def test_bad_shapes(self):
        with pytest.raises(jgeom.base.GeometryError):
            jgeom.base.CoordinateTable("x", "x", ("H",), [[0.0, 0.0]])
        with pytest.raises(jgeom.base.GeometryError):
            jgeom.base.CoordinateTable("x", "x", ("H",), [0.0, 0.0, 0.0])
        with pytest.raises(jgeom.base.GeometryError):
            jgeom.base.CoordinateTable("x", "x", (), jnp.zeros((0, 3)))
        with pytest.raises(jgeom.base.GeometryError):
            jgeom.base.CoordinateTable("x", "x", ("H", "H"), [[0.0, 0.0, 0.0]])
        return

    def test_geometry_error_is_value_error(self):
        assert issubclass(jgeom.base.GeometryError, ValueError)

    def test_immutable(self):
        table = jgeom.base.CoordinateTable("h", "h", ("H",), [[1.0, 2.0, 3.0]])
        with pytest.raises(AttributeError):
            table.coords = jnp.zeros((1, 3))
        with pytest.raises(TypeError):
            table.coords[0, 0] = 5.0
        assert table.rows() == [(1.0, 2.0, 3.0)]
