import unittest
from itertools import product

from lattices import (
    Lattices, Extent, Index, Stride, Range, Structure, Projection, Grid, ArrayBuffer, Buffer
)
from utils import backends, all_coords, collect

class Matrix(Grid):
    """Grid subclass, transformations return matrices."""

    def __init__(self, structure, buffer):
        super().__init__(structure, buffer, Matrix)

class TestGrid(unittest.TestCase):

    def setUp(self):
        self.lattices = [Lattices(backend) for backend in backends]
        self.extents = [Extent(5), Extent(3, 4), Extent(2, 3, 4), Extent(2, 2, 2, 3)]

    def numbered(self, lt, extent):
        grid = lt.grid(extent, dtype=lt.namespace.float64)
        for i, c in enumerate(all_coords(extent)):
            grid[c] = float(i)
        return grid

    def test_construction(self):
        for lt, extent in product(self.lattices, self.extents):
            grid = lt.grid(extent)
            self.assertEqual(grid.extent, extent)
            self.assertEqual(len(grid.buffer), extent.cells())
            self.assertIsInstance(grid.buffer, Buffer)
            self.assertEqual(grid.structure, Structure(extent))

        buffer = ArrayBuffer.zeros(11)
        self.assertRaises(ValueError, Grid, Structure(Extent(3, 4)), buffer)
        self.assertRaises(ValueError, ArrayBuffer, backends[0].zeros((3, 4)))

    def test_access(self):
        for lt in self.lattices:
            grid = self.numbered(lt, Extent(3, 4))
            self.assertEqual(float(grid[1, 2]), 6.0)
            self.assertEqual(float(grid[Index(2, 3)]), 11.0)
            self.assertEqual(float(grid.buffer.get(6)), 6.0)
            self.assertRaises(IndexError, grid.__getitem__, (3, 0))

            vector = self.numbered(lt, Extent(5))
            self.assertEqual(float(vector[3]), 3.0)

    def test_views_share_buffer(self):
        for lt in self.lattices:
            grid = self.numbered(lt, Extent(3, 4))
            sliced = grid.view(Range(Index(1, 1), Extent(2, 2)))
            self.assertIs(sliced.buffer, grid.buffer)
            self.assertEqual([float(sliced[c]) for c in all_coords(sliced.extent)], [5.0, 6.0, 9.0, 10.0])
            sliced[0, 0] = -1.0
            self.assertEqual(float(grid[1, 1]), -1.0)

            trans = grid.transpose()
            self.assertEqual(trans.extent, Extent(4, 3))
            self.assertEqual(float(trans[3, 2]), float(grid[2, 3]))

            row = grid.project(Projection.row(2))
            self.assertEqual([float(row[c]) for c in range(4)], [8.0, 9.0, 10.0, 11.0])

            down = grid.view(Stride(2, 2))
            self.assertEqual([float(down[c]) for c in all_coords(down.extent)], [0.0, 2.0, 8.0, 10.0])

    def test_copy(self):
        for lt in self.lattices:
            grid = self.numbered(lt, Extent(3, 4))
            sliced = grid.view(Range(Index(1, 1), Extent(2, 2)))
            dense = sliced.copy()
            self.assertEqual(dense.structure, Structure(Extent(2, 2)))
            self.assertEqual(len(dense.buffer), 4)
            self.assertEqual(dense, sliced)
            dense[0, 0] = 100.0
            self.assertEqual(float(grid[1, 1]), 5.0)
            self.assertNotEqual(dense, sliced)

            like = grid.like()
            self.assertEqual(like.extent, grid.extent)
            self.assertTrue(like.all_match(lambda r, c: float(like[r, c]) == 0.0))

    def test_assign(self):
        for lt in self.lattices:
            grid = self.numbered(lt, Extent(3, 4))
            other = lt.grid(Extent(3, 4), dtype=lt.namespace.float64)
            other.assign(grid)
            self.assertEqual(other, grid)

            other.assign(2.0)
            self.assertTrue(other.all_match(lambda r, c: float(other[r, c]) == 2.0))

            other.assign(lambda v: v*3)
            self.assertTrue(other.all_match(lambda r, c: float(other[r, c]) == 6.0))

            other.swap(grid)
            self.assertEqual(float(grid[2, 3]), 6.0)
            self.assertEqual(float(other[2, 3]), 11.0)

            self.assertRaises(ValueError, other.assign, lt.grid(Extent(4, 3)))

    def test_predicates(self):
        for lt, extent in product(self.lattices, self.extents):
            grid = self.numbered(lt, extent)
            self.assertEqual(collect(grid), all_coords(extent))
            self.assertTrue(grid.any_match(lambda *c: float(grid[c]) == extent.elements() - 1))
            self.assertTrue(grid.all_match(lambda *c: float(grid[c]) >= 0.0))
            self.assertTrue(grid.none_match(lambda *c: float(grid[c]) < 0.0))

    def test_factory(self):
        for lt in self.lattices:
            matrix = lt.grid(Extent(3, 4), factory=Matrix)
            self.assertIsInstance(matrix.transpose(), Matrix)
            self.assertIsInstance(matrix.view(Range(Extent(2, 2))), Matrix)
            self.assertIsInstance(matrix.copy(), Matrix)
            self.assertNotIsInstance(lt.grid(Extent(3, 4)).transpose(), Matrix)

if __name__ == "__main__":
    unittest.main()
