import unittest
from itertools import product
from typing import Sequence

from lattices import (
    Extent, Index, Stride, Layout, Structure,
    IndexOutOfBoundsError, DimensionalityMismatchError, UnsupportedTransformError
)
from lattices.backend import get_index_dtype
from utils import backends, all_coords

class ColumnMajor:
    """Mapping which is not a layout, column-major order for rank 2."""

    def __init__(self, rows: int) -> None:
        self.rows = rows

    @property
    def dimensionality(self) -> int:
        return 2

    def offset(self, *coord: int | Sequence[int]) -> int:
        r, c = coord[0] if len(coord) == 1 else coord
        return c*self.rows + r

    def index(self, offset: int) -> Index:
        return Index(offset % self.rows, offset // self.rows)

class TestStructure(unittest.TestCase):

    def setUp(self):
        self.extents = [Extent(7), Extent(3, 4), Extent(2, 3, 4), Extent(2, 3, 2, 3), Extent(3, 4, bands=2)]

    def test_construction(self):
        structure = Structure(Extent(3, 4))
        self.assertEqual(structure.layout, Layout.dense(Extent(3, 4)))
        self.assertEqual(structure, Structure.of(Extent(3, 4)))
        self.assertEqual(structure.dimensionality, 2)
        self.assertRaises(DimensionalityMismatchError, Structure, Extent(3, 4), Layout.dense(Extent(3)))

    def test_checked_offset(self):
        structure = Structure(Extent(3, 4))
        self.assertEqual(structure.offset(1, 2), 6)
        self.assertEqual(structure.index(6), Index(1, 2))
        self.assertRaises(IndexOutOfBoundsError, structure.offset, 3, 0)
        self.assertRaises(IndexOutOfBoundsError, structure.offset, 0, 4)
        self.assertRaises(IndexOutOfBoundsError, structure.offset, -1, 0)
        self.assertRaises(IndexError, structure.offset, 0, -1)
        self.assertRaises(DimensionalityMismatchError, structure.offset, 1)
        self.assertRaises(IndexOutOfBoundsError, structure.index, 12)
        self.assertRaises(IndexOutOfBoundsError, structure.index, -1)

    def test_round_trip(self):
        for extent in self.extents:
            structure = Structure(extent)
            for coord in all_coords(extent):
                self.assertEqual(structure.index(structure.offset(coord)), Index(coord))

    def test_gaps(self):
        # offsets between the bands are not part of the structure
        structure = Structure(Extent(3, 4, bands=2))
        self.assertEqual(structure.offset(0, 1), 2)
        self.assertRaises(IndexOutOfBoundsError, structure.index, 1)

        # offsets outside a slice are not part of it
        sliced = Structure(Extent(2, 2), Layout(Index(4, 1), Stride(4, 1)))
        self.assertEqual(sliced.index(6), Index(0, 1))
        self.assertRaises(IndexOutOfBoundsError, sliced.index, 7)
        self.assertRaises(IndexOutOfBoundsError, sliced.index, 4)

    def test_mapper(self):
        structure = Structure(Extent(3, 4), ColumnMajor(3))
        self.assertEqual(structure.offset(1, 2), 7)
        self.assertEqual(structure.index(7), Index(1, 2))
        self.assertRaises(IndexOutOfBoundsError, structure.index, 12)
        self.assertRaises(UnsupportedTransformError, structure.transpose)
        self.assertRaises(TypeError, structure.project, 0, 1)

    def test_array_size(self):
        structure = Structure(Extent(3, 4))
        structure.check_array_size(12)
        self.assertRaises(ValueError, structure.check_array_size, 11)
        Structure(Extent(0, 4)).check_array_size(0)
        Structure(Extent(3, 4, bands=2)).check_array_size(23)

    def test_same_extent(self):
        structure = Structure(Extent(3, 4))
        structure.check_same_extent(Structure(Extent(3, 4)))
        structure.check_same_extent(Extent(3, 4))
        self.assertRaises(ValueError, structure.check_same_extent, Extent(4, 3))
        self.assertTrue(Structure(Extent(3, 3)).is_square())
        self.assertFalse(structure.is_square())
        self.assertFalse(Structure(Extent(3, 3, 3)).is_square())
        self.assertEqual(Structure(Extent(3, 4), Layout(Index(1, 1), Stride(5, 1))).like(), structure)

    def test_vectorized(self):
        for xp, extent in product(backends, self.extents):
            int_type = get_index_dtype(xp)
            structure = Structure(extent)
            idxs = xp.asarray([list(c) for c in all_coords(extent)], dtype=int_type).T
            offsets = structure.offsets(idxs)
            self.assertTrue(bool(xp.all(structure.indexes(offsets) == idxs)))

            bad = xp.asarray([[e] for e in extent], dtype=int_type)
            self.assertRaises(IndexOutOfBoundsError, structure.offsets, bad)
            self.assertRaises(IndexOutOfBoundsError, structure.indexes, xp.asarray([extent.cells()], dtype=int_type))

    def test_overlapping_spans(self):
        # the span of the columns reaches past the row stride
        structure = Structure(Extent(2, 3), Layout(Index(0, 0), Stride(3, 2)))
        coords = all_coords(structure.extent)
        offsets = [structure.offset(c) for c in coords]
        self.assertEqual(offsets, [0, 2, 4, 3, 5, 7])
        for coord, offset in zip(coords, offsets):
            self.assertEqual(structure.index(offset), Index(coord))
        for offset in (1, 6, 8, -1):
            self.assertRaises(IndexOutOfBoundsError, structure.index, offset)

        self.assertEqual(structure.layout.solve(4, structure.extent), Index(0, 2))
        self.assertIsNone(structure.layout.solve(6, structure.extent))

        for xp in backends:
            int_type = get_index_dtype(xp)
            found = structure.indexes(xp.asarray(offsets, dtype=int_type))
            expected = xp.asarray([list(c) for c in coords], dtype=int_type).T
            self.assertTrue(bool(xp.all(found == expected)))
            self.assertRaises(IndexOutOfBoundsError, structure.indexes, xp.asarray([4, 6], dtype=int_type))

    def test_integer_coordinates(self):
        structure = Structure(Extent(3, 4))
        self.assertRaises(TypeError, structure.offset, 1.5, 2)
        self.assertRaises(TypeError, structure.offset, (1, 2.0))
        self.assertRaises(TypeError, structure.index, 6.0)
        self.assertRaises(TypeError, structure.layout.offset, 1, 0.5)
        for xp in backends:
            self.assertEqual(structure.offset(xp.asarray(1, dtype=get_index_dtype(xp)), 2), 6)

    def test_square(self):
        Structure(Extent(3, 3)).check_square()
        self.assertRaises(ValueError, Structure(Extent(3, 4)).check_square)
        self.assertRaises(ValueError, Structure(Extent(3, 3, 3)).check_square)

        Structure(Extent(4, 3)).check_rectangular()
        Structure(Extent(3, 3)).check_rectangular()
        self.assertRaises(ValueError, Structure(Extent(3, 4)).check_rectangular)
        self.assertRaises(ValueError, Structure(Extent(4)).check_rectangular)

if __name__ == "__main__":
    unittest.main()
