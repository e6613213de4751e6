import unittest

from lattices import (
    Extent, Index, Stride, Band, Layout, Range, Structure, View, Loop,
    IndexOutOfBoundsError, DimensionalityMismatchError
)
from utils import all_coords

class TestView(unittest.TestCase):

    def setUp(self):
        self.structures = [
            Structure(Extent(7)),
            Structure(Extent(3, 4)),
            Structure(Extent(4, 5, 6)),
            Structure(Extent(3, 4, bands=2)),
            Structure(Extent(6, 5), Layout(Index(2, 3), Stride(9, 2), band=1)),
        ]

    def offsets(self, structure: Structure) -> list[int]:
        visited = []
        Loop.of(structure.extent).for_each(lambda *c: visited.append(structure.offset(c)))
        return visited

    def test_range_view(self):
        structure = Structure(Extent(3, 4))
        view = View.of(Range(Index(1, 1), Extent(2, 2)))
        sliced = view(structure)
        self.assertEqual(sliced.extent, Extent(2, 2))
        self.assertEqual(self.offsets(sliced), [5, 6, 9, 10])
        self.assertEqual(sliced.offset(0, 0), 5)
        self.assertEqual(sliced.index(9), Index(1, 0))
        self.assertEqual(structure.view(Range(Index(1, 1), Extent(2, 2))), sliced)

    def test_composition_law(self):
        for structure in self.structures:
            n = structure.dimensionality
            start = Index([1]*n)
            rng = Range(start, Extent([e - 2 for e in structure.extent]))
            view = View.of(rng)(structure)
            self.assertEqual(view.extent.bands, structure.extent.bands)
            for c in all_coords(view.extent):
                self.assertEqual(view.offset(c), structure.offset(start.plus(c)))

    def test_range_out_of_bounds(self):
        structure = Structure(Extent(3, 4))
        self.assertRaises(IndexOutOfBoundsError, View.of(Range(Index(2, 2), Extent(2, 2))), structure)
        self.assertRaises(IndexOutOfBoundsError, View.of(Range(Index(-1, 0), Extent(2, 2))), structure)
        self.assertRaises(DimensionalityMismatchError, View.of(Range(Extent(2))), structure)

    def test_start_and_extent_view(self):
        structure = Structure(Extent(3, 4))
        tail = View.of(Index(1, 2))(structure)
        self.assertEqual(tail.extent, Extent(2, 2))
        self.assertEqual(self.offsets(tail), [6, 7, 10, 11])
        self.assertEqual(View.of(Index(3, 4))(structure).extent, Extent(0, 0))
        self.assertRaises(IndexOutOfBoundsError, View.of(Index(4, 0)), structure)

        head = View.of(Extent(2, 2))(structure)
        self.assertEqual(self.offsets(head), [0, 1, 4, 5])
        self.assertRaises(IndexOutOfBoundsError, View.of(Extent(4, 2)), structure)

    def test_stride_view(self):
        structure = Structure(Extent(5, 7))
        down = View.of(Stride(2, 3))(structure)
        self.assertEqual(down.extent, Extent(3, 3))
        self.assertEqual(down.layout.stride, Stride(14, 3))
        self.assertEqual(down.offset(1, 2), structure.offset(2, 6))
        self.assertEqual(down.offset(2, 1), structure.offset(4, 3))

        for size in range(0, 10):
            for k in range(1, 5):
                extent = View.of(Stride(k))(Structure(Extent(size))).extent
                self.assertEqual(extent[0], -(-size // k))

    def test_band_view(self):
        structure = Structure(Extent(3, 4, bands=3))
        second = View.of(Band(2))(structure)
        self.assertEqual(second.extent, structure.extent)
        self.assertEqual(second.offset(0, 0), 2)
        self.assertEqual(second.offset(1, 1), 12 + 3 + 2)
        self.assertEqual(second.index(17), Index(1, 1))
        self.assertRaises(IndexOutOfBoundsError, View.of(Band(3)), structure)

    def test_transpose(self):
        structure = Structure(Extent(3, 4))
        trans = View.transpose()(structure)
        self.assertEqual(trans.extent, Extent(4, 3))
        for r, c in all_coords(structure.extent):
            self.assertEqual(trans.offset(c, r), structure.offset(r, c))

        for structure in self.structures:
            twice = View.transpose().and_then(View.transpose())(structure)
            self.assertEqual(twice, structure)

        structure = Structure(Extent(2, 3, 4))
        moved = structure.transpose([2, 0, 1])
        self.assertEqual(moved.extent, Extent(4, 2, 3))
        self.assertEqual(moved.offset(3, 1, 2), structure.offset(1, 2, 3))
        self.assertRaises(ValueError, structure.transpose, [0, 0, 1])
        self.assertRaises(DimensionalityMismatchError, structure.transpose, [0, 1])

    def test_compose(self):
        structure = Structure(Extent(6, 8))
        slice_view = View.of(Range(Index(1, 2), Extent(4, 6)))
        stride_view = View.of(Stride(2, 2))
        first = slice_view.and_then(stride_view)(structure)
        self.assertEqual(first, stride_view(slice_view(structure)))
        self.assertEqual(stride_view.compose(slice_view)(structure), first)
        self.assertEqual(first.extent, Extent(2, 3))
        self.assertEqual(first.offset(1, 2), structure.offset(3, 6))

    def derived(self, structure: Structure) -> list[Structure]:
        n = structure.dimensionality
        forms = [
            structure,
            View.of(Range(Index([1]*n), Extent([e - 2 for e in structure.extent])))(structure),
            View.of(Stride([2]*n))(structure),
            View.transpose()(structure),
        ]
        if n > 1:
            forms.append(structure.project(0, 1))
            forms.append(structure.project(-1, 0))
        if structure.extent.bands > 1:
            forms.append(View.of(Band(1))(structure))
        return forms

    def test_round_trip(self):
        # column span 4 reaches past the row stride 3
        overlapping = Structure(Extent(2, 3), Layout(Index(0, 0), Stride(3, 2)))
        for structure in self.structures + [overlapping]:
            for form in self.derived(structure):
                for c in all_coords(form.extent):
                    offset = form.offset(c)
                    self.assertEqual(form.index(offset), Index(c))
                    self.assertEqual(form.offset(form.index(offset)), offset)

    def test_invalid_argument(self):
        self.assertRaises(TypeError, View.of, 3)

if __name__ == "__main__":
    unittest.main()
