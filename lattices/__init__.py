# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from .extent import Extent
from .index import Index
from .stride import Stride
from .band import Band
from .layout import Layout
from .range import Range
from .precedence import Precedence
from .structure import Structure
from .view import View
from .projection import Projection

from .cursor import IndexCursor, Direction
from .iterator import IndexIterator, IndexIterable
from .loop import Loop

from .buffer import Buffer, ArrayBuffer
from .grid import Grid

from .errors import (
    BaseLatticeError,
    InvalidShapeError,
    IndexOutOfBoundsError,
    UnsupportedTransformError,
    DimensionalityMismatchError
)
from .options import set_options, get_options, IterationOptions, OptionType

from .lattices import Lattices
