# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""typing has all classes used in the external API of lattices."""

from .extent import Extent
from .index import Index
from .stride import Stride
from .band import Band
from .mapper import Mapper
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
from .grid import Grid, GridFactory

from .options import Options, IterationOptions, OptionType

from .lattices import Lattices
