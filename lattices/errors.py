# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

__all__ = [
    "BaseLatticeError",
    "InvalidShapeError",
    "IndexOutOfBoundsError",
    "UnsupportedTransformError",
    "DimensionalityMismatchError",
]

class BaseLatticeError(ValueError):
    """
    Base error which all lattice errors are sub-classed from.
    """

    _msg: str = "{}"

    def __init__(self, *args: object) -> None:
        """
        A single argument is treated as a pre-formatted message. Multiple arguments
        are used as arguments for the ``_msg`` template of the error class.
        """
        if len(args) == 1:
            super().__init__(args[0])
        else:
            super().__init__(self._msg.format(*args))

class InvalidShapeError(BaseLatticeError):
    """
    Raised for negative sizes, non-positive band counts, non-positive strides or
    cell counts which do not fit into the addressable (32-bit signed) range.
    """

    _msg = "Extent is out of bounds: [{}, bands={}]."

class IndexOutOfBoundsError(BaseLatticeError, IndexError):
    """
    Raised when a coordinate or offset is not part of the addressable region of a structure.
    """

    _msg = "{} out of bounds {}."

class UnsupportedTransformError(BaseLatticeError, TypeError):
    """
    Raised when a view or projection is requested for a mapping which is not
    expressible as start + stride layout.
    """

    _msg = "Transformation not supported for mapping of type {}."

class DimensionalityMismatchError(BaseLatticeError):
    """Raised when two operands disagree in their number of dimensions."""

    _msg = "{} dimensionality doesn't match: {} != {}."
