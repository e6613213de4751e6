# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Hashable, Literal, Any, Self
from enum import Enum
import logging
import threading

logger = logging.getLogger(__name__)

class OptionType(Enum):
    ITERATION = 0

class Options:

    key: Hashable

    def __init__(self, category: OptionType):
        self.key = (category, threading.get_ident())

    def __enter__(self) -> Self:
        global _opts
        if self.key in _opts:
            self._tmp = _opts[self.key]
        else:
            self._tmp = None
        _opts[self.key] = self
        logger.debug("enter %r", self)
        return self

    def __exit__(self, *_) -> None:
        global _opts
        if self._tmp is not None:
            _opts[self.key] = self._tmp
        else:
            del _opts[self.key]
        logger.debug("exit %r", self)

PrecedenceKind = Literal["reverse", "natural"]

class IterationOptions(Options):
    """
    Context manager for the default traversal order of ranges and loops.
    ``"reverse"`` lets the last dimension vary fastest (row-major order),
    ``"natural"`` lets the first dimension vary fastest (column-major order).
    """

    #: Default precedence kind.
    precedence: PrecedenceKind

    def __init__(self, *, precedence: PrecedenceKind = "reverse"):
        if precedence not in ("reverse", "natural"):
            raise ValueError(f"Invalid precedence '{precedence}'. Choose 'reverse' or 'natural'.")
        self.precedence = precedence
        super().__init__(OptionType.ITERATION)

    def __repr__(self) -> str:
        return f"IterationOptions(precedence='{self.precedence}')"

_opts: dict[Any, Options] = {}

_defaults: dict[OptionType, Options] = {
    OptionType.ITERATION: IterationOptions(),
}

def get_options(otype: OptionType = OptionType.ITERATION) -> IterationOptions:
    """Options of the given category for the current thread, or the defaults."""
    global _opts
    key = (otype, threading.get_ident())
    if key in _opts:
        return _opts[key]
    return _defaults[otype]

def set_options(opts: IterationOptions) -> None:
    global _opts
    _opts[opts.key] = opts
    logger.debug("set %r", opts)
