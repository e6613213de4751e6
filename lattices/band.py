# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from dataclasses import dataclass

from .checks import check_int, check_non_neg

@dataclass(frozen=True, init=False)
class Band:
    """
    The zero based band number selected by a layout. It is added as constant to every
    offset, so a structure with several bands per element addresses one of them.
    """

    #: The band number.
    value: int

    def __init__(self, value: int = 0) -> None:
        value = check_int("Band", value)
        check_non_neg("Band", value)
        object.__setattr__(self, "value", value)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"Band({self.value})"
