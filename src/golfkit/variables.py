"""Reserved helper identifiers"""

from __future__ import annotations

from enum import Enum


class ReservedVariables(str, Enum):
    TEMPORARY_VAR = "$"  # scratch slot used by swap_elements
    FUNCTION_ARG = "_"  # placeholder parameter for argument-less arrows

    def __str__(self) -> str:
        return self.value
