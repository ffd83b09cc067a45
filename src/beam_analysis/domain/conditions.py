from __future__ import annotations

from enum import Enum
from typing import Union

from beam_analysis.domain.errors import UnsupportedConditionError


class Condition(str, Enum):
    SIMPLY_SUPPORTED = "simply-supported"
    TWO_SPAN_UNEQUAL = "two-span-unequal"

    @classmethod
    def parse(cls, value: Union["Condition", str]) -> "Condition":
        if isinstance(value, cls):
            return value
        name = (value or "").strip().lower() if isinstance(value, str) else value
        try:
            return cls(name)
        except ValueError:
            raise UnsupportedConditionError(value) from None


class Quantity(str, Enum):
    DEFLECTION = "deflection"
    BENDING_MOMENT = "bending-moment"
    SHEAR_FORCE = "shear-force"
