from __future__ import annotations

from dataclasses import dataclass

from beam_analysis.domain.errors import InvalidBeamError
from beam_analysis.domain.material import Material


@dataclass(frozen=True)
class Beam:
    """
    Geometría de la viga (en m) + material.

    secondary_span = 0 para la viga simplemente apoyada (no se usa).
    """
    primary_span: float
    secondary_span: float
    material: Material

    def __post_init__(self):
        if not self.primary_span > 0:
            raise InvalidBeamError(f"primary_span debe ser > 0 (={self.primary_span!r})")
        if not self.secondary_span >= 0:
            raise InvalidBeamError(f"secondary_span debe ser >= 0 (={self.secondary_span!r})")

    @property
    def total_span(self) -> float:
        return float(self.primary_span + self.secondary_span)
