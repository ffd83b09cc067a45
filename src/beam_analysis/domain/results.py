from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar, Tuple, Union

from beam_analysis.domain.beam import Beam
from beam_analysis.domain.conditions import Condition, Quantity


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class SingleValue:
    kind: ClassVar[str] = "single"
    point: Point

    def points(self) -> Tuple[Point, ...]:
        return (self.point,)


@dataclass(frozen=True)
class Discontinuity:
    """
    Dos valores en la misma x (apoyo intermedio):
      left  = límite por izquierda
      right = límite por derecha
    """
    kind: ClassVar[str] = "discontinuity"
    left: Point
    right: Point

    def points(self) -> Tuple[Point, ...]:
        return (self.left, self.right)


EquationValue = Union[SingleValue, Discontinuity]
Equation = Callable[[float], EquationValue]


@dataclass(frozen=True)
class AnalysisResult:
    beam: Beam
    load: float
    equation: Equation

    # informativos (títulos / logs)
    condition: Condition
    quantity: Quantity

    # muestreo por defecto (lo completa la fachada desde los settings)
    samples_per_segment: int = 50
