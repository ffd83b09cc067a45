from __future__ import annotations

from dataclasses import dataclass

from beam_analysis.domain.beam import Beam
from beam_analysis.domain.conditions import Condition
from beam_analysis.domain.errors import InvalidBeamError
from beam_analysis.domain.results import Discontinuity, Equation, EquationValue, Point, SingleValue
from beam_analysis.engine.base import ConditionAnalyzer


@dataclass(frozen=True)
class TwoSpanReactions:
    M1: float  # momento sobre el apoyo central (negativo = hogging)
    R1: float  # apoyo izquierdo
    R2: float  # apoyo central
    R3: float  # apoyo derecho


class TwoSpanUnequalAnalyzer(ConditionAnalyzer):
    """
    Viga continua de dos tramos (L1, L2) con carga uniforme w en ambos.

    Ecuación de los tres momentos (extremos articulados):
      M1 = -w·(L1³ + L2³) / (8·(L1 + L2))
      R1 = M1/L1 + w·L1/2
      R3 = M1/L2 + w·L2/2
      R2 = w·(L1 + L2) - R1 - R3

    Las tres magnitudes (flecha, momento, corte) usan estas mismas reacciones.
    """
    condition = Condition.TWO_SPAN_UNEQUAL

    def reactions(self, beam: Beam, load: float) -> TwoSpanReactions:
        L1 = float(beam.primary_span)
        L2 = float(beam.secondary_span)
        if not L2 > 0:
            raise InvalidBeamError(f"secondary_span debe ser > 0 para dos tramos (={L2!r})")
        w = float(load)

        M1 = -(w * L2 ** 3 + w * L1 ** 3) / (8.0 * (L1 + L2))
        R1 = M1 / L1 + w * L1 / 2.0
        R3 = M1 / L2 + w * L2 / 2.0
        R2 = w * (L1 + L2) - R1 - R3
        return TwoSpanReactions(M1=M1, R1=R1, R2=R2, R3=R3)

    def bending_moment_equation(self, beam: Beam, load: float) -> Equation:
        r = self.reactions(beam, load)
        L1 = float(beam.primary_span)
        T = beam.total_span
        w = float(load)

        def sagging_first(x: float) -> float:
            return r.R1 * x - w * x ** 2 / 2.0

        def sagging_second(x: float) -> float:
            return r.R1 * x + r.R2 * (x - L1) - w * x ** 2 / 2.0

        def equation(x: float) -> EquationValue:
            x = self._check_x(x, T)
            if self._is_at(x, 0.0) or self._is_at(x, T):
                return SingleValue(Point(x, 0.0))
            if self._is_at(x, L1):
                return Discontinuity(
                    left=Point(x, -sagging_first(L1)),
                    right=Point(x, -sagging_second(L1)),
                )
            if x < L1:
                return SingleValue(Point(x, -sagging_first(x)))
            return SingleValue(Point(x, -sagging_second(x)))

        return equation

    def shear_force_equation(self, beam: Beam, load: float) -> Equation:
        r = self.reactions(beam, load)
        L1 = float(beam.primary_span)
        T = beam.total_span
        w = float(load)

        def equation(x: float) -> EquationValue:
            x = self._check_x(x, T)
            if self._is_at(x, 0.0):
                return SingleValue(Point(x, r.R1))
            if self._is_at(x, L1):
                return Discontinuity(
                    left=Point(x, r.R1 - w * L1),
                    right=Point(x, r.R1 + r.R2 - w * L1),
                )
            if x < L1:
                return SingleValue(Point(x, r.R1 - w * x))
            return SingleValue(Point(x, r.R1 + r.R2 - w * x))

        return equation

    def deflection_equation(self, beam: Beam, load: float, correction_factor: float) -> Equation:
        """
        Cada tramo se integra como viga apoyada con el momento M1 en el apoyo
        central. El segundo tramo se mide desde el extremo derecho (u = T - x),
        así la flecha es nula en los tres apoyos y la pendiente es continua en L1.
        """
        r = self.reactions(beam, load)
        L1 = float(beam.primary_span)
        L2 = float(beam.secondary_span)
        T = beam.total_span
        w = float(load)
        inv_EI = self._inverse_rigidity(beam)
        scale = self._deflection_scale(correction_factor)

        def ei_y(s: float, R: float, Ls: float) -> float:
            # EI·y para un tramo de luz Ls con reacción extrema R (s desde ese extremo)
            return (s / 24.0) * (4.0 * R * s ** 2 - w * s ** 3 + w * Ls ** 3 - 4.0 * R * Ls ** 2)

        def equation(x: float) -> SingleValue:
            x = self._check_x(x, T)
            if x <= L1 or self._is_at(x, L1):
                value = ei_y(x, r.R1, L1)
            else:
                value = ei_y(T - x, r.R3, L2)
            return SingleValue(Point(x, value * inv_EI * scale))

        return equation
