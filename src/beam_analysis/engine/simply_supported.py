from __future__ import annotations

from typing import Tuple

from beam_analysis.domain.beam import Beam
from beam_analysis.domain.conditions import Condition
from beam_analysis.domain.results import Equation, Point, SingleValue
from beam_analysis.engine.base import ConditionAnalyzer


class SimplySupportedAnalyzer(ConditionAnalyzer):
    """
    Viga simplemente apoyada, luz L = primary_span, carga uniforme w.

      M(x) = -(w·x/2)·(L - x)
      V(x) = w·(L/2 - x)
      δ(x) = -(w·x / (24·EI))·(L³ - 2·L·x² + x³) · k · 1000   [mm]

    δ(L/2) = -5·w·L⁴ / (384·EI) (flecha hacia abajo).
    """
    condition = Condition.SIMPLY_SUPPORTED

    def reactions(self, beam: Beam, load: float) -> Tuple[float, float]:
        R = float(load) * float(beam.primary_span) / 2.0
        return R, R

    def deflection_equation(self, beam: Beam, load: float, correction_factor: float) -> Equation:
        L = float(beam.primary_span)
        w = float(load)
        inv_EI = self._inverse_rigidity(beam)
        scale = self._deflection_scale(correction_factor)

        def equation(x: float) -> SingleValue:
            x = self._check_x(x, L)
            y = -((w * x) / 24.0) * inv_EI * (L ** 3 - 2.0 * L * x ** 2 + x ** 3) * scale
            return SingleValue(Point(x, y))

        return equation

    def bending_moment_equation(self, beam: Beam, load: float) -> Equation:
        L = float(beam.primary_span)
        w = float(load)

        def equation(x: float) -> SingleValue:
            x = self._check_x(x, L)
            return SingleValue(Point(x, -((w * x / 2.0) * (L - x))))

        return equation

    def shear_force_equation(self, beam: Beam, load: float) -> Equation:
        L = float(beam.primary_span)
        w = float(load)

        def equation(x: float) -> SingleValue:
            x = self._check_x(x, L)
            return SingleValue(Point(x, w * (L / 2.0 - x)))

        return equation
