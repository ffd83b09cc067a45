from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from beam_analysis.config import AnalysisSettings
from beam_analysis.domain.beam import Beam
from beam_analysis.domain.conditions import Condition
from beam_analysis.domain.errors import OutOfDomainError
from beam_analysis.domain.results import Equation


class ConditionAnalyzer(ABC):
    """
    Capacidad que implementa cada condición de apoyo.

    Convenciones (comunes a todas las condiciones):
      - carga w > 0 hacia abajo
      - momento graficado = -M_sagging (tramo positivo queda abajo)
      - corte V > 0 a la izquierda = reacción izquierda
      - flecha en mm, negativa hacia abajo
    """
    condition: Condition

    def __init__(self, settings: Optional[AnalysisSettings] = None):
        self.settings = settings or AnalysisSettings()

    @abstractmethod
    def deflection_equation(self, beam: Beam, load: float, correction_factor: float) -> Equation:
        ...

    @abstractmethod
    def bending_moment_equation(self, beam: Beam, load: float) -> Equation:
        ...

    @abstractmethod
    def shear_force_equation(self, beam: Beam, load: float) -> Equation:
        ...

    # -------------------------
    # Helpers
    # -------------------------
    def _inverse_rigidity(self, beam: Beam) -> float:
        """1/EI con EI en kN·m². EI faltante => NaN, EI=0 => inf (sin excepción)."""
        EI = beam.material.stiffness(self.settings.stiffness_key) / float(self.settings.ei_unit_divisor)
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(1.0) / np.float64(EI))

    def _deflection_scale(self, correction_factor: float) -> float:
        return float(correction_factor) * float(self.settings.deflection_multiplier)

    def _check_x(self, x: float, total: float) -> float:
        x = float(x)
        tol = self.settings.position_tol
        if math.isnan(x) or x < -tol or x > total + tol:
            raise OutOfDomainError(x, total)
        return x

    def _is_at(self, x: float, x0: float) -> bool:
        return abs(x - x0) <= self.settings.position_tol
