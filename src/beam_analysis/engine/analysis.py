from __future__ import annotations

import logging
from typing import Dict, Optional, Union

from beam_analysis.config import AnalysisSettings
from beam_analysis.domain.beam import Beam
from beam_analysis.domain.conditions import Condition, Quantity
from beam_analysis.domain.results import AnalysisResult
from beam_analysis.engine.base import ConditionAnalyzer
from beam_analysis.engine.simply_supported import SimplySupportedAnalyzer
from beam_analysis.engine.two_span import TwoSpanUnequalAnalyzer

logger = logging.getLogger(__name__)

ConditionLike = Union[Condition, str]


def build_analyzers(settings: AnalysisSettings) -> Dict[Condition, ConditionAnalyzer]:
    table: Dict[Condition, ConditionAnalyzer] = {}
    for analyzer in (SimplySupportedAnalyzer(settings), TwoSpanUnequalAnalyzer(settings)):
        table[analyzer.condition] = analyzer
    missing = set(Condition) - set(table)
    if missing:
        raise RuntimeError(f"Condiciones sin analizador: {sorted(c.value for c in missing)}")
    return table


class BeamAnalysis:
    """
    Fachada: elige el analizador por condición y envuelve la ecuación en un
    AnalysisResult. Condición desconocida => UnsupportedConditionError.
    """

    def __init__(self, settings: Optional[AnalysisSettings] = None):
        self.settings = settings or AnalysisSettings()
        self.analyzers = build_analyzers(self.settings)

    def analyzer_for(self, condition: ConditionLike) -> ConditionAnalyzer:
        return self.analyzers[Condition.parse(condition)]

    def get_deflection(
        self,
        beam: Beam,
        load: float,
        condition: ConditionLike,
        correction_factor: Optional[float] = None,
    ) -> AnalysisResult:
        cond = Condition.parse(condition)
        if correction_factor is None:
            correction_factor = self.settings.correction_factor
        equation = self.analyzers[cond].deflection_equation(beam, load, correction_factor)
        logger.debug("Flecha: %s, w=%g, k=%g", cond.value, load, correction_factor)
        return AnalysisResult(beam=beam, load=load, equation=equation,
                              condition=cond, quantity=Quantity.DEFLECTION,
                              samples_per_segment=self.settings.samples_per_segment)

    def get_bending_moment(self, beam: Beam, load: float, condition: ConditionLike) -> AnalysisResult:
        cond = Condition.parse(condition)
        equation = self.analyzers[cond].bending_moment_equation(beam, load)
        logger.debug("Momento flector: %s, w=%g", cond.value, load)
        return AnalysisResult(beam=beam, load=load, equation=equation,
                              condition=cond, quantity=Quantity.BENDING_MOMENT,
                              samples_per_segment=self.settings.samples_per_segment)

    def get_shear_force(self, beam: Beam, load: float, condition: ConditionLike) -> AnalysisResult:
        cond = Condition.parse(condition)
        equation = self.analyzers[cond].shear_force_equation(beam, load)
        logger.debug("Corte: %s, w=%g", cond.value, load)
        return AnalysisResult(beam=beam, load=load, equation=equation,
                              condition=cond, quantity=Quantity.SHEAR_FORCE,
                              samples_per_segment=self.settings.samples_per_segment)
