from __future__ import annotations

import logging
import math
import numbers
from typing import Iterable, List, Optional, Set, Tuple, Union

import numpy as np

from beam_analysis.domain.beam import Beam
from beam_analysis.domain.conditions import Condition
from beam_analysis.domain.results import AnalysisResult, Discontinuity, Equation, Point, SingleValue

logger = logging.getLogger(__name__)


def _breakpoints(beam: Beam, condition: Union[Condition, str]) -> List[float]:
    cond = Condition.parse(condition)
    if cond is Condition.SIMPLY_SUPPORTED:
        return [0.0, float(beam.primary_span)]
    return [0.0, float(beam.primary_span), beam.total_span]


def span_positions(beam: Beam, condition: Union[Condition, str], n_per_segment: int = 50) -> np.ndarray:
    """
    Posiciones de muestreo a lo largo de la viga.
    Los apoyos (0, L1, L_total) quedan incluidos exactamente, así la
    discontinuidad en L1 se evalúa en el apoyo y no cerca de él.
    """
    n = int(n_per_segment)
    if n < 1:
        raise ValueError("n_per_segment debe ser >= 1.")

    bps = _breakpoints(beam, condition)
    xs: List[float] = []
    for a, b in zip(bps[:-1], bps[1:]):
        xs.extend(np.linspace(a, b, n, endpoint=False, dtype=float).tolist())
    xs.append(bps[-1])
    return np.asarray(xs, dtype=float)


def _is_finite_number(v: object) -> bool:
    return isinstance(v, numbers.Real) and not isinstance(v, bool) and math.isfinite(v)


def collect_points(equation: Equation, x_values: Iterable[float]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Evalúa la ecuación en cada x y devuelve (x, y) listos para graficar:
    - discontinuidades => se agregan ambos puntos (izq., der.)
    - errores de evaluación o valores mal formados => se descartan
    - puntos no finitos (NaN / inf) => se descartan
    - duplicados exactos (x, y) => se conserva el primero
    """
    x_out: List[float] = []
    y_out: List[float] = []
    seen: Set[Tuple[float, float]] = set()
    n_failed = 0
    n_invalid = 0

    for x in x_values:
        try:
            value = equation(x)
        except Exception as exc:
            n_failed += 1
            logger.debug("Error evaluando x=%r: %s", x, exc)
            continue

        if not isinstance(value, (SingleValue, Discontinuity)):
            n_invalid += 1
            logger.debug("Resultado inválido en x=%r: %r", x, value)
            continue

        for p in value.points():
            if not isinstance(p, Point) or not (_is_finite_number(p.x) and _is_finite_number(p.y)):
                n_invalid += 1
                logger.debug("Punto inválido en x=%r: %r", x, p)
                continue
            key = (float(p.x), float(p.y))
            if key in seen:
                continue
            seen.add(key)
            x_out.append(key[0])
            y_out.append(key[1])

    if n_failed or n_invalid:
        logger.warning("Puntos descartados: %d con error, %d inválidos.", n_failed, n_invalid)

    return np.asarray(x_out, dtype=float), np.asarray(y_out, dtype=float)


def sample_result(result: AnalysisResult, n_per_segment: Optional[int] = None) -> Tuple[np.ndarray, np.ndarray]:
    """n_per_segment=None => el del resultado (AnalysisSettings.samples_per_segment)."""
    if n_per_segment is None:
        n_per_segment = result.samples_per_segment
    xs = span_positions(result.beam, result.condition, n_per_segment)
    return collect_points(result.equation, xs)
