from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

import numpy as np
from matplotlib.figure import Figure

from beam_analysis.domain.results import AnalysisResult
from beam_analysis.engine.sampling import collect_points
from beam_analysis.view.style import PlotStyle

logger = logging.getLogger(__name__)


# -------------------------
# Helpers formato
# -------------------------
def _fmt_plain(v: float, decimals: int = 2) -> str:
    """Formato fijo (sin notación científica) y recorte de ceros."""
    s = f"{float(v):.{decimals}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _clamp(v: float, lo: float, hi: float) -> float:
    return float(min(max(v, lo), hi))


def _annotate_extrema(ax, x: np.ndarray, y: np.ndarray, font_size: int = 8):
    """
    Marca el máximo y el mínimo global.
    - Evita marcar valores ~0 (1% del máximo absoluto)
    - Reubica labels dentro del recuadro
    """
    if len(x) == 0:
        return

    max_abs = float(np.max(np.abs(y)))
    if max_abs <= 0.0:
        return
    y_abs_min = 0.01 * max_abs

    picked: List[tuple[str, int]] = []
    for kind, i in (("max", int(np.argmax(y))), ("min", int(np.argmin(y)))):
        if abs(float(y[i])) < y_abs_min:
            continue
        if any(i == j for _, j in picked):
            continue
        picked.append((kind, i))

    x_min, x_max = ax.get_xlim()
    y_min, y_max = ax.get_ylim()
    mx = 0.03 * float(x_max - x_min)
    my = 0.03 * float(y_max - y_min)

    for kind, i in picked:
        xi = float(x[i])
        yi = float(y[i])

        ax.scatter([xi], [yi], s=18, zorder=6)

        if kind == "max":
            ty, va = yi + my, "bottom"
        else:
            ty, va = yi - my, "top"

        tx = _clamp(xi, x_min + mx, x_max - mx)
        ty = _clamp(ty, y_min + my, y_max - my)

        ax.text(tx, ty, _fmt_plain(yi, 2), ha="center", va=va, fontsize=font_size, zorder=7)


class AnalysisPlotter:
    """
    Grafica el resultado de un análisis (flecha / momento / corte).

    Es dueño de una única Figure: cada plot() descarta la anterior.
    """

    def __init__(self, style: Optional[PlotStyle] = None):
        self.style = style or PlotStyle()
        self.figure: Optional[Figure] = None

    def clear(self) -> None:
        if self.figure is not None:
            self.figure.clear()
            self.figure = None

    def plot(
        self,
        data: AnalysisResult,
        label: str,
        x_values: Iterable[float],
        y_axis_label: Optional[str] = None,
    ) -> bool:
        """
        Devuelve False (y no deja gráfico) si no hay ningún punto válido.
        """
        self.clear()

        x, y = collect_points(data.equation, x_values)
        if x.size == 0:
            logger.error("Sin puntos válidos para graficar: %s", label)
            return False

        st = self.style
        fig = Figure(figsize=st.figsize, dpi=st.dpi)
        ax = fig.add_subplot(1, 1, 1)

        ax.plot(x, y, color=st.line_color, linewidth=st.line_lw, label=label)
        if st.fill:
            ax.fill_between(x, y, 0.0, color=st.line_color, alpha=st.fill_alpha)
        ax.axhline(0.0, linewidth=1.0)

        x_lo, x_hi = float(np.min(x)), float(np.max(x))
        if x_hi <= x_lo:
            # un solo x: límites no singulares
            pad = max(abs(x_lo) * 0.05, 0.5)
            x_lo, x_hi = x_lo - pad, x_hi + pad
        ax.set_xlim(x_lo, x_hi)
        ax.set_xlabel(st.x_label, fontsize=st.font_size)
        ax.set_ylabel(y_axis_label or st.default_y_label, fontsize=st.font_size)
        ax.set_title(label, fontsize=st.font_size)
        ax.grid(True, alpha=0.25)

        if st.annotate_extrema:
            _annotate_extrema(ax, x, y)

        self.figure = fig
        logger.info("Gráfico '%s': %d puntos (%s, %s).",
                    label, x.size, data.condition.value, data.quantity.value)
        return True

    @property
    def axes(self):
        if self.figure is None or not self.figure.axes:
            return None
        return self.figure.axes[0]

    def save(self, path: Union[str, Path]) -> Path:
        if self.figure is None:
            raise RuntimeError("No hay gráfico para guardar.")
        p = Path(path)
        self.figure.savefig(p)
        logger.info("Gráfico guardado: %s", p)
        return p
