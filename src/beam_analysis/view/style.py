from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

@dataclass(frozen=True)
class PlotStyle:
    line_color: str = "red"
    line_lw: float = 2.0

    fill: bool = True
    fill_alpha: float = 0.1

    figsize: Tuple[float, float] = (8.0, 4.0)
    dpi: int = 100
    font_size: int = 10

    x_label: str = "Span (m)"
    default_y_label: str = "Value"

    annotate_extrema: bool = True
