# path: tests/test_plotter.py
import os
import tempfile
import warnings

import numpy as np
import pytest

from beam_analysis.domain.results import AnalysisResult
from beam_analysis.engine.analysis import BeamAnalysis
from beam_analysis.engine.sampling import span_positions
from beam_analysis.view.plotter import AnalysisPlotter, _fmt_plain
from beam_analysis.view.style import PlotStyle


def test_plot_bending_moment(simple_beam):
    res = BeamAnalysis().get_bending_moment(simple_beam, 10.0, "simply-supported")
    plotter = AnalysisPlotter()
    ok = plotter.plot(res, "Bending moment", span_positions(simple_beam, "simply-supported", 12), "M [kN·m]")
    assert ok
    ax = plotter.axes
    assert ax.get_xlabel() == "Span (m)"
    assert ax.get_ylabel() == "M [kN·m]"
    ydata = ax.get_lines()[0].get_ydata()
    assert np.min(ydata) == -45.0


def test_plot_default_y_label(two_span_beam):
    res = BeamAnalysis().get_shear_force(two_span_beam, 10.0, "two-span-unequal")
    plotter = AnalysisPlotter(PlotStyle(annotate_extrema=False))
    assert plotter.plot(res, "Shear", span_positions(two_span_beam, "two-span-unequal", 5))
    assert plotter.axes.get_ylabel() == "Value"


def test_plot_with_no_valid_points_clears_previous(simple_beam):
    plotter = AnalysisPlotter()
    good = BeamAnalysis().get_shear_force(simple_beam, 10.0, "simply-supported")
    assert plotter.plot(good, "Shear", [0.0, 3.0, 6.0])
    assert plotter.figure is not None

    def always_fails(x):
        raise ValueError("bad sample")

    bad = AnalysisResult(beam=good.beam, load=good.load, equation=always_fails,
                         condition=good.condition, quantity=good.quantity)
    assert plotter.plot(bad, "Broken", [0.0, 1.0, 2.0]) is False
    assert plotter.figure is None
    assert plotter.axes is None


def test_plot_replaces_previous_figure(simple_beam):
    plotter = AnalysisPlotter()
    res = BeamAnalysis().get_deflection(simple_beam, 10.0, "simply-supported")
    plotter.plot(res, "A", [0.0, 3.0, 6.0])
    first = plotter.figure
    plotter.plot(res, "B", [0.0, 3.0, 6.0])
    assert plotter.figure is not first
    assert plotter.axes.get_title() == "B"


def test_save_creates_file(two_span_beam):
    res = BeamAnalysis().get_deflection(two_span_beam, 10.0, "two-span-unequal")
    plotter = AnalysisPlotter()
    assert plotter.plot(res, "Deflection", span_positions(two_span_beam, "two-span-unequal", 20), "δ [mm]")
    with tempfile.TemporaryDirectory() as td:
        out = os.path.join(td, "deflection.png")
        plotter.save(out)
        assert os.path.exists(out)
        assert os.path.getsize(out) > 0


def test_save_without_figure_raises():
    with pytest.raises(RuntimeError):
        AnalysisPlotter().save("never.png")


def test_fmt_plain():
    assert _fmt_plain(45.0) == "45"
    assert _fmt_plain(-12.3456) == "-12.35"


def test_plot_single_point_has_non_singular_limits(simple_beam):
    res = BeamAnalysis().get_bending_moment(simple_beam, 10.0, "simply-supported")
    plotter = AnalysisPlotter()
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert plotter.plot(res, "Single", [3.0, 3.0])
    x_lo, x_hi = plotter.axes.get_xlim()
    assert x_lo < 3.0 < x_hi
