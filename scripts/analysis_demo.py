# path: scripts/analysis_demo.py
import os
import sys
import traceback

THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT = os.path.abspath(os.path.join(THIS_DIR, ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from beam_analysis.services.logging_setup import setup_logging
logger = setup_logging()

def _excepthook(exctype, value, tb):
    msg = "".join(traceback.format_exception(exctype, value, tb))
    logger.error("Excepción no capturada:\n%s", msg)
    sys.__excepthook__(exctype, value, tb)

sys.excepthook = _excepthook

from beam_analysis.domain.beam import Beam
from beam_analysis.engine.analysis import BeamAnalysis
from beam_analysis.engine.sampling import span_positions
from beam_analysis.engine.two_span import TwoSpanUnequalAnalyzer
from beam_analysis.materials.catalog import MaterialCatalog, default_catalog_path
from beam_analysis.view.plotter import AnalysisPlotter

OUT_DIR = os.path.join(ROOT, "out")


def main():
    os.makedirs(OUT_DIR, exist_ok=True)
    catalog = MaterialCatalog.from_txt(default_catalog_path())
    material = catalog.get("IPE 300 S275")

    analysis = BeamAnalysis()
    plotter = AnalysisPlotter()
    load = 10.0  # kN/m

    cases = [
        ("simply-supported", Beam(primary_span=6.0, secondary_span=0.0, material=material)),
        ("two-span-unequal", Beam(primary_span=6.0, secondary_span=4.0, material=material)),
    ]

    for condition, beam in cases:
        xs = span_positions(beam, condition, n_per_segment=60)
        plots = [
            (analysis.get_deflection(beam, load, condition, correction_factor=1.0), "Deflection", "δ [mm]"),
            (analysis.get_bending_moment(beam, load, condition), "Bending moment", "M [kN·m]"),
            (analysis.get_shear_force(beam, load, condition), "Shear force", "V [kN]"),
        ]
        for result, label, y_label in plots:
            if plotter.plot(result, f"{label} ({condition})", xs, y_label):
                name = f"{condition}_{result.quantity.value}.png"
                plotter.save(os.path.join(OUT_DIR, name))

    r = TwoSpanUnequalAnalyzer().reactions(cases[1][1], load)
    print("M1 =", r.M1)
    print("R1 =", r.R1, " R2 =", r.R2, " R3 =", r.R3)


if __name__ == "__main__":
    main()
