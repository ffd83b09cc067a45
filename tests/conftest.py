# path: tests/conftest.py
import pytest

from beam_analysis.domain.beam import Beam
from beam_analysis.domain.material import Material


@pytest.fixture
def steel():
    return Material(name="Steel", properties={"EI": 200000.0})


@pytest.fixture
def simple_beam(steel):
    return Beam(primary_span=6.0, secondary_span=0.0, material=steel)


@pytest.fixture
def two_span_beam(steel):
    return Beam(primary_span=6.0, secondary_span=4.0, material=steel)


@pytest.fixture
def stiff_two_span():
    # IPE 200: EI = 4.0803e12 N·mm² = 4080.3 kN·m²
    ipe = Material(name="IPE 200", properties={"EI": 4.0803e12})
    return Beam(primary_span=6.0, secondary_span=4.0, material=ipe)
