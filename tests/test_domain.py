# path: tests/test_domain.py
import math

import pytest

from beam_analysis.domain.beam import Beam
from beam_analysis.domain.conditions import Condition
from beam_analysis.domain.errors import InvalidBeamError, UnsupportedConditionError
from beam_analysis.domain.material import Material
from beam_analysis.domain.results import Discontinuity, Point, SingleValue


def test_material_properties_are_read_only():
    props = {"EI": 1.0}
    m = Material(name="M", properties=props)
    props["EI"] = 2.0
    assert m.stiffness() == 1.0
    with pytest.raises(TypeError):
        m.properties["EI"] = 3.0


def test_material_missing_property_is_nan():
    m = Material(name="M", properties={"GA": 5.0})
    assert math.isnan(m.stiffness("EI"))


def test_beam_rejects_non_positive_primary_span():
    m = Material(name="M", properties={"EI": 1.0})
    with pytest.raises(InvalidBeamError):
        Beam(primary_span=0.0, secondary_span=0.0, material=m)
    with pytest.raises(InvalidBeamError):
        Beam(primary_span=3.0, secondary_span=-1.0, material=m)


def test_beam_total_span():
    m = Material(name="M", properties={"EI": 1.0})
    assert Beam(primary_span=6.0, secondary_span=4.0, material=m).total_span == 10.0


def test_condition_parse():
    assert Condition.parse("simply-supported") is Condition.SIMPLY_SUPPORTED
    assert Condition.parse(" Two-Span-Unequal ") is Condition.TWO_SPAN_UNEQUAL
    assert Condition.parse(Condition.TWO_SPAN_UNEQUAL) is Condition.TWO_SPAN_UNEQUAL
    with pytest.raises(UnsupportedConditionError):
        Condition.parse("nonexistent")
    with pytest.raises(UnsupportedConditionError):
        Condition.parse(None)


def test_equation_values_are_tagged():
    s = SingleValue(Point(1.0, 2.0))
    d = Discontinuity(left=Point(1.0, 2.0), right=Point(1.0, 3.0))
    assert s.kind == "single"
    assert d.kind == "discontinuity"
    assert s.points() == (Point(1.0, 2.0),)
    assert d.points() == (Point(1.0, 2.0), Point(1.0, 3.0))
