"""Tests for drillpress/operation_synthesizer.py module."""
import pytest

from drillpress.models import DrillConfig, DrillType, Hole
from drillpress.operation_synthesizer import (
    SYNTHESIZERS,
    synthesize_counterbore,
    synthesize_hole,
    synthesize_plunge,
    synthesize_pocket
)


def _commands(lines):
    """Non-comment, non-blank lines."""
    return [line for line in lines if line and not line.startswith("'")]


class TestPlunge:
    """Tests for straight plunge holes."""

    def test_three_instructions(self):
        lines = synthesize_plunge(Hole(1.0, 2.0), 0.25, 0.5)
        assert lines == [
            "J2,1.000,2.000  ' Position over hole",
            "MZ,-0.500  ' Plunge to depth",
            "JZ,%(safeZ)  ' Retract to safe Z",
        ]

    def test_depth_sign_normalized(self):
        """Test negative depth still plunges downward."""
        lines = synthesize_plunge(Hole(0, 0), 0.25, -0.5)
        assert lines[1].startswith("MZ,-0.500")

    @pytest.mark.parametrize('drill_type', ['through', 'blind', 'bogus', ''])
    def test_plunge_types_and_fallback(self, drill_type):
        """Test through, blind and unknown types all plunge."""
        config = DrillConfig(type=drill_type, diameter=0.25, depth=0.5)
        lines = synthesize_hole(Hole(1.0, 1.0), config)
        assert len(lines) == 3
        assert lines[1].startswith("MZ,-0.500")


class TestPocket:
    """Tests for helical pocket holes."""

    def test_equal_passes(self):
        """Test diameter 0.5, depth 1.0 gives four 0.25 passes."""
        lines = synthesize_pocket(Hole(2.0, 3.0), 0.5, 1.0)
        assert lines[0] == "' Pocket hole: 4 depth passes"
        helix = [line for line in lines if line.startswith("CG")]
        assert len(helix) == 4
        depths = [line.split("  ")[0].split(",")[8] for line in helix]
        assert depths == ["-0.250", "-0.500", "-0.750", "-1.000"]

    def test_passes_evened_out(self):
        """Test depth 0.6 at cap 0.25 becomes three 0.2 passes."""
        lines = synthesize_pocket(Hole(0, 0), 1.0, 0.6)
        assert lines[0] == "' Pocket hole: 3 depth passes"
        assert "' Depth pass 1 to -0.200\"" in lines
        assert "' Depth pass 3 to -0.600\"" in lines

    def test_small_diameter_cap(self):
        """Test a 0.2 bit limits passes to 0.1 deep."""
        lines = synthesize_pocket(Hole(0, 0), 0.2, 0.45)
        assert lines[0] == "' Pocket hole: 5 depth passes"

    def test_circle_geometry(self):
        """Test each pass circles the hole at its radius."""
        lines = synthesize_pocket(Hole(2.0, 3.0), 0.5, 0.25)
        assert lines == [
            "' Pocket hole: 1 depth passes",
            "J2,2.000,3.000  ' Move to center",
            "' Depth pass 1 to -0.250\"",
            "M2,2.250,3.000  ' Move to circle edge",
            "CG,,2.250,3.000,-0.250,0.000,T,1,-0.250,1,,,1  ' Helical circle to depth",
            "M2,2.000,3.000  ' Return to center",
            "JZ,%(safeZ)  ' Retract to safe Z",
        ]

    def test_single_retract_at_end(self):
        lines = synthesize_pocket(Hole(0, 0), 0.5, 1.0)
        retracts = [line for line in lines if line.startswith("JZ")]
        assert len(retracts) == 1
        assert lines[-1].startswith("JZ,%(safeZ)")

    def test_zero_radius_plunges(self):
        """Test a point hole plunges straight each pass without circling."""
        lines = synthesize_pocket(Hole(1.0, 1.0), 0.0, 0.5)
        assert not any(line.startswith("CG") for line in lines)
        assert any(line.startswith("MZ,-0.500") for line in lines)

    def test_pocket_dispatch(self, pocket_config):
        lines = synthesize_hole(Hole(0, 0), pocket_config)
        assert lines[0] == "' Pocket hole: 4 depth passes"


class TestCounterbore:
    """Tests for counterbore holes."""

    def test_pilot_then_pocket(self, counterbore_config):
        lines = synthesize_counterbore(Hole(1.0, 1.0), counterbore_config)
        assert lines[0] == "' Drilling pilot hole"
        assert lines[1:4] == synthesize_plunge(Hole(1.0, 1.0), 0.25, 0.75)
        assert lines[4] == ''
        assert lines[5] == "' Counterbore pocket"
        assert lines[6:] == synthesize_pocket(Hole(1.0, 1.0), 0.5, 0.25)

    def test_pocket_uses_counterbore_radius(self, counterbore_config):
        lines = synthesize_hole(Hole(1.0, 1.0), counterbore_config)
        assert "M2,1.250,1.000  ' Move to circle edge" in lines

    def test_missing_counterbore_fields_degrade(self):
        """Test missing cb_depth leaves only the pilot hole."""
        config = DrillConfig(type='counterbore', diameter=0.25, depth=0.75, cb_diameter=0.5)
        lines = synthesize_hole(Hole(0, 0), config)
        assert len(_commands(lines)) == 3
        assert not any("Counterbore" in line for line in lines)


class TestDispatch:
    """Tests for the synthesizer table."""

    def test_every_type_registered(self):
        assert set(SYNTHESIZERS) == set(DrillType)

    def test_enum_type_accepted(self):
        config = DrillConfig(type=DrillType.POCKET, diameter=0.5, depth=0.25)
        assert config.type == 'pocket'
        lines = synthesize_hole(Hole(0, 0), config)
        assert any(line.startswith("CG") for line in lines)

    def test_invalid_config_does_not_raise(self):
        """Test unvalidated configs still produce output."""
        lines = synthesize_hole(Hole(0, 0), DrillConfig(type='pocket'))
        assert lines[-1].startswith("JZ")
