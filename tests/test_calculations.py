"""
Tests for grounding resistance calculation engine.
"""

import math
import pytest
import numpy as np
from core.calculations import (
    GroundingSystem, adjusted_resistivity, base_resistivity, calculate,
    coupling_factor, efficiency, efficiency_rating, fault_current,
    parallel_resistance, radial_reduction_factor, single_rod_resistance,
    system_status, weather_humidity
)
from core.models import GroundingConfiguration, SoilCategory, SystemStatus, WeatherCondition


class TestResistivity:
    """Test soil resistivity lookup and weather adjustment."""

    def test_base_resistivity_table(self):
        """Test tabulated resistivity for every soil category."""
        expected = {'wet': 10, 'clay': 40, 'loam': 100, 'sandy': 200,
                    'gravel': 400, 'rocky': 1000, 'dry': 1500}
        for soil, value in expected.items():
            assert base_resistivity(soil) == value
            assert base_resistivity(SoilCategory(soil)) == value

    def test_unknown_soil_defaults(self):
        """Test unknown soil type falls back to 100 ohm-m."""
        assert base_resistivity('peat') == 100

    def test_weather_adjustment(self):
        """Test weather and humidity factors."""
        assert adjusted_resistivity(100, 'sunny', 0.0) == pytest.approx(100)
        assert adjusted_resistivity(100, 'rain', 0.0) == pytest.approx(50)
        assert adjusted_resistivity(100, WeatherCondition.SNOW, 0.0) == pytest.approx(120)
        assert adjusted_resistivity(40, 'sunny', 0.5) == pytest.approx(34)

    def test_unknown_weather_has_no_effect(self):
        """Test unknown weather uses a factor of 1.0."""
        assert adjusted_resistivity(100, 'hail', 0.0) == pytest.approx(100)

    def test_storm_full_humidity_is_lowest_factor(self):
        """Storm with saturated soil gives 0.21 of base resistivity."""
        lowest = adjusted_resistivity(1.0, 'storm', 1.0)
        assert lowest == pytest.approx(0.21)

        for weather in WeatherCondition:
            for humidity in np.linspace(0, 1, 11):
                assert adjusted_resistivity(1.0, weather, humidity) >= lowest - 1e-12

    def test_weather_humidity(self):
        """Test typical humidity per weather condition."""
        assert weather_humidity('rain') == 0.9
        assert weather_humidity('storm') == 1.0
        assert weather_humidity('snow') == 0.7
        assert weather_humidity('sunny') == 0.3
        assert weather_humidity('fog') == 0.3


class TestRodFormulas:
    """Test single rod, coupling and parallel combination."""

    def test_single_rod_resistance(self):
        """Test R = rho/(2 pi L) * ln(4L/d)."""
        result = single_rod_resistance(34, 2.4, 0.016)
        expected = (34 / (2 * math.pi * 2.4)) * math.log(600)
        assert result == pytest.approx(expected)
        assert abs(result - 14.43) < 0.01

    def test_degenerate_rod_geometry(self):
        """Test non-positive length or diameter gives infinite resistance."""
        assert single_rod_resistance(40, 0, 0.016) == math.inf
        assert single_rod_resistance(40, 2.4, 0) == math.inf
        assert single_rod_resistance(40, -1, 0.016) == math.inf

    def test_coupling_steps(self):
        """Test coupling factor at and between ratio boundaries."""
        cases = [
            (5.0, 0.0), (2.0, 0.0), (1.99, 0.1), (1.5, 0.1), (1.25, 0.2),
            (1.0, 0.2), (0.8, 0.35), (0.7, 0.35), (0.6, 0.5), (0.5, 0.5), (0.3, 0.7)
        ]
        for ratio, factor in cases:
            assert coupling_factor(ratio * 2.0, 2.0) == factor

    def test_coupling_with_degenerate_length(self):
        """Non-positive rod length counts as unlimited spacing: no coupling."""
        assert coupling_factor(3.0, 0) == 0.0
        assert coupling_factor(3.0, -2.4) == 0.0
        assert coupling_factor(0, 0) == 0.0

    def test_coupling_monotonic_in_ratio(self):
        """Coupling never increases as spacing grows."""
        spacings = np.linspace(0.1, 10, 200)
        factors = [coupling_factor(s, 2.4) for s in spacings]
        assert all(a >= b for a, b in zip(factors, factors[1:]))
        assert all(0 <= f <= 0.7 for f in factors)

    def test_parallel_resistance(self):
        """Test parallel combination with coupling penalty."""
        assert parallel_resistance(10, 1, 0.5) == 10
        assert parallel_resistance(10, 4, 0.0) == pytest.approx(2.5)
        assert parallel_resistance(10, 4, 0.2) == pytest.approx(4.0)
        assert parallel_resistance(10, 0, 0.2) == math.inf

    def test_more_rods_never_increase_resistance(self):
        """Test monotonicity in rod count for every coupling step."""
        for coupling in [0.0, 0.1, 0.2, 0.35, 0.5, 0.7]:
            values = [parallel_resistance(14.4, n, coupling) for n in range(1, 30)]
            assert all(a >= b for a, b in zip(values, values[1:]))


class TestRadialsAndDerivedMetrics:
    """Test radial reduction, efficiency, fault current and status."""

    def test_radial_reduction(self):
        """Test radial reduction factor and its 40% cap."""
        assert radial_reduction_factor(0, 5) == 1.0
        assert radial_reduction_factor(8, 0) == 1.0
        assert radial_reduction_factor(8, 5) == pytest.approx(0.8)
        assert radial_reduction_factor(16, 15) == pytest.approx(0.6)
        assert radial_reduction_factor(10000, 10000) == pytest.approx(0.6)

    def test_negative_radials_have_no_effect(self):
        """Negative radial count or length is treated like no radials."""
        assert radial_reduction_factor(-1, 5) == 1.0
        assert radial_reduction_factor(8, -5) == 1.0
        assert radial_reduction_factor(-8, -5) == 1.0

    def test_efficiency_endpoints(self):
        """Test efficiency at target and at ten times target."""
        assert efficiency(5, 5) == 100
        assert efficiency(50, 5) == 0
        assert efficiency(27.5, 5) == pytest.approx(50)
        assert efficiency(1, 5) == 100
        assert efficiency(0, 5) == 100
        assert efficiency(math.inf, 5) == 0

    def test_efficiency_monotonic(self):
        """Efficiency never increases with resistance."""
        values = [efficiency(r, 5) for r in np.linspace(0.1, 60, 300)]
        assert all(a >= b for a, b in zip(values, values[1:]))

    def test_fault_current(self):
        """Test Ohm's law and its guards."""
        assert fault_current(220, 4) == pytest.approx(55)
        assert fault_current(220, 0) == 0
        assert fault_current(220, -1) == 0
        assert fault_current(220, math.inf) == 0

    def test_status_thresholds(self):
        """Test inclusive upper bounds of each status."""
        assert system_status(5).status == SystemStatus.EXCELLENT
        assert system_status(5.01).status == SystemStatus.GOOD
        assert system_status(10).status == SystemStatus.GOOD
        assert system_status(25).status == SystemStatus.WARNING
        assert system_status(25.01).status == SystemStatus.DANGER
        assert system_status(math.inf).message == "Danger"
        assert system_status(1).color == '#00ff88'

    def test_efficiency_rating(self):
        """Test efficiency display classes."""
        assert efficiency_rating(80) == "normal"
        assert efficiency_rating(79.9) == "warning"
        assert efficiency_rating(50) == "warning"
        assert efficiency_rating(49.9) == "danger"


class TestGroundingSystem:
    """Test configuration holder and orchestration."""

    def test_default_scenario(self):
        """Clay, sunny, 4 rods at 3 m with 8 radials of 5 m."""
        metrics = GroundingSystem().calculate()

        assert metrics.resistivity == pytest.approx(34)
        assert abs(metrics.single_rod_resistance - 14.42) < 0.01
        assert metrics.coupling_factor == 0.2
        assert abs(metrics.parallel_resistance - 5.77) < 0.01
        assert metrics.radial_factor == pytest.approx(0.8)
        assert abs(metrics.total_resistance - 4.615) < 0.001
        assert metrics.status.status == SystemStatus.EXCELLENT
        assert metrics.efficiency == pytest.approx(100)
        assert metrics.fault_current == pytest.approx(220 / metrics.total_resistance)
        assert abs(metrics.fault_current - 47.67) < 0.01

    def test_no_rods(self):
        """Zero rods means no grounding."""
        system = GroundingSystem()
        system.config.rod_count = 0
        metrics = system.calculate()

        assert math.isfinite(metrics.single_rod_resistance)
        assert metrics.total_resistance == math.inf
        assert metrics.efficiency == 0
        assert metrics.status.status == SystemStatus.DANGER
        assert metrics.fault_current == 0

    @pytest.mark.parametrize("field_name", ['rod_length', 'rod_diameter'])
    def test_degenerate_rod_geometry_end_to_end(self, field_name):
        """Zero rod length or diameter gives infinite resistance without errors."""
        system = GroundingSystem()
        system.set_parameter(field_name, 0)
        metrics = system.calculate()

        assert metrics.single_rod_resistance == math.inf
        assert metrics.total_resistance == math.inf
        assert metrics.efficiency == 0
        assert metrics.status.status == SystemStatus.DANGER
        assert metrics.fault_current == 0

    def test_calculate_is_deterministic(self):
        """Two calls without mutation return identical metrics."""
        system = GroundingSystem()
        before = system.config.to_dict()

        assert system.calculate() == system.calculate()
        assert system.config.to_dict() == before

    def test_module_calculate_matches_system(self):
        config = GroundingConfiguration(soil_type='sandy', rod_count=6)
        assert calculate(config) == GroundingSystem(config).calculate()

    def test_set_parameter(self):
        """Test setting fields by name."""
        system = GroundingSystem()
        system.set_parameter('rod_count', 6.0)
        system.set_parameter('soil_type', 'rocky')
        system.set_parameter('humidity', 2.0)

        assert system.config.rod_count == 6
        assert isinstance(system.config.rod_count, int)
        assert system.config.soil_type == SoilCategory.ROCKY
        assert system.config.humidity == 1.0

    def test_set_unknown_parameter(self):
        """Unknown parameter names are rejected."""
        with pytest.raises(ValueError):
            GroundingSystem().set_parameter('mast_height', 10)

    def test_set_weather_syncs_humidity(self):
        """Changing weather moves humidity to the weather's typical value."""
        system = GroundingSystem()
        system.set_weather('rain')
        assert system.config.weather == WeatherCondition.RAIN
        assert system.config.humidity == 0.9

        system.config.humidity = 0.4
        system.set_weather('snow', sync_humidity=False)
        assert system.config.humidity == 0.4

    def test_wetter_weather_lowers_resistance(self):
        system = GroundingSystem()
        sunny = system.calculate().total_resistance
        system.set_weather('storm')
        assert system.calculate().total_resistance < sunny

    def test_reset(self):
        system = GroundingSystem()
        system.update({'rod_count': 10, 'soil_type': 'dry'})
        system.reset()
        assert system.config == GroundingConfiguration()

    def test_sweep_rod_count(self):
        """Sweep over rod count is non-increasing and leaves the configuration alone."""
        system = GroundingSystem()
        resistances = system.sweep('rod_count', range(1, 13))

        assert isinstance(resistances, np.ndarray)
        assert len(resistances) == 12
        assert np.all(np.diff(resistances) <= 1e-12)
        assert system.config.rod_count == 4
        assert resistances[3] == pytest.approx(system.calculate().total_resistance)

    def test_sweep_unknown_parameter(self):
        with pytest.raises(ValueError):
            GroundingSystem().sweep('mast_height', [1, 2])

    @pytest.mark.parametrize("field_name", ['soil_type', 'weather'])
    def test_sweep_categorical_parameter(self, field_name):
        """Soil type and weather are rejected before any value is converted."""
        with pytest.raises(ValueError, match="not numeric"):
            GroundingSystem().sweep(field_name, ['clay', 'rocky'])


if __name__ == "__main__":
    pytest.main([__file__])
