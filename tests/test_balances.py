import math

import pytest

from fractionator.core.validation import InputError
from fractionator.distillation import (
    ColumnSpec, product_rates, boil_up_ratio,
    rectifying_operating_line, stripping_operating_line,
    molar_to_mass, mass_to_molar,
)
from fractionator.distillation.duty import latent_heat, calculate_duty, condenser_duty, reboiler_duty


class TestProductRates:
    def test_symmetric_split(self):
        D, B = product_rates(1000.0, 0.5, 0.95, 0.05)
        assert D == pytest.approx(500.0)
        assert B == pytest.approx(500.0)

    @pytest.mark.parametrize("F,xF,xD,xB", [
        (100.0, 0.3, 0.9, 0.02),
        (2500.0, 0.45, 0.99, 0.1),
        (1.0, 0.6, 0.7, 0.5),
    ])
    def test_balances_close(self, F, xF, xD, xB):
        D, B = product_rates(F, xF, xD, xB)
        assert D + B == pytest.approx(F)
        assert D * xD + B * xB == pytest.approx(F * xF)

    def test_degenerate_split(self, caplog):
        D, B = product_rates(1000.0, 0.5, 0.5, 0.5)
        assert math.isnan(D) and math.isnan(B)
        assert "degenerate product split" in caplog.text

    def test_boil_up_ratio(self):
        assert boil_up_ratio(1.0, 500.0, 500.0) == pytest.approx(2.0)
        assert boil_up_ratio(3.0, 200.0, 800.0) == pytest.approx(1.0)


class TestOperatingLines:
    def test_rectifying_passes_through_distillate(self):
        assert rectifying_operating_line(2.5, 0.95, 0.95) == pytest.approx(0.95)

    def test_rectifying_value(self):
        assert rectifying_operating_line(1.0, 0.95, 0.5) == pytest.approx(0.725)

    def test_stripping_passes_through_bottoms(self):
        assert stripping_operating_line(1.7, 0.05, 0.05) == pytest.approx(0.05)

    def test_stripping_value(self):
        assert stripping_operating_line(2.0, 0.05, 0.3) == pytest.approx(0.65 / 3.0)

    def test_stripping_inverts_vapor_form(self):
        S, xB, x = 1.5, 0.05, 0.3
        y = (S + 1.0) / S * x - xB / S
        assert stripping_operating_line(S, xB, y) == pytest.approx(x)


class TestMassRates:
    def test_molar_to_mass(self, light, heavy):
        assert molar_to_mass(10.0, 1.0, light, heavy) == pytest.approx(440.97)
        assert molar_to_mass(10.0, 0.0, light, heavy) == pytest.approx(581.2)

    def test_mass_to_molar_inverts(self, light, heavy):
        mass = molar_to_mass(123.0, 0.37, light, heavy)
        assert mass_to_molar(mass, 0.37, light, heavy) == pytest.approx(123.0)


class TestDuty:
    def test_latent_heat_endpoints(self, light, heavy):
        assert latent_heat(1.0, light, heavy) == pytest.approx(light.h_vap)
        assert latent_heat(0.0, light, heavy) == pytest.approx(heavy.h_vap)

    def test_calculate_duty(self, light, heavy):
        expected = 100.0 * (0.5 * light.h_vap + 0.5 * heavy.h_vap) / 1000.0
        assert calculate_duty(100.0, 0.5, light, heavy) == pytest.approx(expected)

    def test_condenser_and_reboiler(self, light, heavy):
        assert condenser_duty(500.0, 2.0, 0.95, light, heavy) == pytest.approx(
            calculate_duty(1000.0, 0.95, light, heavy))
        assert reboiler_duty(500.0, 3.0, 0.05, light, heavy) == pytest.approx(
            calculate_duty(1500.0, 0.05, light, heavy))


class TestColumnSpec:
    def test_valid(self, spec):
        spec.validate()
        assert spec.to_dict()["total_trays"] == 10

    @pytest.mark.parametrize("changes", [
        {"feed_rate": 0.0},
        {"pressure": -5.0},
        {"x_feed": 1.0},
        {"x_distillate": 0.4},
        {"x_bottoms": 0.6},
        {"feed_tray": 11},
        {"feed_tray": 0},
        {"total_trays": 0},
    ])
    def test_invalid(self, spec, changes):
        fields = spec.to_dict()
        fields.update(changes)
        with pytest.raises(InputError):
            ColumnSpec(**fields).validate()

    def test_from_mass_rate(self, light, heavy):
        mass = molar_to_mass(1000.0, 0.5, light, heavy)
        spec = ColumnSpec.from_mass_rate(mass, 0.5, 0.95, 0.05, 100.0, 5, 10, light, heavy)
        assert spec.feed_rate == pytest.approx(1000.0)
        assert spec.pressure == pytest.approx(114.7)
        spec.validate()
