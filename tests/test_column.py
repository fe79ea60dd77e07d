import math

import numpy as np
import pytest

from fractionator.core.base import SolverConfig
from fractionator.core.validation import InputError
from fractionator.distillation import (
    ColumnSpec, ColumnSolver, RefluxStatus,
    FenskeEquation, MinimumReflux,
    minimum_reflux_ratio, minimum_trays, has_enough_trays, tray_count_feasible,
    rectifying_section, stripping_section, feed_tray_delta, feed_tray_delta_sweep,
    generate_column_data, solve_reflux_bracket, column_solver,
    product_rates, boil_up_ratio, stripping_operating_line,
)
from fractionator.equilibrium import liq_mol_fraction, vap_mol_fraction


@pytest.fixture
def short_spec(pressure):
    # Fenske needs about 7.1 trays for 0.99/0.01
    return ColumnSpec(
        feed_rate=1000.0, x_feed=0.5, x_distillate=0.99, x_bottoms=0.01,
        pressure=pressure, feed_tray=2, total_trays=3,
    )


class TestFeasibility:
    def test_fenske(self):
        expected = math.log((0.95 / 0.05) * (0.95 / 0.05)) / math.log(2.0)
        assert FenskeEquation.calculate(0.95, 0.05, 2.0) == pytest.approx(expected)

    @pytest.mark.parametrize("xD,xB,alpha", [(1.0, 0.05, 2.0), (0.95, 0.0, 2.0), (0.95, 0.05, 1.0)])
    def test_fenske_degenerate(self, xD, xB, alpha):
        assert FenskeEquation.calculate(xD, xB, alpha) == math.inf

    def test_minimum_reflux_pinch(self):
        slope = (0.95 - 0.8) / (0.95 - 0.5)
        assert MinimumReflux.calculate(0.95, 0.5, 0.8) == pytest.approx(slope / (1 - slope))

    def test_minimum_reflux_degenerate(self):
        assert MinimumReflux.calculate(0.5, 0.5, 0.7) == math.inf
        assert MinimumReflux.calculate(0.95, 0.5, 0.4) == math.inf

    def test_scenario_minimums(self, spec, light, heavy):
        r_min = minimum_reflux_ratio(spec.x_feed, spec.x_distillate, spec.pressure, light, heavy)
        n_min = minimum_trays(spec.x_distillate, spec.x_bottoms, spec.pressure, light, heavy)
        assert 0.3 < r_min < 0.9
        assert 3.0 < n_min < 7.0

    def test_has_enough_trays(self, spec, short_spec, light, heavy):
        assert has_enough_trays(spec, light, heavy)
        assert not has_enough_trays(short_spec, light, heavy)

    @pytest.mark.parametrize("xD,xB", [(0.95, 0.05), (0.99, 0.01)])
    def test_fenske_boundary(self, pressure, light, heavy, xD, xB):
        n_min = minimum_trays(xD, xB, pressure, light, heavy)
        below = math.floor(n_min)
        spec = ColumnSpec(1000.0, 0.5, xD, xB, pressure, below // 2 + 1, below)
        assert not has_enough_trays(spec, light, heavy)

        result = column_solver(spec, light, heavy)
        assert result.status is RefluxStatus.INFEASIBLE
        assert result.reflux_ratio is None
        assert result.minimum_trays == pytest.approx(n_min)

        assert tray_count_feasible(math.ceil(n_min), n_min)

    def test_tray_count_not_finite(self):
        assert not tray_count_feasible(50, math.inf)
        assert not tray_count_feasible(50, float("nan"))


class TestStepping:
    def test_single_rectifying_tray(self, spec, light, heavy):
        x = rectifying_section(1.0, spec.pressure, spec.x_distillate, 1, light, heavy)
        assert x == pytest.approx(liq_mol_fraction(spec.pressure, spec.x_distillate, light, heavy))

    def test_single_stripping_tray(self, spec, light, heavy):
        S = 2.0
        x = stripping_section(S, spec.pressure, spec.x_bottoms, 10, 10, light, heavy)
        y_reboiler = vap_mol_fraction(spec.pressure, spec.x_bottoms, light, heavy)
        assert x == pytest.approx(stripping_operating_line(S, spec.x_bottoms, y_reboiler))

    def test_delta_decreases_with_reflux(self, spec, light, heavy):
        r_min = minimum_reflux_ratio(spec.x_feed, spec.x_distillate, spec.pressure, light, heavy)
        deltas = feed_tray_delta_sweep(spec, np.geomspace(r_min, 8.0 * r_min, 7), light, heavy)
        assert deltas.shape == (7,)
        assert np.all(np.diff(deltas) < 0)
        assert deltas[0] > 0 > deltas[-1]

    def test_column_data_layout(self, spec, light, heavy):
        trays = generate_column_data(spec, 1.0, light, heavy)
        assert [t.tray_number for t in trays] == list(range(1, spec.total_trays + 2))
        assert trays[0].vap_comp == pytest.approx(spec.x_distillate)
        assert trays[-1].liq_comp == spec.x_bottoms
        assert all(t.reflux_ratio == 1.0 for t in trays)

    def test_profile_matches_marches(self, spec, light, heavy):
        R = 1.0
        D, B = product_rates(spec.feed_rate, spec.x_feed, spec.x_distillate, spec.x_bottoms)
        S = boil_up_ratio(R, D, B)
        trays = generate_column_data(spec, R, light, heavy)
        feed = trays[spec.feed_tray - 1]
        below = trays[spec.feed_tray]
        x_rect = rectifying_section(R, spec.pressure, spec.x_distillate, spec.feed_tray, light, heavy)
        x_strip = stripping_section(
            S, spec.pressure, spec.x_bottoms, spec.feed_tray + 1, spec.total_trays, light, heavy
        )
        assert feed.liq_comp == pytest.approx(x_rect, abs=1e-4)
        assert below.liq_comp == pytest.approx(x_strip, abs=1e-4)


class TestRefluxBracket:
    def test_linear_residual(self):
        result = solve_reflux_bracket(lambda R: 1.0 - R, 0.1)
        assert result.converged
        assert abs(1.0 - result.reflux_ratio) < 0.001
        assert abs(result.residual) < 0.001

    def test_root_at_lower_bound(self):
        result = solve_reflux_bracket(lambda R: 0.0, 0.25)
        assert result.status is RefluxStatus.CONVERGED
        assert result.reflux_ratio == 0.25
        assert result.iterations == 0

    def test_skips_non_finite_while_bracketing(self):
        def residual(R):
            return 2.0 - R if R < 0.3 or R > 1.0 else float("nan")

        result = solve_reflux_bracket(residual, 0.1)
        assert result.converged
        assert result.reflux_ratio == pytest.approx(2.0, abs=1e-3)

    def test_no_sign_change(self):
        result = solve_reflux_bracket(lambda R: 1.0, 0.1, SolverConfig(maxiter=20))
        assert result.status is RefluxStatus.INFEASIBLE
        assert result.reflux_ratio is None
        assert result.iterations == 20

    def test_nan_everywhere(self):
        result = solve_reflux_bracket(lambda R: float("nan"), 0.1)
        assert result.status is RefluxStatus.INFEASIBLE

    def test_iteration_cap(self):
        result = solve_reflux_bracket(lambda R: 1.0 - R, 0.1, SolverConfig(maxiter=5))
        assert result.status is RefluxStatus.NOT_CONVERGED
        assert result.reflux_ratio is None
        assert result.iterations == 5


class TestColumnSolver:
    def test_scenario_converges(self, spec, light, heavy):
        result = column_solver(spec, light, heavy)
        assert result.status is RefluxStatus.CONVERGED
        R = result.reflux_ratio
        r_min = minimum_reflux_ratio(spec.x_feed, spec.x_distillate, spec.pressure, light, heavy)
        assert result.minimum_reflux == pytest.approx(r_min)
        assert R > r_min
        assert result.minimum_trays < spec.total_trays
        assert abs(feed_tray_delta(R, spec, light, heavy)) < 0.001

    def test_too_few_trays(self, short_spec, light, heavy):
        result = column_solver(short_spec, light, heavy)
        assert result.status is RefluxStatus.INFEASIBLE
        assert result.reflux_ratio is None

    def test_unreachable_tolerance(self, spec, light, heavy):
        result = column_solver(spec, light, heavy, SolverConfig(tol=1e-14))
        assert result.status is RefluxStatus.NOT_CONVERGED

    def test_equilibrium_failure_reported(self, spec, light, heavy):
        result = column_solver(spec, light, heavy, SolverConfig(vle_maxiter=1))
        assert result.status is RefluxStatus.NOT_CONVERGED
        assert result.message

    @pytest.mark.parametrize("feed_tray,total_trays", [(1, 8), (8, 8), (4, 12)])
    def test_status_always_reported(self, pressure, light, heavy, feed_tray, total_trays):
        spec = ColumnSpec(1000.0, 0.4, 0.9, 0.1, pressure, feed_tray, total_trays)
        result = column_solver(spec, light, heavy)
        assert result.status in tuple(RefluxStatus)
        if result.converged:
            assert abs(feed_tray_delta(result.reflux_ratio, spec, light, heavy)) < 0.001


class TestColumnFacade:
    def test_solve(self, spec, light, heavy):
        result = ColumnSolver(spec, light, heavy).solve()
        assert result["status"] == "converged"

        trays = result["trays"]
        assert len(trays) == spec.total_trays + 1

        profile = result["profile"]
        assert np.all(np.diff(profile["x"]) < 0)
        assert np.all(np.diff(profile["temperature"]) > 0)
        assert np.all(profile["y"] >= profile["x"])

        flows = result["flows"]
        assert flows["D"] == pytest.approx(500.0)
        assert flows["B"] == pytest.approx(500.0)
        assert flows["reflux"] == pytest.approx(500.0 * result["reflux_ratio"])
        assert flows["F_mass"] == pytest.approx(flows["D_mass"] + flows["B_mass"])

        assert result["condenser"]["duty"] > 0
        assert result["reboiler"]["duty"] > 0
        assert (result["condenser"]["temperature"]
                < result["feed_temperature"]
                < result["reboiler"]["temperature"])

    def test_infeasible_solve_has_no_profile(self, short_spec, light, heavy):
        result = ColumnSolver(short_spec, light, heavy).solve()
        assert result["status"] == "infeasible"
        assert "trays" not in result
        assert math.isfinite(result["minimum_trays"])

    def test_equilibrium_failure_reported(self, spec, light, heavy):
        result = ColumnSolver(spec, light, heavy, SolverConfig(vle_maxiter=1)).solve()
        assert result["status"] == "not_converged"
        assert result["reflux"].message
        assert "trays" not in result
        assert math.isnan(result["minimum_trays"])
        assert math.isnan(result["minimum_reflux"])

    def test_minimums_reported(self, spec, light, heavy):
        result = ColumnSolver(spec, light, heavy).solve()
        assert result["minimum_reflux"] == pytest.approx(
            minimum_reflux_ratio(spec.x_feed, spec.x_distillate, spec.pressure, light, heavy))
        assert result["minimum_trays"] == pytest.approx(
            minimum_trays(spec.x_distillate, spec.x_bottoms, spec.pressure, light, heavy))
        assert result["reflux_ratio"] > result["minimum_reflux"]

    def test_invalid_spec_rejected(self, spec, light, heavy):
        fields = spec.to_dict()
        fields["feed_tray"] = 20
        with pytest.raises(InputError):
            ColumnSolver(ColumnSpec(**fields), light, heavy)
