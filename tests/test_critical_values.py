import math

import pytest

from statlab.errors import InvalidParameterError
from statlab.stats.critical_values import t_critical, z_critical


@pytest.mark.parametrize("level, expected", [(0.90, 1.645), (0.95, 1.96), (0.99, 2.576)])
def test_z_table_values(level, expected):
    assert z_critical(level) == expected


def test_z_approximation_for_other_levels():
    tail = 0.1
    w = -2 * math.log(tail)
    expected = math.sqrt(w) * (1 - 1 / (2 * w**2))
    assert math.isclose(z_critical(0.80), expected)


def test_z_approximation_is_clamped():
    assert z_critical(0.05) == 1.0
    assert 1.0 <= z_critical(0.999) <= 4.0


def test_z_fixed_value_for_tiny_tail():
    assert z_critical(0.99999) == 3.89


@pytest.mark.parametrize("level", [0.0, 1.0, -0.5, 1.5, float("nan")])
def test_invalid_confidence_level_rejected(level):
    with pytest.raises(InvalidParameterError):
        z_critical(level)


def test_t_converges_to_z_for_large_df():
    assert t_critical(1000, 0.95) == 1.96
    assert t_critical(5000, 0.99) == 2.576


def test_t_first_order_correction():
    z = 1.96
    assert math.isclose(t_critical(9, 0.95), z * (1 + z * z / 36))
    assert t_critical(9, 0.95) > z


def test_t_uses_z_value_of_same_level():
    z = z_critical(0.80)
    assert math.isclose(t_critical(4, 0.80), z * (1 + z * z / 16))


def test_t_floor_at_one():
    assert t_critical(10, 0.05) >= 1.0


def test_t_rejects_zero_df():
    with pytest.raises(InvalidParameterError):
        t_critical(0, 0.95)


def test_exact_keeps_table_values_and_improves_others():
    pytest.importorskip("scipy")
    assert z_critical(0.95, exact=True) == 1.96
    assert math.isclose(z_critical(0.80, exact=True), 1.2815515655446004, rel_tol=1e-9)
    assert math.isclose(t_critical(9, 0.95, exact=True), 2.2621571627409915, rel_tol=1e-9)


def test_exact_large_df_uses_exact_normal_quantile():
    pytest.importorskip("scipy")
    value = t_critical(1000, 0.80, exact=True)
    assert value == z_critical(0.80, exact=True)
    assert math.isclose(value, 1.2815515655446004, rel_tol=1e-9)
