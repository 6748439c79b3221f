import logging

import numpy as np
import pandas as pd
import pytest

from statlab.errors import EmptyInputError, InvalidParameterError, UnsupportedDistributionError
from statlab.sampling import (
    distribution_info,
    generate_sample,
    index_series,
    load_sample,
    parse_sample_text,
)
from statlab.stats.estimation import Distribution


def test_generate_default_normal_sample():
    out = generate_sample(seed=0)
    assert len(out.values) == 100
    assert out.info.distribution is Distribution.NORMAL
    assert out.info.parameters == {"mean": 10.0, "std": 5.0}
    assert abs(np.mean(out.values) - 10.0) < 2.0


def test_generate_is_reproducible_with_seed():
    a = generate_sample("gamma", size=20, seed=42)
    b = generate_sample("gamma", size=20, seed=42)
    assert a.values == b.values


@pytest.mark.parametrize("family", [d.value for d in Distribution])
def test_generate_every_family(family):
    out = generate_sample(family, size=50, seed=3)
    assert len(out.values) == 50
    assert all(np.isfinite(out.values))


def test_generate_beta_values_in_unit_interval():
    out = generate_sample("beta", size=200, parameters={"alpha": 2, "beta": 3}, seed=1)
    assert all(0.0 < x < 1.0 for x in out.values)
    assert out.info.parameters == {"alpha": 2.0, "beta": 3.0}


def test_generate_rejects_bad_parameters():
    with pytest.raises(InvalidParameterError):
        generate_sample("normal", parameters={"sigma": 1.0})
    with pytest.raises(InvalidParameterError):
        generate_sample("exponential", parameters={"lambda": 0.0})
    with pytest.raises(InvalidParameterError):
        generate_sample("uniform", parameters={"a": 2.0, "b": 1.0})
    with pytest.raises(InvalidParameterError):
        generate_sample("normal", size=0)
    with pytest.raises(UnsupportedDistributionError):
        generate_sample("cauchy")


def test_distribution_info_carries_display_metadata():
    info = distribution_info("poisson")
    assert info.name == "Poisson"
    assert "λ" in info.formula
    assert info.parameters == {"lambda": 4.0}


def test_load_sample_drops_non_numeric_cells(caplog, tmp_path):
    caplog.set_level(logging.WARNING)
    csv_path = tmp_path / "sample.csv"
    pd.DataFrame(
        {
            "label": ["a", "b", "c", "d"],
            "value": ["1.5", "oops", None, "4.0"],
        }
    ).to_csv(csv_path, index=False)

    values = load_sample(str(csv_path), column="value")
    assert values == [1.5, 4.0]
    assert any("Dropped 2" in rec.message for rec in caplog.records)


def test_load_sample_picks_first_numeric_column(tmp_path):
    csv_path = tmp_path / "sample.csv"
    pd.DataFrame({"name": ["x", "y"], "height": [1.0, 2.0]}).to_csv(csv_path, index=False)
    assert load_sample(str(csv_path)) == [1.0, 2.0]


def test_load_sample_missing_column(tmp_path):
    csv_path = tmp_path / "sample.csv"
    pd.DataFrame({"height": [1.0, 2.0]}).to_csv(csv_path, index=False)
    with pytest.raises(InvalidParameterError, match="not found"):
        load_sample(str(csv_path), column="weight")


def test_load_sample_without_numbers(tmp_path):
    csv_path = tmp_path / "sample.csv"
    pd.DataFrame({"name": ["x", "y"]}).to_csv(csv_path, index=False)
    with pytest.raises(EmptyInputError):
        load_sample(str(csv_path))


def test_parse_sample_text_separators():
    assert parse_sample_text("1, 2;3\n4  5.5") == [1.0, 2.0, 3.0, 4.0, 5.5]


def test_parse_sample_text_errors():
    with pytest.raises(EmptyInputError):
        parse_sample_text("  , ; ")
    with pytest.raises(InvalidParameterError):
        parse_sample_text("1, two, 3")
    with pytest.raises(InvalidParameterError):
        parse_sample_text("1, inf")


def test_index_series():
    df = index_series([3.0, 1.0, 2.0])
    assert df["index"].to_list() == [0, 1, 2]
    assert df["value"].to_list() == [3.0, 1.0, 2.0]
