from __future__ import annotations

import math

import pytest

from churn_form.errors import InputCoercionError
from churn_form.form.coercion import apply_input, coerce_value, parse_float, parse_int
from churn_form.form.features import FeatureSet, to_payload


@pytest.mark.parametrize(
    "raw,expected",
    [("12", 12), ("  7", 7), ("-3", -3), ("12.7", 12), ("150", 150), ("42abc", 42), ("+5", 5)],
)
def test_parse_int_prefix(raw: str, expected: int) -> None:
    assert parse_int(raw) == expected


@pytest.mark.parametrize(
    "raw,expected",
    [("65.5", 65.5), ("0", 0.0), (".5", 0.5), ("1e3", 1000.0), ("-10.25", -10.25), ("99.9$", 99.9)],
)
def test_parse_float_prefix(raw: str, expected: float) -> None:
    assert parse_float(raw) == expected


@pytest.mark.parametrize("raw", ["", "abc", "-", " . "])
def test_unparseable_text_is_nan(raw: str) -> None:
    assert math.isnan(parse_int(raw))
    assert math.isnan(parse_float(raw))


def test_enum_pass_through() -> None:
    assert coerce_value("InternetService", "Fiber optic") == "Fiber optic"
    assert coerce_value("internet_service", "No") == "No"


def test_enum_outside_option_set() -> None:
    with pytest.raises(InputCoercionError) as excinfo:
        coerce_value("Contract", "Three year")
    assert excinfo.value.field == "Contract"


def test_enum_match_is_case_sensitive() -> None:
    with pytest.raises(InputCoercionError):
        coerce_value("gender", "female")


def test_senior_citizen_parses_option_value() -> None:
    assert coerce_value("SeniorCitizen", "1") == 1
    assert coerce_value("SeniorCitizen", 0) == 0


def test_out_of_range_values_pass_through() -> None:
    assert coerce_value("tenure", "250") == 250
    assert coerce_value("tenure", "-1") == -1
    assert coerce_value("MonthlyCharges", "-20.5") == -20.5


def test_permissive_mode_passes_nan() -> None:
    assert math.isnan(coerce_value("tenure", "twelve"))
    assert math.isnan(coerce_value("TotalCharges", ""))


def test_strict_mode_rejects_unparseable_text() -> None:
    with pytest.raises(InputCoercionError) as excinfo:
        coerce_value("TotalCharges", "lots", strict=True)
    assert excinfo.value.raw == "lots"
    # out-of-range is still accepted in strict mode
    assert coerce_value("tenure", "101", strict=True) == 101


def test_apply_input_updates_single_field(features: FeatureSet) -> None:
    updated = apply_input(features, "MonthlyCharges", "99.95")

    before = to_payload(features)["features"]
    after = to_payload(updated)["features"]
    assert after["MonthlyCharges"] == 99.95
    assert {k: v for k, v in after.items() if k != "MonthlyCharges"} == {
        k: v for k, v in before.items() if k != "MonthlyCharges"
    }


def test_apply_input_rejection_leaves_record_unchanged(features: FeatureSet) -> None:
    with pytest.raises(InputCoercionError):
        apply_input(features, "tenure", "n/a", strict=True)
    assert features.tenure_months == 12


def test_unknown_field() -> None:
    with pytest.raises(KeyError):
        coerce_value("CustomerID", "CUST_001")
