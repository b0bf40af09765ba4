"""Tests for the BMI helper."""

import pytest

from app.services.body_metrics import calculate_bmi


@pytest.mark.parametrize("weight,height,bmi,category", [
    (70, 175, 22.9, "Normal"),
    (50, 180, 15.4, "Underweight"),
    (90, 175, 29.4, "Overweight"),
    (100, 170, 34.6, "Obese"),
])
def test_bmi_categories(weight, height, bmi, category):
    result = calculate_bmi(weight, height)

    assert result.bmi == bmi
    assert result.category == category


@pytest.mark.parametrize("weight,height", [(0, 175), (70, 0), (None, 175), (70, None), (-5, 160)])
def test_missing_measurements_give_no_result(weight, height):
    assert calculate_bmi(weight, height) is None
