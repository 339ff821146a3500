import pytest

from patternkit.weights import (
    KG_PER_POUND,
    KilogramAdapter,
    PoundsWeightMachine,
    WeightMachine,
)


def test_pounds_machine_reports_its_reading():
    assert PoundsWeightMachine(150).weight() == 150


def test_one_pound_in_kilograms():
    assert KilogramAdapter(PoundsWeightMachine(1)).weight_in_kg() == pytest.approx(0.453592)


def test_zero_pounds_is_zero_kilograms():
    assert KilogramAdapter(PoundsWeightMachine(0)).weight_in_kg() == 0


def test_conversion_is_linear():
    single = KilogramAdapter(PoundsWeightMachine(37.5)).weight_in_kg()
    double = KilogramAdapter(PoundsWeightMachine(75)).weight_in_kg()
    assert double == pytest.approx(2 * single)


def test_adapter_accepts_any_weight_machine():
    class Fixed(WeightMachine):
        def weight(self):
            return 10.0

    adapter = KilogramAdapter(Fixed())
    assert adapter.weight_in_kg() == pytest.approx(10.0 * KG_PER_POUND)


def test_abstract_machine_cannot_be_created():
    with pytest.raises(TypeError):
        WeightMachine()