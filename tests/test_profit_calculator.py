import pytest

from positions.calculators import ProfitCalculator, make_fee_config


def test_profit_at_percentage_without_fee(fees_off):
    result = ProfitCalculator.at_percentage(150.0, 10, 20.0, fees_off)
    assert result == {"percentage": 10.0, "selling_price": 165.0, "gross": 3300.0, "net": 300.0}


def test_sell_fee_charged_once_on_marked_up_price():
    fees = make_fee_config(False, 0, True, 1)
    result = ProfitCalculator.at_percentage(100.0, 10, 10.0, fees)
    # 110 - 1.1
    assert result["selling_price"] == 108.9
    assert result["gross"] == 1089.0
    assert result["net"] == 89.0


def test_profit_absent_without_average(fees_off):
    assert ProfitCalculator.at_percentage(None, 10, 20.0, fees_off) is None


def test_profit_absent_for_non_numeric_percentage(fees_off):
    assert ProfitCalculator.at_percentage(150.0, "abc", 20.0, fees_off) is None


def test_percentage_from_target_round_trips(fees_off):
    assert ProfitCalculator.percentage_from_target(150.0, "165", fees_off) == pytest.approx(10.0, abs=1e-4)


def test_percentage_from_target_with_sell_fee():
    fees = make_fee_config(False, 0, True, 10)
    # 200 * 0.9 = 180 -> +20%
    assert ProfitCalculator.percentage_from_target(150.0, 200, fees) == 20.0


@pytest.mark.parametrize("target", ["", "   ", "abc", None])
def test_percentage_from_target_absent_for_blank_target(target, fees_off):
    assert ProfitCalculator.percentage_from_target(150.0, target, fees_off) is None


def test_percentage_from_target_absent_without_average(fees_off):
    assert ProfitCalculator.percentage_from_target(None, "165", fees_off) is None


def test_targets_table_fixed_rows(fees_off):
    aggregate = {"average_price": 150.0, "total_held_quantity": 20.0, "total_spent": 3000.0}
    rows = ProfitCalculator.targets(aggregate, fees_off)
    assert [r["percentage"] for r in rows] == [1, 2, 3, 4, 5]
    assert rows[0]["selling_price"] == 151.5
    assert rows[0]["net"] == 30.0
    assert not any(r["custom"] for r in rows)


def test_targets_table_custom_row(fees_off):
    aggregate = {"average_price": 150.0, "total_held_quantity": 20.0, "total_spent": 3000.0}
    rows = ProfitCalculator.targets(aggregate, fees_off, percentages=(1,), custom="10")
    assert len(rows) == 2
    assert rows[-1]["custom"] is True
    assert rows[-1]["selling_price"] == 165.0


def test_targets_table_blank_custom_is_omitted(fees_off):
    aggregate = {"average_price": 150.0, "total_held_quantity": 20.0, "total_spent": 3000.0}
    assert len(ProfitCalculator.targets(aggregate, fees_off, custom="  ")) == 5


def test_targets_table_without_data_has_placeholders(fees_off):
    aggregate = {"average_price": None, "total_held_quantity": 0.0, "total_spent": 0.0}
    rows = ProfitCalculator.targets(aggregate, fees_off, custom="abc")
    assert all(r["gross"] is None and r["net"] is None and r["selling_price"] is None for r in rows)
    assert rows[-1]["percentage"] is None


def test_target_summary(fees_off):
    aggregate = {"average_price": 150.0, "total_held_quantity": 20.0, "total_spent": 3000.0}
    summary = ProfitCalculator.target_summary(aggregate, "165", fees_off)
    assert summary["percentage"] == pytest.approx(10.0, abs=1e-4)
    assert summary["gross"] == pytest.approx(3300.0, abs=1e-3)
    assert summary["net"] == pytest.approx(300.0, abs=1e-3)


def test_target_summary_without_data(fees_off):
    aggregate = {"average_price": None, "total_held_quantity": 0.0, "total_spent": 0.0}
    assert ProfitCalculator.target_summary(aggregate, "165", fees_off) is None


def test_negative_tie_rounds_away_from_zero(fees_off):
    # (3199 - 3200) / 3200 * 100 is exactly -0.03125
    assert ProfitCalculator.percentage_from_target(3200.0, "3199", fees_off) == -0.0313


def test_overflowing_projection_is_absent(fees_off):
    assert ProfitCalculator.at_percentage(1e308, 100, 1.0, fees_off) is None


def test_overflowing_target_percentage_is_absent(fees_off):
    assert ProfitCalculator.percentage_from_target(1e-300, "1e300", fees_off) is None


def test_overflowing_rows_show_placeholders(fees_off):
    aggregate = {"average_price": 1e308, "total_held_quantity": 1.0, "total_spent": 1e308}
    rows = ProfitCalculator.targets(aggregate, fees_off, percentages=(100,))
    assert rows[0]["selling_price"] is None and rows[0]["gross"] is None
    assert ProfitCalculator.target_summary(aggregate, "1e308", fees_off) is not None
    assert ProfitCalculator.target_summary({"average_price": 1e-300, "total_held_quantity": 1.0}, "1e300", fees_off) is None
