import pytest

from src.payroll_admin.payroll_admin.core.exceptions import ConfigurationError
from src.payroll_admin.payroll_admin.payroll.calculator.standard_calculator import (
    StandardPayrollCalculator,
    compute_daily_pay,
)
from src.payroll_admin.payroll_admin.settings.model import PayrollSettings


def test_normal_day_pays_hourly_rate():
    pay = compute_daily_pay(4.25, 850, False, False, 8.5, 6)

    assert pay.base_pay == pytest.approx(425)
    assert pay.ot_pay == 0


def test_slab_day_caps_base_and_pays_excess_at_slab_rate():
    pay = compute_daily_pay(10, 850, True, False, 8.5, 6)

    assert pay.base_pay == pytest.approx(850)
    assert pay.ot_pay == pytest.approx(212.5)
    assert pay.total == pytest.approx(1062.5)


def test_normal_day_past_standard_hours_keeps_normal_rate():
    pay = compute_daily_pay(10, 850, False, False, 8.5, 6)

    assert pay.base_pay == pytest.approx(1000)
    assert pay.ot_pay == 0


def test_sunday_beats_slab_and_ignores_hours():
    pay = compute_daily_pay(12, 800, True, True, 8.5, 6)

    assert pay.base_pay == 800
    assert pay.ot_pay == 0


@pytest.mark.parametrize("standard_hours, slab_hours", [(0, 6), (8.5, 0), (-1, 6), (None, 6)])
def test_unusable_settings_raise_configuration_error(standard_hours, slab_hours):
    calc = StandardPayrollCalculator()

    with pytest.raises(ConfigurationError):
        calc.daily_pay(
            worked_hours=8,
            salary=800,
            slab_mode=False,
            sunday_mode=False,
            settings=PayrollSettings(standard_hours=standard_hours, slab_hours=slab_hours),
        )
