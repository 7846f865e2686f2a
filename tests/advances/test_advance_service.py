from datetime import date

import pytest

from src.payroll_admin.payroll_admin.core.exceptions import NotFoundError, ValidationError


def test_give_with_date_sets_effective_month(container, employee_id):
    aid = container.advance_service.give(employee_id=employee_id, amount="500", given_on="2025-01-15", mode="Cash")

    adv = container.advance_service.get(aid)

    assert adv.amount == 500
    assert adv.date == date(2025, 1, 15)
    assert adv.effective_month == "2025-01"
    assert adv.to_dict()["effective_month"] == "2025-01"


def test_deduction_month_alone_is_enough(container, employee_id):
    aid = container.advance_service.give(employee_id=employee_id, amount=500, deduction_month="2025-03")

    assert container.advance_service.get(aid).effective_month == "2025-03"


def test_give_validates_input(container, employee_id):
    with pytest.raises(ValidationError):
        container.advance_service.give(employee_id=employee_id, amount=500)
    with pytest.raises(ValidationError):
        container.advance_service.give(employee_id=employee_id, amount=0, given_on="2025-01-15")
    with pytest.raises(ValidationError):
        container.advance_service.give(employee_id=employee_id, amount=500, deduction_month="2025-3")
    with pytest.raises(ValidationError):
        container.advance_service.give(employee_id=404, amount=500, given_on="2025-01-15")


def test_update_moves_deduction_and_keeps_a_month(container, employee_id):
    aid = container.advance_service.give(employee_id=employee_id, amount=500, given_on="2025-01-15")

    moved = container.advance_service.update(aid, {"deduction_month": "2025-02", "amount": 450})

    assert moved.effective_month == "2025-02"
    assert moved.amount == 450
    with pytest.raises(ValidationError):
        container.advance_service.update(aid, {"date": "", "deduction_month": ""})


def test_list_filters_by_employee_and_delete(container, employee_id):
    other = container.employee_service.create(name="B", salary=850)
    mine = container.advance_service.give(employee_id=employee_id, amount=100, given_on="2025-01-15")
    container.advance_service.give(employee_id=other, amount=200, given_on="2025-01-15")

    assert [a.advance_id for a in container.advance_service.list_all(employee_id=employee_id)] == [mine]

    container.advance_service.delete(mine)
    with pytest.raises(NotFoundError):
        container.advance_service.get(mine)
