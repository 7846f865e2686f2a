from datetime import date

import pytest

from src.payroll_admin.payroll_admin.core.exceptions import DuplicateError, NotFoundError, ValidationError


def test_mark_derives_hours_from_clock_times(container, employee_id):
    aid = container.attendance_service.mark(employee_id=employee_id, work_date="2025-01-02", time_in="09:00", time_out="17:45")

    rec = container.attendance_service.get(aid)

    assert rec.work_date == date(2025, 1, 2)
    assert rec.worked_hours == 8.75


def test_mark_handles_shift_past_midnight(container, employee_id):
    aid = container.attendance_service.mark(employee_id=employee_id, work_date="2025-01-02", time_in="22:00", time_out="06:30")

    assert container.attendance_service.get(aid).worked_hours == 8.5


def test_explicit_hours_win_over_clock_times(container, employee_id):
    aid = container.attendance_service.mark(
        employee_id=employee_id, work_date="2025-01-02", time_in="09:00", time_out="17:00", worked_hours="7.5"
    )

    assert container.attendance_service.get(aid).worked_hours == 7.5


def test_second_record_for_same_day_is_rejected(container, employee_id):
    container.attendance_service.mark(employee_id=employee_id, work_date="2025-01-02", worked_hours=8)

    with pytest.raises(DuplicateError):
        container.attendance_service.mark(employee_id=employee_id, work_date="2025-01-02", worked_hours=4)


def test_mark_validates_input(container, employee_id):
    with pytest.raises(ValidationError):
        container.attendance_service.mark(employee_id=999, work_date="2025-01-02", worked_hours=8)
    with pytest.raises(ValidationError):
        container.attendance_service.mark(employee_id=employee_id, work_date="02/01/2025", worked_hours=8)
    with pytest.raises(ValidationError):
        container.attendance_service.mark(employee_id=employee_id, work_date="2025-01-02", worked_hours=-1)
    with pytest.raises(ValidationError):
        container.attendance_service.mark(employee_id=employee_id, work_date="2025-01-02", time_in="9", time_out="17:00")
    with pytest.raises(ValidationError):
        container.attendance_service.mark(employee_id=employee_id, work_date="2025-01-02", worked_hours=8, fare=-5)


def test_edit_recomputes_hours_and_checks_date_clash(container, employee_id):
    first = container.attendance_service.mark(employee_id=employee_id, work_date="2025-01-02", time_in="09:00", time_out="17:00")
    container.attendance_service.mark(employee_id=employee_id, work_date="2025-01-03", worked_hours=8)

    edited = container.attendance_service.edit(first, {"time_out": "18:30", "slab_mode": True})

    assert edited.worked_hours == 9.5
    assert edited.slab_mode is True
    with pytest.raises(DuplicateError):
        container.attendance_service.edit(first, {"work_date": "2025-01-03"})


def test_list_for_month_includes_both_ends(container, employee_id):
    for day in ("2024-12-31", "2025-01-01", "2025-01-31", "2025-02-01"):
        container.attendance_service.mark(employee_id=employee_id, work_date=day, worked_hours=8)

    rows = container.attendance_service.list_for_month("2025-01")

    assert [r.work_date for r in rows] == [date(2025, 1, 1), date(2025, 1, 31)]


def test_delete(container, employee_id):
    aid = container.attendance_service.mark(employee_id=employee_id, work_date="2025-01-02", worked_hours=8)

    container.attendance_service.delete(aid)

    with pytest.raises(NotFoundError):
        container.attendance_service.get(aid)
    with pytest.raises(NotFoundError):
        container.attendance_service.delete(aid)
