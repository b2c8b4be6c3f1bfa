from __future__ import annotations

from decimal import Decimal

import pytest

from ems.core.exceptions import ValidationError
from ems.payroll.service import DUPLICATE_PERIOD_MESSAGE, PayrollService, compute_net_pay


@pytest.fixture
def payrolls(memory_repo):
    class Payrolls(memory_repo):
        def exists_for_period(self, *, employee_id, month, year, exclude_id=None):
            return any(
                p.employee_id == employee_id and p.month == month and p.year == year and p.id != exclude_id
                for p in self.items.values()
            )

    return Payrolls()


@pytest.fixture
def service(payrolls, memory_repo, employee_factory):
    employees = memory_repo([employee_factory(5), employee_factory(6, first="Bob", last="Tran")])
    return PayrollService(payrolls, employees)


def payroll_form(**overrides):
    form = {"employee_id": "5", "month": "3", "year": "2024", "salary": "5000", "bonus": "500", "deductions": "200"}
    form.update(overrides)
    return form


def test_net_pay_is_derived():
    assert compute_net_pay(Decimal("5000"), Decimal("500"), Decimal("200")) == Decimal("5300")


def test_create_computes_net_pay_and_ignores_submitted_value(service, payrolls):
    record = service.create(payroll_form(net_pay="1"))

    assert record.net_pay == Decimal("5300")
    assert payrolls.count() == 1


def test_duplicate_period_is_rejected(service, payrolls):
    service.create(payroll_form())

    with pytest.raises(ValidationError) as exc:
        service.create(payroll_form(bonus="0"))

    assert DUPLICATE_PERIOD_MESSAGE in exc.value.errors[""]
    assert payrolls.count() == 1


def test_same_period_for_another_employee_is_allowed(service, payrolls):
    service.create(payroll_form())
    service.create(payroll_form(employee_id="6"))

    assert payrolls.count() == 2


def test_editing_a_record_keeps_its_own_period(service, payrolls):
    record = service.create(payroll_form())

    updated = service.update(record.id, payroll_form(id=str(record.id), deductions="0"))

    assert updated.net_pay == Decimal("5500")
    assert payrolls.count() == 1


def test_month_and_year_bounds(service):
    with pytest.raises(ValidationError) as exc:
        service.create(payroll_form(month="13", year="1999"))

    assert exc.value.errors["month"] == ["Month must be between 1 and 12."]
    assert exc.value.errors["year"] == ["Year must be between 2000 and 2100."]


def test_negative_amounts_are_rejected(service):
    with pytest.raises(ValidationError) as exc:
        service.create(payroll_form(bonus="-1"))

    assert "bonus" in exc.value.errors


def test_choice_label_shows_base_salary(service):
    labels = dict(service.employee_choices())

    assert labels[5] == "Alice Nguyen (Base: $5,200.00)"


def test_net_pay_must_fit_its_column(service, payrolls):
    with pytest.raises(ValidationError) as exc:
        service.create(payroll_form(salary="9999999999999999", bonus="9999999999999999", deductions="0"))

    assert exc.value.errors[""] == ["Net pay is too large."]
    assert payrolls.count() == 0
