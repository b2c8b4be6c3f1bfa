from __future__ import annotations

from decimal import Decimal

import pytest

from ems.core.exceptions import ValidationError
from ems.performance.service import PerformanceService


@pytest.fixture
def service(memory_repo, employee_factory):
    return PerformanceService(memory_repo(), memory_repo([employee_factory(1)]))


def review_form(**overrides):
    form = {"employee_id": "1", "review_date": "2025-06-01", "score": "4.5", "comments": "Solid quarter."}
    form.update(overrides)
    return form


@pytest.mark.parametrize("score", ["1.0", "5.0", "3"])
def test_scores_inside_range_are_accepted(service, fixed_today, score):
    assert service.create(review_form(score=score)).score == Decimal(score)


@pytest.mark.parametrize("score", ["0.99", "5.01", "0.5", "5.5"])
def test_scores_outside_range_are_rejected(service, fixed_today, score):
    with pytest.raises(ValidationError) as exc:
        service.create(review_form(score=score))

    assert exc.value.errors["score"] == ["Score must be between 1.0 and 5.0."]


@pytest.mark.parametrize("score", ["0.999", "5.001"])
def test_scores_with_three_decimals_are_rejected(service, fixed_today, score):
    with pytest.raises(ValidationError) as exc:
        service.create(review_form(score=score))

    assert exc.value.errors["score"] == ["Score can have at most 2 decimal places"]


def test_score_must_fit_its_column(service, fixed_today):
    with pytest.raises(ValidationError) as exc:
        service.create(review_form(score="1e3"))

    assert exc.value.errors["score"] == ["Score must be less than 100"]


def test_review_date_cannot_be_in_future(service, fixed_today):
    with pytest.raises(ValidationError) as exc:
        service.create(review_form(review_date="2025-06-16"))

    assert exc.value.errors["review_date"] == ["Review date cannot be in the future."]


def test_review_today_is_accepted(service, fixed_today):
    assert service.create(review_form(review_date="2025-06-15")).review_date == fixed_today


def test_comments_are_required(service, fixed_today):
    with pytest.raises(ValidationError) as exc:
        service.create(review_form(comments="   "))

    assert "comments" in exc.value.errors
