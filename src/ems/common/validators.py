from __future__ import annotations

import re
from datetime import date, time
from decimal import Decimal, InvalidOperation
from typing import Mapping, Optional

from email_validator import EmailNotValidError, validate_email

from ..core.constants import MONEY_MAX_DIGITS, MONEY_PLACES
from ..core.exceptions import ValidationError
from .datetime_utils import parse_clock_time, parse_iso_date

_PHONE_RE = re.compile(r"^\+?[0-9][0-9 ().\-]{5,27}[0-9]$")


class FormReader:
    """Reads typed values out of a submitted form and collects field errors.

    Each accessor returns ``None`` when the value is missing or malformed and
    records a message under the field name instead of raising, so a single
    submission reports every problem at once.
    """

    def __init__(self, form: Mapping[str, str]):
        self._form = form
        self.errors: dict[str, list[str]] = {}

    def error(self, field: str, message: str) -> None:
        self.errors.setdefault(field, []).append(message)

    def has_error(self, field: str) -> bool:
        return field in self.errors

    def value(self, field: str) -> str:
        """Submitted value as-is (not stripped), for secrets such as passwords."""
        value = self._form.get(field)
        return value if isinstance(value, str) else ""

    def raw(self, field: str) -> str:
        value = self._form.get(field)
        return value.strip() if isinstance(value, str) else ""

    def raise_if_invalid(self) -> None:
        if self.errors:
            raise ValidationError(self.errors)

    def _present(self, field: str, label: str, required: bool, message: Optional[str]) -> Optional[str]:
        value = self.raw(field)
        if not value:
            if required:
                self.error(field, message or f"{label} is required")
            return None
        return value

    def text(
        self,
        field: str,
        label: str,
        *,
        required: bool = True,
        max_length: Optional[int] = None,
        message: Optional[str] = None,
    ) -> Optional[str]:
        value = self._present(field, label, required, message)
        if value is None:
            return None
        if max_length is not None and len(value) > max_length:
            self.error(field, f"{label} cannot be longer than {max_length} characters")
            return None
        return value

    def integer(self, field: str, label: str, *, required: bool = True, message: Optional[str] = None) -> Optional[int]:
        value = self._present(field, label, required, message)
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            self.error(field, f"{label} must be a whole number")
            return None

    def decimal(
        self,
        field: str,
        label: str,
        *,
        required: bool = True,
        max_digits: int = MONEY_MAX_DIGITS,
        places: int = MONEY_PLACES,
    ) -> Optional[Decimal]:
        """Parse a number that must fit a ``Numeric(max_digits, places)`` column exactly."""
        value = self._present(field, label, required, None)
        if value is None:
            return None
        try:
            number = Decimal(value)
        except InvalidOperation:
            number = None
        if number is None or not number.is_finite():
            self.error(field, f"{label} must be a number")
            return None
        limit = 10 ** (max_digits - places)
        if abs(number) >= limit:
            self.error(field, f"{label} must be less than {limit:,}")
            return None
        if number != number.quantize(Decimal(1).scaleb(-places)):
            self.error(field, f"{label} can have at most {places} decimal places")
            return None
        return number

    def date(self, field: str, label: str, *, required: bool = True) -> Optional[date]:
        value = self._present(field, label, required, None)
        if value is None:
            return None
        try:
            return parse_iso_date(value)
        except ValueError:
            self.error(field, f"{label} must be a valid date (YYYY-MM-DD)")
            return None

    def time(self, field: str, label: str, *, required: bool = True) -> Optional[time]:
        value = self._present(field, label, required, None)
        if value is None:
            return None
        try:
            return parse_clock_time(value)
        except ValueError:
            self.error(field, f"{label} must be a valid time (HH:MM)")
            return None

    def email(self, field: str, label: str, *, required: bool = True, max_length: int = 255) -> Optional[str]:
        value = self.text(field, label, required=required, max_length=max_length)
        if value is None:
            return None
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            self.error(field, "Invalid email address")
            return None
        return value

    def phone(self, field: str, label: str, *, required: bool = False) -> Optional[str]:
        value = self._present(field, label, required, None)
        if value is None:
            return None
        if not _PHONE_RE.match(value):
            self.error(field, "Invalid phone number")
            return None
        return value
