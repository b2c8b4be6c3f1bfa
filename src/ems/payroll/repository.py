from __future__ import annotations

from typing import Optional

from ..common.crud import CrudRepository


class PayrollRepository(CrudRepository):
    def exists_for_period(self, *, employee_id: int, month: int, year: int, exclude_id: Optional[int] = None) -> bool:
        raise NotImplementedError
